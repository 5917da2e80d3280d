"""Prompt templates for workflow generation."""

from processarchitec.ai.prompts.workflow import (
    PromptBuilder,
    WORKFLOW_GENERATION_PROMPT,
    WORKFLOW_SYSTEM_PROMPT,
)

__all__ = [
    "PromptBuilder",
    "WORKFLOW_GENERATION_PROMPT",
    "WORKFLOW_SYSTEM_PROMPT",
]
