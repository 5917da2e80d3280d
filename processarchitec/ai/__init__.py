"""AI workflow generation pipeline."""

from processarchitec.ai.errors import GenerationError, ParseError, ProviderError
from processarchitec.ai.extractor import ResponseExtractor
from processarchitec.ai.heuristic import HeuristicSynthesizer
from processarchitec.ai.orchestrator import (
    FallbackOrchestrator,
    GenerationReport,
    GenerationResult,
    ProviderAttempt,
)
from processarchitec.ai.prompts.workflow import PromptBuilder

__all__ = [
    "FallbackOrchestrator",
    "GenerationError",
    "GenerationReport",
    "GenerationResult",
    "HeuristicSynthesizer",
    "ParseError",
    "PromptBuilder",
    "ProviderAttempt",
    "ProviderError",
    "ResponseExtractor",
]
