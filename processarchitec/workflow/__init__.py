"""Workflow document model."""

from processarchitec.workflow.document import (
    BusinessContext,
    Edge,
    Node,
    WorkflowDocument,
    default_position,
    default_settings,
)
from processarchitec.workflow.normalizer import Normalizer, normalize

__all__ = [
    "BusinessContext",
    "Edge",
    "Node",
    "Normalizer",
    "WorkflowDocument",
    "default_position",
    "default_settings",
    "normalize",
]
