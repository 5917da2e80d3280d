"""ProcessArchitec workflow generator."""

__version__ = "1.0.0"

from processarchitec.ai.orchestrator import FallbackOrchestrator
from processarchitec.workflow.document import BusinessContext, WorkflowDocument
from processarchitec.workflow.normalizer import Normalizer

__all__ = [
    "BusinessContext",
    "FallbackOrchestrator",
    "Normalizer",
    "WorkflowDocument",
]
