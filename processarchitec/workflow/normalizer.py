"""Fill structurally absent fields of a candidate workflow document."""

import time
from typing import Callable, Optional

import structlog

from processarchitec.workflow.document import (
    WorkflowDocument,
    default_position,
    default_settings,
    DEFAULT_EXECUTION_ORDER,
)

logger = structlog.get_logger(__name__)


def _millis() -> int:
    return int(time.time() * 1000)


class Normalizer:
    """Idempotent defaulting pass run on every document before it is returned.

    Only absent fields are filled in. Dangling connection targets and
    duplicate node ids are left alone.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _millis

    def normalize(self, doc: WorkflowDocument) -> WorkflowDocument:
        result = doc.model_copy(deep=True)
        filled = []

        if not (result.name and result.name.strip()):
            result.name = f"Generated Workflow - {self._clock()}"
            filled.append("name")

        if result.settings is None:
            result.settings = default_settings()
            filled.append("settings")
        elif "executionOrder" not in result.settings:
            result.settings = {**result.settings, "executionOrder": DEFAULT_EXECUTION_ORDER}
            filled.append("settings.executionOrder")

        if result.nodes is None:
            result.nodes = []
            filled.append("nodes")

        if result.connections is None:
            result.connections = {}
            filled.append("connections")

        for index, node in enumerate(result.nodes):
            if node.position is None:
                node.position = default_position(index)
                filled.append(f"nodes[{index}].position")

        if filled:
            logger.debug("workflow_normalized", workflow=result.name, filled=filled)

        return result


def normalize(doc: WorkflowDocument) -> WorkflowDocument:
    return Normalizer().normalize(doc)
