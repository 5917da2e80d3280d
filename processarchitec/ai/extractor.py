"""Recover a workflow JSON object from free-form LLM output."""

import json
from typing import Any, Dict, Iterator

import structlog
from pydantic import ValidationError

from processarchitec.ai.errors import ParseError
from processarchitec.workflow.document import WorkflowDocument

logger = structlog.get_logger(__name__)

_decoder = json.JSONDecoder()


class ResponseExtractor:
    """Best-effort syntactic recovery of the outermost JSON object.

    Providers often wrap the object in prose or markdown fences. Each ``{``
    is tried in order and decoded with the JSON scanner, so braces inside
    string literals never end an object early.
    """

    def extract(self, raw_text: str) -> WorkflowDocument:
        data = self._find_object(raw_text or "")
        try:
            return WorkflowDocument.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"JSON object is not a workflow document: {e}") from e

    def _find_object(self, text: str) -> Dict[str, Any]:
        if "{" not in text:
            try:
                value = json.loads(text)
            except json.JSONDecodeError as e:
                raise ParseError(f"No JSON object found in response: {e}") from e
            if not isinstance(value, dict):
                raise ParseError(f"Expected a JSON object, got {type(value).__name__}")
            return value

        for value in self._candidates(text):
            return value

        raise ParseError("No decodable JSON object found in response")

    def _candidates(self, text: str) -> Iterator[Dict[str, Any]]:
        start = text.find("{")
        while start != -1:
            try:
                value, end = _decoder.raw_decode(text, start)
            except json.JSONDecodeError:
                pass
            else:
                if isinstance(value, dict):
                    logger.debug("json_object_located", start=start, end=end)
                    yield value
            start = text.find("{", start + 1)


def extract(raw_text: str) -> WorkflowDocument:
    return ResponseExtractor().extract(raw_text)
