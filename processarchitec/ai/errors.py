"""Errors raised inside the generation pipeline."""

from typing import Optional


class GenerationError(Exception):
    """Base class for recoverable generation failures."""


class ProviderError(GenerationError):
    """An LLM provider call did not produce usable text.

    ``cause`` is one of ``network``, ``status``, ``timeout`` or
    ``invalid_response``.
    """

    NETWORK = "network"
    STATUS = "status"
    TIMEOUT = "timeout"
    INVALID_RESPONSE = "invalid_response"

    def __init__(
        self,
        provider: str,
        cause: str,
        message: str = "",
        status_code: Optional[int] = None,
    ):
        self.provider = provider
        self.cause = cause
        self.status_code = status_code
        detail = f"{provider} request failed ({cause})"
        if status_code is not None:
            detail += f" [HTTP {status_code}]"
        if message:
            detail += f": {message}"
        super().__init__(detail)


class ParseError(GenerationError):
    """Provider text did not contain a usable workflow JSON object."""
