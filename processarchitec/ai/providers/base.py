"""Base class for LLM provider clients."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
import structlog

from processarchitec.ai.errors import ProviderError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GenerationOptions:
    """Sampling and transport options for one provider call."""
    model: str
    max_tokens: int = 3000
    temperature: float = 0.7
    timeout: float = 60.0


class ProviderClient(ABC):
    """An LLM backend able to turn a prompt into raw text.

    Implementations return the model's text verbatim; extracting a workflow
    from it is the caller's job. Every transport or HTTP failure is raised as
    ``ProviderError``.
    """

    name: str = "provider"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        options: GenerationOptions,
        system_prompt: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.options = options
        self.system_prompt = system_prompt
        self.client = client or httpx.AsyncClient(timeout=options.timeout)

    async def generate(self, prompt: str, options: Optional[GenerationOptions] = None) -> str:
        """Send ``prompt`` and return the model's text."""
        opts = options or self.options
        data = await self._post(self.endpoint, self.build_payload(prompt, opts), opts)
        try:
            return self.unwrap(data)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ProviderError(
                self.name,
                ProviderError.INVALID_RESPONSE,
                f"unexpected response body: {e!r}",
            ) from e

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Request path relative to ``base_url``."""

    @abstractmethod
    def headers(self) -> Dict[str, str]:
        """Authentication and API-version headers."""

    @abstractmethod
    def build_payload(self, prompt: str, options: GenerationOptions) -> Dict[str, Any]:
        """Request body for ``prompt``."""

    @abstractmethod
    def unwrap(self, data: Dict[str, Any]) -> str:
        """Pull the generated text out of a successful response body."""

    async def _post(
        self,
        path: str,
        payload: Dict[str, Any],
        options: GenerationOptions,
    ) -> Dict[str, Any]:
        try:
            response = await asyncio.wait_for(
                self.client.post(
                    f"{self.base_url}{path}",
                    json=payload,
                    headers=self.headers(),
                    timeout=options.timeout,
                ),
                timeout=options.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise ProviderError(
                self.name,
                ProviderError.TIMEOUT,
                f"no response within {options.timeout}s",
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(self.name, ProviderError.NETWORK, str(e)) from e

        if not response.is_success:
            logger.warning(
                "provider_http_error",
                provider=self.name,
                model=options.model,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise ProviderError(
                self.name,
                ProviderError.STATUS,
                response.text[:200],
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                self.name,
                ProviderError.INVALID_RESPONSE,
                "response body is not JSON",
            ) from e

    async def close(self):
        """Close the client connection."""
        await self.client.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.options.model!r})"


class ChatCompletionsProvider(ProviderClient):
    """Provider speaking the OpenAI-style ``/chat/completions`` protocol."""

    endpoint = "/chat/completions"

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def build_payload(self, prompt: str, options: GenerationOptions) -> Dict[str, Any]:
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": prompt})

        return {
            "model": options.model,
            "messages": messages,
            "temperature": options.temperature,
            "max_tokens": options.max_tokens,
        }

    def unwrap(self, data: Dict[str, Any]) -> str:
        content = data["choices"][0]["message"]["content"]
        if not isinstance(content, str):
            raise TypeError(f"message content is {type(content).__name__}")
        return content
