"""Anthropic Messages API provider."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from processarchitec.ai.providers.base import GenerationOptions, ProviderClient


@dataclass
class AnthropicConfig:
    """Anthropic configuration."""
    api_key: str
    base_url: str = "https://api.anthropic.com/v1"
    default_model: str = "claude-3-5-sonnet-latest"
    api_version: str = "2023-06-01"
    temperature: float = 0.7
    max_tokens: int = 4096
    timeout: float = 60.0


class AnthropicProvider(ProviderClient):
    """Primary, high-quality provider."""

    name = "anthropic"
    endpoint = "/messages"

    def __init__(
        self,
        config: AnthropicConfig,
        system_prompt: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        super().__init__(
            api_key=config.api_key,
            base_url=config.base_url,
            options=GenerationOptions(
                model=config.default_model,
                max_tokens=config.max_tokens,
                temperature=config.temperature,
                timeout=config.timeout,
            ),
            system_prompt=system_prompt,
            client=client,
        )

    def headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": self.config.api_version,
        }

    def build_payload(self, prompt: str, options: GenerationOptions) -> Dict[str, Any]:
        payload = {
            "model": options.model,
            "max_tokens": options.max_tokens,
            "temperature": options.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.system_prompt:
            payload["system"] = self.system_prompt
        return payload

    def unwrap(self, data: Dict[str, Any]) -> str:
        # content is a list of blocks; only text blocks carry output
        texts = [block["text"] for block in data["content"] if block.get("type") == "text"]
        if not texts:
            raise KeyError("no text block in message content")
        return "".join(texts)
