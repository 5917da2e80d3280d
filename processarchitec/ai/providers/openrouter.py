"""OpenRouter AI provider integration."""

from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from processarchitec.ai.providers.base import ChatCompletionsProvider, GenerationOptions


@dataclass
class OpenRouterConfig:
    """OpenRouter configuration."""
    api_key: str
    base_url: str = "https://openrouter.ai/api/v1"
    default_model: str = "anthropic/claude-3-sonnet"
    temperature: float = 0.7
    max_tokens: int = 4096
    timeout: float = 60.0
    site_url: Optional[str] = None
    site_name: Optional[str] = None


class OpenRouterProvider(ChatCompletionsProvider):
    """OpenRouter API provider, last in the fallback chain."""

    name = "openrouter"

    def __init__(
        self,
        config: OpenRouterConfig,
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
        headers = super().headers()
        headers["HTTP-Referer"] = self.config.site_url or "https://processarchitec.com"
        headers["X-Title"] = self.config.site_name or "ProcessArchitec"
        return headers
