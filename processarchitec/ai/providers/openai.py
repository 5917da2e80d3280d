"""OpenAI Chat Completions provider."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from processarchitec.ai.providers.base import ChatCompletionsProvider, GenerationOptions


@dataclass
class OpenAIConfig:
    """OpenAI configuration."""
    api_key: str
    base_url: str = "https://api.openai.com/v1"
    default_model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: int = 3000
    timeout: float = 60.0
    json_mode: bool = True


class OpenAIProvider(ChatCompletionsProvider):
    """Secondary, fast provider."""

    name = "openai"

    def __init__(
        self,
        config: OpenAIConfig,
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

    def build_payload(self, prompt: str, options: GenerationOptions) -> Dict[str, Any]:
        payload = super().build_payload(prompt, options)
        if self.config.json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload
