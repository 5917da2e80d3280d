"""LLM provider clients, in fallback priority order."""

from typing import List, Optional

import structlog

from processarchitec.ai.prompts.workflow import WORKFLOW_SYSTEM_PROMPT
from processarchitec.ai.providers.anthropic import AnthropicConfig, AnthropicProvider
from processarchitec.ai.providers.base import (
    ChatCompletionsProvider,
    GenerationOptions,
    ProviderClient,
)
from processarchitec.ai.providers.openai import OpenAIConfig, OpenAIProvider
from processarchitec.ai.providers.openrouter import OpenRouterConfig, OpenRouterProvider
from processarchitec.config import Settings, get_settings

logger = structlog.get_logger(__name__)


def build_providers(settings: Optional[Settings] = None) -> List[ProviderClient]:
    """Instantiate every provider whose credential is configured.

    Order is priority: Anthropic, then OpenAI, then OpenRouter. An empty list
    means generation runs on the heuristic synthesizer alone.
    """
    settings = settings or get_settings()
    providers: List[ProviderClient] = []

    if settings.anthropic_api_key:
        providers.append(AnthropicProvider(
            AnthropicConfig(
                api_key=settings.anthropic_api_key,
                base_url=settings.anthropic_base_url,
                default_model=settings.anthropic_model,
                temperature=settings.provider_temperature,
                max_tokens=settings.provider_max_tokens,
                timeout=settings.provider_timeout,
            ),
            system_prompt=WORKFLOW_SYSTEM_PROMPT,
        ))

    if settings.openai_api_key:
        providers.append(OpenAIProvider(
            OpenAIConfig(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                default_model=settings.openai_model,
                temperature=settings.provider_temperature,
                max_tokens=settings.provider_max_tokens,
                timeout=settings.provider_timeout,
            ),
            system_prompt=WORKFLOW_SYSTEM_PROMPT,
        ))

    if settings.openrouter_api_key:
        providers.append(OpenRouterProvider(
            OpenRouterConfig(
                api_key=settings.openrouter_api_key,
                base_url=settings.openrouter_base_url,
                default_model=settings.openrouter_model,
                temperature=settings.provider_temperature,
                max_tokens=settings.provider_max_tokens,
                timeout=settings.provider_timeout,
                site_url=settings.frontend_url,
                site_name=settings.app_name,
            ),
            system_prompt=WORKFLOW_SYSTEM_PROMPT,
        ))

    logger.info(
        "providers_configured",
        providers=[provider.name for provider in providers] or ["heuristic"],
    )
    return providers


async def close_providers(providers: List[ProviderClient]):
    """Close every provider; one failing close does not stop the rest."""
    for provider in providers:
        try:
            await provider.close()
        except Exception as e:
            logger.error("provider_close_failed", provider=provider.name, error=str(e))


__all__ = [
    "AnthropicConfig",
    "AnthropicProvider",
    "ChatCompletionsProvider",
    "GenerationOptions",
    "OpenAIConfig",
    "OpenAIProvider",
    "OpenRouterConfig",
    "OpenRouterProvider",
    "ProviderClient",
    "build_providers",
    "close_providers",
]
