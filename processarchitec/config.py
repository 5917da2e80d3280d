# processarchitec/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "ProcessArchitec"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    frontend_url: Optional[str] = None
    cors_origins: List[str] = [
        "http://localhost:5173",
        "https://processarchitec.com",
        "https://processarchitec.netlify.app",
    ]

    # A provider is only used when its key is set.
    anthropic_api_key: Optional[str] = None
    anthropic_model: str = "claude-3-5-sonnet-latest"
    anthropic_base_url: str = "https://api.anthropic.com/v1"

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = "https://api.openai.com/v1"

    openrouter_api_key: Optional[str] = None
    openrouter_model: str = "anthropic/claude-3-sonnet"
    openrouter_base_url: str = "https://openrouter.ai/api/v1"

    provider_timeout: float = 60.0
    provider_max_tokens: int = 3000
    provider_temperature: float = 0.7

    def allowed_origins(self) -> List[str]:
        origins = list(self.cors_origins)
        if self.frontend_url and self.frontend_url not in origins:
            origins.append(self.frontend_url)
        return origins


@lru_cache()
def get_settings() -> Settings:
    return Settings()
