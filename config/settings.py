"""Application settings loaded from the environment and .env."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from providers.anthropic.request import CacheRetention
from providers.model_utils import strip_provider_prefix


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # ==================== Model ====================
    # "<provider_type>/<model name>", the model name may carry ?key=value options
    model: str = "anthropic/claude-sonnet-4-5"

    # ==================== Anthropic ====================
    anthropic_api_key: str = ""
    anthropic_cache_retention: str = CacheRetention.short.value

    # ==================== Azure Llama ====================
    azure_llama_base_url: str = ""
    azure_llama_api_key: str = ""

    # ==================== Generic OpenAI-compatible ====================
    generic_base_url: str = "http://localhost:4000"
    generic_api_key: str | None = None

    # ==================== HTTP ====================
    http_read_timeout: float = 300.0
    http_write_timeout: float = 10.0
    http_connect_timeout: float = 2.0

    @field_validator("anthropic_cache_retention")
    @classmethod
    def validate_cache_retention(cls, v: str) -> str:
        allowed = [r.value for r in CacheRetention]
        if v not in allowed:
            raise ValueError(
                f"anthropic_cache_retention must be one of {allowed}, got {v!r}"
            )
        return v

    @property
    def provider_type(self) -> str:
        provider_type, _ = strip_provider_prefix(self.model)
        return provider_type or "generic"

    @property
    def model_name(self) -> str:
        _, model_name = strip_provider_prefix(self.model)
        return model_name


@lru_cache
def get_settings() -> Settings:
    return Settings()
