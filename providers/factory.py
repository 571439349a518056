"""Platform construction from settings."""

from loguru import logger

from config.settings import Settings, get_settings
from providers.anthropic import AnthropicRequestShaper, ClaudeModelCatalog
from providers.azure_llama import AzureLlamaRequestShaper, LlamaModelCatalog
from providers.base import ModelFamily, ProviderConfig
from providers.catalog import FallbackModelCatalog
from providers.exceptions import InvalidConfigurationError
from providers.generic import CompletionsRequestShaper, EmbeddingsRequestShaper
from providers.platform import Platform
from providers.transport import HttpxTransport, Transport

SUPPORTED_PROVIDER_TYPES = ("anthropic", "azure_llama", "generic")

# Global platform instance (singleton)
_platform: Platform | None = None


def _provider_config(
    settings: Settings, api_key: str | None, base_url: str
) -> ProviderConfig:
    return ProviderConfig(
        api_key=api_key,
        base_url=base_url,
        http_read_timeout=settings.http_read_timeout,
        http_write_timeout=settings.http_write_timeout,
        http_connect_timeout=settings.http_connect_timeout,
    )


def create_platform(
    settings: Settings, transport: Transport | None = None
) -> Platform:
    """Construct and return a new platform for settings.provider_type."""
    provider_type = settings.provider_type
    if provider_type == "anthropic":
        if not settings.anthropic_api_key or not settings.anthropic_api_key.strip():
            raise InvalidConfigurationError(
                "ANTHROPIC_API_KEY is not set. Add it to your .env file. "
                "Get a key at https://console.anthropic.com/settings/keys"
            )
        config = _provider_config(
            settings, settings.anthropic_api_key, "https://api.anthropic.com"
        )
        catalog = FallbackModelCatalog(ClaudeModelCatalog(), family=ModelFamily.claude)
        shapers = [
            AnthropicRequestShaper(
                settings.anthropic_api_key, settings.anthropic_cache_retention
            )
        ]
    elif provider_type == "azure_llama":
        if not settings.azure_llama_api_key or not settings.azure_llama_base_url:
            raise InvalidConfigurationError(
                "AZURE_LLAMA_BASE_URL and AZURE_LLAMA_API_KEY must both be set."
            )
        config = _provider_config(
            settings, settings.azure_llama_api_key, settings.azure_llama_base_url
        )
        catalog = FallbackModelCatalog(LlamaModelCatalog(), family=ModelFamily.llama)
        shapers = [
            AzureLlamaRequestShaper(
                settings.azure_llama_base_url, settings.azure_llama_api_key
            )
        ]
    elif provider_type == "generic":
        config = _provider_config(
            settings, settings.generic_api_key, settings.generic_base_url
        )
        catalog = FallbackModelCatalog()
        shapers = [
            CompletionsRequestShaper(
                settings.generic_base_url, settings.generic_api_key
            ),
            EmbeddingsRequestShaper(
                settings.generic_base_url, settings.generic_api_key
            ),
        ]
    else:
        logger.error(
            "Unknown provider_type: '{}'. Supported: {}",
            provider_type,
            ", ".join(f"'{t}'" for t in SUPPORTED_PROVIDER_TYPES),
        )
        raise InvalidConfigurationError(
            f"Unknown provider_type: '{provider_type}'. "
            f"Supported: {', '.join(repr(t) for t in SUPPORTED_PROVIDER_TYPES)}"
        )

    platform = Platform(catalog, shapers, transport or HttpxTransport(config))
    logger.info("Platform initialized: {}", provider_type)
    return platform


def get_platform() -> Platform:
    """Get or create the platform instance based on settings.provider_type."""
    global _platform
    if _platform is None:
        _platform = create_platform(get_settings())
    return _platform


def cleanup_platform() -> None:
    """Release the platform's HTTP resources."""
    global _platform
    if _platform is not None:
        _platform.close()
    _platform = None
    logger.debug("Platform cleanup completed")
