"""Provider abstraction for text-to-speech services.

This module provides a registry pattern for managing TTS providers,
allowing runtime selection of different TTS backends.
"""

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .base import SpeechProvider

from .openai import OpenAISpeechProvider

__all__ = ["OpenAISpeechProvider", "ProviderRegistry"]


class ProviderRegistry:
    """Registry for managing TTS providers.

    This class maintains a registry of available TTS providers,
    allowing registration and retrieval by name.
    """

    _providers: ClassVar[dict[str, type["SpeechProvider"]]] = {}

    @classmethod
    def register(cls, name: str, provider_class: type["SpeechProvider"]) -> None:
        """Register a TTS provider.

        Args:
            name: Name to register the provider under
            provider_class: Provider class that implements SpeechProvider
        """
        cls._providers[name] = provider_class

    @classmethod
    def get(cls, name: str) -> type["SpeechProvider"]:
        """Get a provider class by name.

        Args:
            name: Name of the provider to retrieve

        Returns:
            Provider class

        Raises:
            KeyError: If provider name not found
        """
        if name not in cls._providers:
            available = ", ".join(cls._providers.keys()) if cls._providers else "none"
            raise KeyError(
                f"Provider '{name}' not found. Available providers: {available}"
            )
        return cls._providers[name]

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._providers)


# Register providers
ProviderRegistry.register("openai", OpenAISpeechProvider)
