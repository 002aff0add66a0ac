"""Abstract base class for text-to-speech providers.

This module defines the interface that all TTS providers must implement,
ensuring consistent behavior across different TTS backends.
"""

from abc import ABC, abstractmethod

from ..tts.models import AudioBlob, SynthesisConfig


class SpeechProvider(ABC):
    """Abstract base class for text-to-speech providers.

    All providers must inherit from this class and implement the required
    methods for synthesizing speech and listing voices and models.

    Catalogue Dictionary Structure:
        Each entry returned by list_voices() and list_models() follows:
        {
            "id": str,       # Identifier sent to the provider
            "name": str,     # Human-readable name
            "provider": str  # Name of the provider (e.g., "openai")
        }
    """

    name: str = ""

    @abstractmethod
    async def synthesize(self, text: str, config: SynthesisConfig) -> AudioBlob:
        """Convert one chunk of text to audio.

        Args:
            text: Text to convert, already within the provider's size limit
            config: Model, voice, speed and credential to use

        Returns:
            Audio payload and its media type

        Raises:
            SynthesisError: If the provider rejects the request
        """
        pass

    @abstractmethod
    async def list_voices(self) -> list[dict]:
        """Return available voices for this provider."""
        pass

    @abstractmethod
    async def list_models(self) -> list[dict]:
        """Return available models for this provider."""
        pass

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
        pass
