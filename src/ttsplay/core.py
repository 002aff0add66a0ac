"""Core functionality for ttsplay - wires config, store, provider and session."""

import logging
import os

from .cache import KeyValueStore, MemoryStore, SQLiteStore
from .config import TtsplayConfig
from .providers import ProviderRegistry
from .providers.base import SpeechProvider
from .tts.cancel import CancellationToken
from .tts.errors import ValidationError
from .tts.fetcher import ChunkFetcher, ProgressFn
from .tts.models import SynthesisConfig, SynthesisResult
from .tts.pipeline import SynthesisSession

logger = logging.getLogger(__name__)


def open_store(config: TtsplayConfig) -> KeyValueStore:
    """Open the durable store, or a throwaway one when caching is disabled."""
    if not config.cache.enabled:
        logger.debug("Cache disabled - using in-memory store")
        return MemoryStore()
    return SQLiteStore(config.cache.path)


def create_provider(config: TtsplayConfig) -> SpeechProvider:
    """Instantiate the configured provider.

    Raises:
        KeyError: If provider not found
    """
    provider_class = ProviderRegistry.get(config.tts.provider)
    return provider_class(base_url=config.tts.base_url)


async def resolve_api_key(api_key: str | None, session: SynthesisSession) -> str:
    """Pick the API key: explicit value, then OPENAI_API_KEY, then the last key used.

    Raises:
        ValidationError: If no key can be found
    """
    if api_key:
        return api_key

    env_key = os.getenv("OPENAI_API_KEY")
    if env_key:
        return env_key

    remembered = await session.last_credential()
    if remembered:
        logger.debug("Using remembered API key")
        return remembered

    raise ValidationError(
        "API key is required. Pass --api-key or set OPENAI_API_KEY."
    )


async def list_available_voices(provider: str = "openai") -> list[dict]:
    """List all available voices from specified provider.

    Raises:
        KeyError: If provider not found
    """
    provider_instance = ProviderRegistry.get(provider)()
    try:
        return await provider_instance.list_voices()
    finally:
        await provider_instance.aclose()


async def list_available_models(provider: str = "openai") -> list[dict]:
    """List all available models from specified provider.

    Raises:
        KeyError: If provider not found
    """
    provider_instance = ProviderRegistry.get(provider)()
    try:
        return await provider_instance.list_models()
    finally:
        await provider_instance.aclose()


async def synthesize_text(
    text: str,
    config: TtsplayConfig,
    api_key: str | None = None,
    model: str | None = None,
    voice: str | None = None,
    speed: float | None = None,
    on_progress: ProgressFn | None = None,
    cancel_token: CancellationToken | None = None,
) -> SynthesisResult:
    """Convert text to one audio clip using file/env config plus overrides.

    Args:
        text: Text to convert to speech
        config: Loaded configuration
        api_key: Explicit API key (falls back to env, then the remembered key)
        model: Model override
        voice: Voice override
        speed: Speed override
        on_progress: Optional progress callback
        cancel_token: Optional cancellation token

    Raises:
        ValidationError: If text or API key is missing
        SynthesisError: If the provider rejects a chunk
        ValueError: If speed is out of range
        KeyError: If provider not found
    """
    store = open_store(config)
    provider = create_provider(config)
    try:
        fetcher = ChunkFetcher(
            provider,
            store,
            requests_per_window=config.rate_limit.requests_per_minute,
        )
        session = SynthesisSession(
            store, fetcher=fetcher, max_chars=config.chunking.max_chars
        )

        synthesis_config = SynthesisConfig(
            model=model or config.tts.model,
            voice=voice or config.tts.voice,
            credential=await resolve_api_key(api_key, session),
            speed=speed if speed is not None else config.tts.speed,
        )
        logger.debug(
            f"Synthesizing {len(text)} chars with {config.tts.provider} "
            f"({synthesis_config.model}/{synthesis_config.voice} x{synthesis_config.speed})"
        )

        return await session.synthesize(
            text, synthesis_config, on_progress=on_progress, cancel_token=cancel_token
        )
    finally:
        await provider.aclose()
        store.close()
