"""High-level API for ttsplay library usage."""

from .cache import KeyValueStore, MemoryStore
from .providers import ProviderRegistry
from .tts.cancel import CancellationToken
from .tts.constants import DEFAULT_MODEL, DEFAULT_VOICE, OPENAI_URL
from .tts.fetcher import ProgressFn
from .tts.models import SynthesisConfig, SynthesisResult
from .tts.pipeline import SynthesisSession


async def synthesize(
    text: str,
    api_key: str,
    model: str = DEFAULT_MODEL,
    voice: str = DEFAULT_VOICE,
    speed: float = 1.0,
    store: KeyValueStore | None = None,
    provider: str = "openai",
    base_url: str = OPENAI_URL,
    on_progress: ProgressFn | None = None,
    cancel_token: CancellationToken | None = None,
) -> SynthesisResult:
    """Synthesize speech from text.

    Unlike the CLI this reads no config file or environment variables.

    Args:
        text: Text to speak (any length; split into chunks as needed)
        api_key: Provider API key
        model: Model ID
        voice: Voice ID
        speed: Speaking rate (0.25-4.0)
        store: Key-value store for caching (in-memory if None)
        provider: Provider name
        base_url: API root for the provider
        on_progress: Optional callback receiving completion in [0, 1]
        cancel_token: Optional token to abandon the request between chunks

    Returns:
        The synthesized clip

    Raises:
        ValidationError: If text or API key is empty
        SynthesisError: If the provider rejects a chunk
        ValueError: If speed is out of range
        KeyError: If provider not found
    """
    provider_instance = ProviderRegistry.get(provider)(base_url=base_url)
    session = SynthesisSession(store or MemoryStore(), provider=provider_instance)
    config = SynthesisConfig(model=model, voice=voice, credential=api_key, speed=speed)

    try:
        return await session.synthesize(
            text, config, on_progress=on_progress, cancel_token=cancel_token
        )
    finally:
        await provider_instance.aclose()
