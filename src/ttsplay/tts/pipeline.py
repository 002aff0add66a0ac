"""Synthesis session orchestrator for ttsplay.

Coordinates the chunker, ChunkFetcher and assembler behind one call,
short-circuiting on a whole-text cache hit.
"""

import logging

from ..audio.assembler import concatenate
from ..cache.base import KeyValueStore
from ..providers.base import SpeechProvider
from .cancel import CancellationToken
from .chunker import split_text
from .constants import AUDIO_KEY_PURPOSE, CREDENTIAL_STORE_KEY, MAX_CHUNK_CHARS
from .errors import ValidationError
from .fetcher import ChunkFetcher, ProgressFn, read_cached, report_progress, write_cached
from .fingerprint import generate_key
from .models import SynthesisConfig, SynthesisResult

logger = logging.getLogger(__name__)


class SynthesisSession:
    """Runs complete text-to-audio requests against one store.

    Handles validation, whole-text cache lookup, chunking, fetching,
    assembly and caching of the final clip in a single workflow.

    Example:
        store = SQLiteStore(get_cache_dir() / "store.db")
        session = SynthesisSession(store, provider=OpenAISpeechProvider())

        config = SynthesisConfig(model="tts-1", voice="alloy", credential=key)
        result = await session.synthesize(long_text, config, on_progress=print)
        result.save("speech.mp3")
        # result.cached is False the first time and True on a repeat call
    """

    def __init__(
        self,
        store: KeyValueStore,
        provider: SpeechProvider | None = None,
        fetcher: ChunkFetcher | None = None,
        max_chars: int = MAX_CHUNK_CHARS,
    ) -> None:
        """Initialize session.

        Args:
            store: Durable key-value store for audio and the last-used API key
            provider: Speech provider; required unless fetcher is given
            fetcher: Optional pre-configured fetcher (tests inject one with a fake sleep)
            max_chars: Maximum chunk length passed to split_text()
        """
        if fetcher is None:
            if provider is None:
                raise ValueError("Either provider or fetcher must be given")
            fetcher = ChunkFetcher(provider, store)

        self.store = store
        self.fetcher = fetcher
        self.max_chars = max_chars

    async def synthesize(
        self,
        text: str,
        config: SynthesisConfig,
        on_progress: ProgressFn | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> SynthesisResult:
        """Produce one audio clip for the whole text.

        Args:
            text: Text to convert to speech
            config: Model, voice, speed and API key
            on_progress: Optional callback receiving completion in [0, 1]
            cancel_token: Optional token to abandon the request between chunks

        Returns:
            The concatenated clip

        Raises:
            ValidationError: If text or API key is empty
            SynthesisError: If the provider rejects any chunk
            SynthesisCancelledError: If cancel_token is cancelled
        """
        if not text:
            raise ValidationError("Text cannot be empty")
        if not config.credential:
            raise ValidationError("API key is required")

        audio_key = generate_key(AUDIO_KEY_PURPOSE, text, config)

        # === CACHE LOOKUP PHASE ===
        cached = await read_cached(self.store, audio_key)
        if cached is not None:
            logger.info(f"Cache hit for {len(text)} chars ({config.model}/{config.voice})")
            report_progress(on_progress, 1.0)
            return SynthesisResult(
                data=cached.data, media_type=cached.media_type, cached=True
            )

        # === SYNTHESIS PHASE ===
        chunks = split_text(text, self.max_chars)
        logger.debug(f"Split {len(text)} chars into {len(chunks)} chunks")

        segments = await self.fetcher.fetch_chunks(
            chunks, config, on_progress=on_progress, cancel_token=cancel_token
        )
        blob = concatenate(segments)

        # === CACHE STORE PHASE ===
        await write_cached(self.store, audio_key, blob)
        await self.remember_credential(config.credential)

        return SynthesisResult(
            data=blob.data,
            media_type=blob.media_type,
            cached=False,
            chunk_count=len(chunks),
        )

    async def remember_credential(self, credential: str) -> None:
        """Persist the API key for the next session, best-effort."""
        try:
            await self.store.set(CREDENTIAL_STORE_KEY, credential)
        except Exception as e:
            logger.warning(f"Failed to remember API key: {e}")

    async def last_credential(self) -> str | None:
        """Return the API key used by the last successful synthesis, if any."""
        try:
            return await self.store.get(CREDENTIAL_STORE_KEY)
        except Exception as e:
            logger.error(f"Failed to read remembered API key: {e}")
            return None
