"""Rate-limited, cache-aware fetching of chunk audio."""

import asyncio
import functools
import logging
from collections.abc import Callable, Sequence

from ..cache.base import KeyValueStore
from ..providers.base import SpeechProvider
from . import codec
from .cancel import CancellationToken
from .constants import CHUNK_KEY_PURPOSE, RATE_WINDOW_SECONDS, REQUESTS_PER_MINUTE
from .errors import DecodeError
from .fingerprint import generate_key
from .models import AudioBlob, AudioSegment, SynthesisConfig, TextChunk
from .ratelimit import RateLimiter, SleepFn

logger = logging.getLogger(__name__)

ProgressFn = Callable[[float], None]


def report_progress(on_progress: ProgressFn | None, fraction: float) -> None:
    """Invoke a progress callback, logging instead of raising on failure."""
    if on_progress is None:
        return
    try:
        on_progress(fraction)
    except Exception as e:
        logger.warning(f"Progress callback failed: {e}")


async def read_cached(store: KeyValueStore, key: str) -> AudioBlob | None:
    """Look up and decode a stored payload; unreadable entries count as misses."""
    try:
        cached = await store.get(key)
    except Exception as e:
        logger.error(f"Cache lookup failed for {key[:40]}: {e}")
        return None
    if cached is None:
        return None
    try:
        return codec.decode(cached)
    except DecodeError as e:
        logger.warning(f"Ignoring corrupt cache entry {key[:40]}: {e}")
        return None


async def write_cached(store: KeyValueStore, key: str, blob: AudioBlob) -> None:
    """Store an encoded payload, swallowing any store failure."""
    try:
        await store.set(key, codec.encode(blob))
    except Exception as e:
        logger.warning(f"Failed to cache {key[:40]}: {e}. Continuing without caching.")


class ChunkFetcher:
    """Turns text chunks into audio segments, one request at a time.

    Each chunk is looked up in the store first; only misses go to the
    provider, spaced out by a RateLimiter. A provider error aborts the run
    and nothing is returned, but chunks fetched before the failure stay
    cached for the next attempt.

    Example:
        fetcher = ChunkFetcher(OpenAISpeechProvider(), SQLiteStore(path))
        segments = await fetcher.fetch_chunks(
            split_text(text), config, on_progress=lambda f: print(f"{f:.0%}")
        )
    """

    def __init__(
        self,
        provider: SpeechProvider,
        store: KeyValueStore,
        requests_per_window: int = REQUESTS_PER_MINUTE,
        window_seconds: float = RATE_WINDOW_SECONDS,
        sleep: SleepFn | None = None,
    ) -> None:
        self.provider = provider
        self.store = store
        self.requests_per_window = requests_per_window
        self.window_seconds = window_seconds
        self._sleep = sleep or asyncio.sleep

    def _wait_for(self, cancel_token: CancellationToken | None) -> SleepFn:
        if cancel_token is None:
            return self._sleep
        return functools.partial(cancel_token.sleep, sleep=self._sleep)

    def _new_limiter(self) -> RateLimiter:
        return RateLimiter(
            requests_per_window=self.requests_per_window,
            window_seconds=self.window_seconds,
            sleep=self._sleep,
        )

    async def fetch_chunks(
        self,
        chunks: Sequence[TextChunk],
        config: SynthesisConfig,
        on_progress: ProgressFn | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> list[AudioSegment]:
        """Synthesize every chunk in order.

        Args:
            chunks: Chunks from split_text(), in order
            config: Synthesis settings shared by all chunks
            on_progress: Called with i/len(chunks) before chunk i and 1.0 at the end
            cancel_token: Optional token checked before each chunk and during waits

        Returns:
            One AudioSegment per chunk, in chunk order

        Raises:
            SynthesisError: If the provider rejects any chunk
            SynthesisCancelledError: If cancel_token is cancelled
        """
        limiter = self._new_limiter()
        segments: list[AudioSegment] = []
        total = len(chunks)

        for position, chunk in enumerate(chunks):
            report_progress(on_progress, position / total)
            if cancel_token is not None:
                cancel_token.raise_if_cancelled()

            key = generate_key(CHUNK_KEY_PURPOSE, chunk.text, config)
            blob = await read_cached(self.store, key)
            if blob is not None:
                logger.debug(f"Chunk {chunk.index}: cache hit")
                segments.append(
                    AudioSegment(index=chunk.index, data=blob.data, media_type=blob.media_type)
                )
                continue

            await limiter.acquire(self._wait_for(cancel_token))
            logger.debug(
                f"Chunk {chunk.index}: requesting {len(chunk.text)} chars "
                f"from {self.provider.name or type(self.provider).__name__}"
            )
            blob = await self.provider.synthesize(chunk.text, config)

            await write_cached(self.store, key, blob)
            segments.append(
                AudioSegment(index=chunk.index, data=blob.data, media_type=blob.media_type)
            )

        report_progress(on_progress, 1.0)
        logger.info(
            f"Fetched {total} chunks ({limiter.calls} remote, {total - limiter.calls} cached)"
        )
        return segments
