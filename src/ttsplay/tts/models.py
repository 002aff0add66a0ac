"""TTS data models with validation."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SynthesisConfig:
    """Settings that identify one synthesis mode.

    Args:
        model: Speech model ID (e.g., "tts-1")
        voice: Voice ID (e.g., "alloy")
        credential: API key forwarded as a bearer token
        speed: Speaking rate (0.25-4.0)
    """

    model: str
    voice: str
    credential: str = field(repr=False)
    speed: float = 1.0

    def __post_init__(self) -> None:
        """Validate synthesis settings."""
        if not self.model or not self.model.strip():
            raise ValueError("model cannot be empty")
        if not self.voice or not self.voice.strip():
            raise ValueError("voice cannot be empty")
        if not 0.25 <= self.speed <= 4.0:
            raise ValueError("speed must be between 0.25 and 4.0")


@dataclass(frozen=True)
class TextChunk:
    """A contiguous slice of the input text, in synthesis order."""

    index: int
    text: str


@dataclass(frozen=True)
class AudioBlob:
    """Binary audio payload tagged with its media type."""

    data: bytes
    media_type: str


@dataclass(frozen=True)
class AudioSegment:
    """Audio produced for a single chunk."""

    index: int
    data: bytes
    media_type: str


@dataclass
class SynthesisResult:
    """Final audio for one full input text.

    Attributes:
        data: Concatenated audio bytes
        media_type: Media type of the concatenated audio
        cached: True if the whole text was served from the store
        chunk_count: Number of chunks the text was split into (0 on a cache hit)
    """

    data: bytes
    media_type: str
    cached: bool = False
    chunk_count: int = 0

    def save(self, path: str | Path) -> Path:
        """Write the audio to disk, creating parent directories.

        Returns:
            The path written to
        """
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.data)
        return output_path
