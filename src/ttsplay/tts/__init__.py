"""TTS (Text-to-Speech) package for ttsplay.

This package holds the synthesis pipeline: chunking, fingerprinting, the
storage codec, rate-limited fetching and the session orchestrator.
"""

from .errors import (
    CacheWriteError,
    DecodeError,
    SynthesisCancelledError,
    SynthesisError,
    TTSError,
    ValidationError,
)
from .models import AudioBlob, AudioSegment, SynthesisConfig, SynthesisResult, TextChunk

__all__ = [
    "AudioBlob",
    "AudioSegment",
    "CacheWriteError",
    "DecodeError",
    "SynthesisCancelledError",
    "SynthesisConfig",
    "SynthesisError",
    "SynthesisResult",
    "TTSError",
    "TextChunk",
    "ValidationError",
]
