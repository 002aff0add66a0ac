"""Deterministic cache keys for synthesized audio."""

import hashlib

from .models import SynthesisConfig


def format_speed(speed: float) -> str:
    """Render speed in its shortest exact form ("1", "1.25", "1.0000001")."""
    rendered = repr(float(speed))
    if rendered.endswith(".0"):
        return rendered[:-2]
    return rendered


def generate_key(purpose: str, text: str, config: SynthesisConfig) -> str:
    """Build the store key for text synthesized under a config.

    The key combines the purpose tag, model, voice, speed and a SHA-256 digest
    of the exact text, so the same inputs map to the same key across runs
    while whole-text and per-chunk entries never collide. The credential is
    deliberately not part of the key.

    Args:
        purpose: Key namespace, "audio" for whole text or "chunk" for one chunk
        text: Exact text that was (or will be) synthesized; may be empty
        config: Synthesis settings

    Returns:
        Key string of the form "<purpose>-<model>-<voice>-<speed>-<sha256>"
    """
    text_hash = hashlib.sha256(text.encode("utf-8")).hexdigest()
    speed = format_speed(config.speed)
    return f"{purpose}-{config.model}-{config.voice}-{speed}-{text_hash}"
