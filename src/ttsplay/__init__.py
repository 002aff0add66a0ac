"""ttsplay - chunked, cached, rate-limited text-to-speech playground."""

__version__ = "0.1.0"
__all__ = ["synthesize"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "synthesize":
        from .api import synthesize

        return synthesize
    raise AttributeError(f"module 'ttsplay' has no attribute {name!r}")
