"""Audio assembly and playback for ttsplay.

Concatenation lives in assembler; pygame playback in player.
"""

from .assembler import concatenate

__all__ = ["concatenate"]
