"""Split long text into provider-sized chunks."""

from .constants import MAX_CHUNK_CHARS
from .models import TextChunk

# Tried in this order; the first one present wins even if a later one sits closer to the limit
BOUNDARY_MARKERS = (". ", "? ", "! ", "\n")


def _find_cut(text: str, max_chars: int) -> int:
    for marker in BOUNDARY_MARKERS:
        pos = text.rfind(marker, 0, max_chars)
        if pos > -1:
            return pos + len(marker)
    return max_chars


def split_text(text: str, max_chars: int = MAX_CHUNK_CHARS) -> list[TextChunk]:
    """Split text into ordered chunks of at most max_chars characters.

    Cuts right after a sentence or line boundary when one falls inside the
    limit, otherwise hard-cuts at max_chars. Joining the chunk texts gives
    back the input exactly.

    Args:
        text: Input text (may be empty)
        max_chars: Maximum chunk length

    Returns:
        Chunks in order; empty input yields no chunks

    Raises:
        ValueError: If max_chars is less than 1
    """
    if max_chars < 1:
        raise ValueError("max_chars must be at least 1")

    chunks: list[TextChunk] = []
    rest = text
    while rest:
        if len(rest) <= max_chars:
            chunks.append(TextChunk(index=len(chunks), text=rest))
            break
        end = _find_cut(rest, max_chars)
        chunks.append(TextChunk(index=len(chunks), text=rest[:end]))
        rest = rest[end:]
    return chunks
