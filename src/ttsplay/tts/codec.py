"""Data-URL codec for storing audio in a text key-value store."""

import base64
import binascii

from .errors import DecodeError
from .models import AudioBlob

_PREFIX = "data:"
_SEPARATOR = ";base64,"


def encode(blob: AudioBlob) -> str:
    """Encode audio as a "data:<media type>;base64,<payload>" string."""
    payload = base64.b64encode(blob.data).decode("ascii")
    return f"{_PREFIX}{blob.media_type}{_SEPARATOR}{payload}"


def decode(value: str) -> AudioBlob:
    """Decode a string produced by encode() back into audio.

    Raises:
        DecodeError: If the value is not a well-formed base64 data URL
    """
    if not isinstance(value, str) or not value.startswith(_PREFIX):
        raise DecodeError("Stored audio is not a data URL")

    header, sep, payload = value[len(_PREFIX) :].partition(_SEPARATOR)
    if not sep:
        raise DecodeError("Stored audio is missing the base64 marker")
    if not header:
        raise DecodeError("Stored audio has no media type")

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Stored audio payload is corrupt: {e}", e) from e

    return AudioBlob(data=data, media_type=header)
