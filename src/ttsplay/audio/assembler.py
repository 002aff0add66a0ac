"""Join per-chunk audio into one playable clip."""

from collections.abc import Sequence

from ..tts.constants import AUDIO_MEDIA_TYPE
from ..tts.models import AudioBlob, AudioSegment


def concatenate(
    segments: Sequence[AudioSegment], media_type: str = AUDIO_MEDIA_TYPE
) -> AudioBlob:
    """Concatenate segment bytes in sequence order.

    MP3 frames are self-delimiting, so byte concatenation of segments from the
    same model and voice plays back as one clip. Segment media types are not
    checked against each other.
    """
    return AudioBlob(data=b"".join(s.data for s in segments), media_type=media_type)
