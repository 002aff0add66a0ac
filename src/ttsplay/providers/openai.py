"""OpenAI-compatible text-to-speech provider implementation."""

import logging

import httpx

from ..tts.constants import AUDIO_MEDIA_TYPE, MODELS, OPENAI_URL, VOICES
from ..tts.errors import SynthesisError
from ..tts.models import AudioBlob, SynthesisConfig
from .base import SpeechProvider

logger = logging.getLogger(__name__)


class OpenAISpeechProvider(SpeechProvider):
    """Speech provider for the OpenAI `/audio/speech` endpoint.

    Works with any server exposing the same request/response contract.
    The API key travels with each request inside the SynthesisConfig, so
    one provider instance can serve several credentials.
    """

    name = "openai"

    def __init__(
        self,
        base_url: str = OPENAI_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float = 120.0,
    ) -> None:
        """Initialize OpenAI provider.

        Args:
            base_url: API root, e.g. "https://api.openai.com/v1"
            client: Optional shared httpx client (not closed by aclose())
            timeout: Per-request timeout in seconds for an owned client
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def synthesize(self, text: str, config: SynthesisConfig) -> AudioBlob:
        """Convert text to speech audio.

        Args:
            text: Text to convert to speech
            config: Model, voice, speed and API key

        Returns:
            Audio bytes with the response media type (MP3 by default)

        Raises:
            SynthesisError: If the endpoint answers with a non-2xx status or
                the request cannot be sent
        """
        try:
            response = await self._client.post(
                f"{self.base_url}/audio/speech",
                headers={
                    "Authorization": f"Bearer {config.credential}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": config.model,
                    "input": text,
                    "voice": config.voice,
                    "speed": config.speed,
                },
            )
        except httpx.HTTPError as e:
            raise SynthesisError(
                f"Failed to convert text to speech: {e}", body=str(e), original_error=e
            ) from e

        if not response.is_success:
            body = response.text
            logger.debug(f"Speech endpoint returned {response.status_code}: {body[:200]}")
            raise SynthesisError(
                f"Failed to convert text to speech: {body}",
                body=body,
                status_code=response.status_code,
            )

        media_type = response.headers.get("content-type", AUDIO_MEDIA_TYPE)
        media_type = media_type.split(";")[0].strip() or AUDIO_MEDIA_TYPE
        return AudioBlob(data=response.content, media_type=media_type)

    async def list_voices(self) -> list[dict]:
        return [
            {"id": voice["value"], "name": voice["label"], "provider": self.name}
            for voice in VOICES
        ]

    async def list_models(self) -> list[dict]:
        return [
            {"id": model["value"], "name": model["label"], "provider": self.name}
            for model in MODELS
        ]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
