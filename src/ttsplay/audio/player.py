"""Playback and export of synthesized clips using pygame."""

# ruff: noqa: E402
import os

# Must be set before pygame is imported
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import warnings

warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import io
import logging
from pathlib import Path

import pygame

from ..tts.models import SynthesisResult

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Plays a SynthesisResult through the speakers or writes it to disk.

    The pygame mixer is only initialized on first playback, so saving
    works on machines without an audio device.
    """

    def __init__(self) -> None:
        self._mixer_ready = False

    def _ensure_mixer(self) -> None:
        if self._mixer_ready:
            return
        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise RuntimeError(f"Failed to initialize pygame audio mixer: {e}") from e
        self._mixer_ready = True

    def play(self, result: SynthesisResult) -> None:
        """Play a clip and block until playback finishes.

        Raises:
            ValueError: If the clip is empty
            RuntimeError: If audio playback fails
        """
        if not result.data:
            raise ValueError("No audio data provided")

        self._ensure_mixer()
        try:
            pygame.mixer.music.load(io.BytesIO(result.data))
            pygame.mixer.music.play()
            while pygame.mixer.music.get_busy():
                pygame.time.Clock().tick(10)
        except pygame.error as e:
            raise RuntimeError(f"Failed to play audio: {e}") from e

    def save(self, result: SynthesisResult, filepath: str | Path) -> Path:
        """Write a clip to a file, creating parent directories.

        Raises:
            ValueError: If the clip is empty
            OSError: If the file cannot be written
        """
        if not result.data:
            raise ValueError("No audio data provided")

        try:
            path = result.save(filepath)
        except OSError as e:
            raise OSError(f"Failed to save audio to {filepath}: {e}") from e

        logger.debug(f"Saved {len(result.data)} bytes of {result.media_type} to {path}")
        return path
