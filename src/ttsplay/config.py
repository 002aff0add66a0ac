"""Configuration management for ttsplay.

Loads configuration from ~/.config/ttsplay/config.toml.
Priority chain: CLI flags > env vars > config file.
"""

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "ttsplay"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = """\
# ttsplay configuration

[tts]
# Provider: "openai" (any server speaking the OpenAI /audio/speech contract)
provider = "openai"

# API root for the provider
base_url = "https://api.openai.com/v1"

# Model: "gpt-4o-mini-tts", "tts-1", "tts-1-hd"
model = "tts-1"

# Voice: alloy, echo, fable, onyx, nova, shimmer
voice = "alloy"

# Speaking rate (0.25-4.0)
speed = 1.0

[cache]
# Reuse previously synthesized audio for identical text and settings
enabled = true

# Store location (defaults to ~/.cache/ttsplay/store.db)
# path = "~/.cache/ttsplay/store.db"

[rate_limit]
# Maximum speech requests per minute
requests_per_minute = 100

[chunking]
# Maximum characters per request
max_chars = 4096

# The API key is never read from this file:
#   --api-key flag, then OPENAI_API_KEY, then the last key used successfully
"""


@dataclass(frozen=True)
class TTSConfig:
    """TTS provider configuration."""

    provider: str
    base_url: str
    model: str
    voice: str
    speed: float


@dataclass(frozen=True)
class CacheConfig:
    """Audio cache configuration."""

    enabled: bool
    path: Path


@dataclass(frozen=True)
class RateLimitConfig:
    """Request-rate ceiling configuration."""

    requests_per_minute: int


@dataclass(frozen=True)
class ChunkingConfig:
    """Text chunking configuration."""

    max_chars: int


@dataclass(frozen=True)
class TtsplayConfig:
    """Top-level ttsplay configuration."""

    tts: TTSConfig
    cache: CacheConfig
    rate_limit: RateLimitConfig
    chunking: ChunkingConfig


_cached_config: TtsplayConfig | None = None


def default_store_path() -> Path:
    return Path.home() / ".cache" / "ttsplay" / "store.db"


def generate_config() -> Path:
    """Generate default config file at ~/.config/ttsplay/config.toml."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(DEFAULT_CONFIG)
    return CONFIG_PATH


def load_config() -> TtsplayConfig:
    """Load configuration from config file with env var overrides.

    On first run, generates the config file and exits so the user
    can review it before proceeding.

    Returns:
        Loaded and validated TtsplayConfig.

    Raises:
        SystemExit: If config is missing (after generating) or invalid.
    """
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    if not CONFIG_PATH.exists():
        path = generate_config()
        print(
            f"No config found. Generated {path} - review and run again.",
            file=sys.stderr,
        )
        raise SystemExit(1)

    with open(CONFIG_PATH, "rb") as f:
        data = tomllib.load(f)

    tts = data.get("tts", {})
    cache = data.get("cache", {})
    rate_limit = data.get("rate_limit", {})
    chunking = data.get("chunking", {})

    # Validate required fields
    missing = []
    for field_name in ("provider", "model", "voice"):
        if field_name not in tts:
            missing.append(f"tts.{field_name}")
    if "enabled" not in cache:
        missing.append("cache.enabled")

    if missing:
        print(
            f"Missing required config values: {', '.join(missing)}",
            file=sys.stderr,
        )
        print(f"Edit {CONFIG_PATH} or delete it to regenerate.", file=sys.stderr)
        raise SystemExit(1)

    # Env vars override config file values
    speed_str = os.getenv("TTSPLAY_SPEED", str(tts.get("speed", 1.0)))
    cache_path = os.getenv("TTSPLAY_CACHE_PATH", cache.get("path", ""))

    try:
        speed = float(speed_str)
        requests_per_minute = int(rate_limit.get("requests_per_minute", 100))
        max_chars = int(chunking.get("max_chars", 4096))
    except ValueError as e:
        print(f"Invalid config value: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    _cached_config = TtsplayConfig(
        tts=TTSConfig(
            provider=tts["provider"],
            base_url=os.getenv(
                "TTSPLAY_BASE_URL", tts.get("base_url", "https://api.openai.com/v1")
            ),
            model=os.getenv("TTSPLAY_MODEL", tts["model"]),
            voice=os.getenv("TTSPLAY_VOICE", tts["voice"]),
            speed=speed,
        ),
        cache=CacheConfig(
            enabled=cache["enabled"],
            path=Path(cache_path).expanduser() if cache_path else default_store_path(),
        ),
        rate_limit=RateLimitConfig(requests_per_minute=requests_per_minute),
        chunking=ChunkingConfig(max_chars=max_chars),
    )

    return _cached_config
