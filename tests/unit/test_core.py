"""Unit tests for core wiring: API key resolution, store selection and synthesis."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from test_helpers import FakeProvider
from ttsplay.cache import MemoryStore, SQLiteStore
from ttsplay.config import (
    CacheConfig,
    ChunkingConfig,
    RateLimitConfig,
    TTSConfig,
    TtsplayConfig,
)
from ttsplay.core import open_store, resolve_api_key, synthesize_text
from ttsplay.providers import ProviderRegistry
from ttsplay.tts.errors import ValidationError
from ttsplay.tts.pipeline import SynthesisSession


def make_config(tmp_path: Path, enabled: bool = True, provider: str = "fake") -> TtsplayConfig:
    return TtsplayConfig(
        tts=TTSConfig(
            provider=provider,
            base_url="https://api.test/v1",
            model="tts-1",
            voice="alloy",
            speed=1.0,
        ),
        cache=CacheConfig(enabled=enabled, path=tmp_path / "store.db"),
        rate_limit=RateLimitConfig(requests_per_minute=100),
        chunking=ChunkingConfig(max_chars=4096),
    )


class RegisteredFakeProvider(FakeProvider):
    """FakeProvider constructible the way the registry constructs providers."""

    instances: list["RegisteredFakeProvider"] = []

    def __init__(self, base_url: str = "") -> None:
        super().__init__()
        self.base_url = base_url
        RegisteredFakeProvider.instances.append(self)


@pytest.fixture
def registered_fake(monkeypatch) -> type[RegisteredFakeProvider]:
    RegisteredFakeProvider.instances = []
    monkeypatch.setitem(ProviderRegistry._providers, "fake", RegisteredFakeProvider)
    return RegisteredFakeProvider


class TestResolveApiKey:
    """Test API key priority: explicit > env > remembered."""

    @pytest.mark.asyncio
    async def test_explicit_key_wins(self, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        session = SynthesisSession(MemoryStore(), provider=FakeProvider())

        assert await resolve_api_key("sk-flag", session) == "sk-flag"

    @pytest.mark.asyncio
    async def test_env_key_used_when_no_flag(self, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        session = SynthesisSession(MemoryStore(), provider=FakeProvider())

        assert await resolve_api_key(None, session) == "sk-env"

    @pytest.mark.asyncio
    async def test_remembered_key_used_last(self, monkeypatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        store = MemoryStore()
        await store.set("apiKey", "sk-remembered")
        session = SynthesisSession(store, provider=FakeProvider())

        assert await resolve_api_key(None, session) == "sk-remembered"

    @pytest.mark.asyncio
    async def test_no_key_anywhere_raises(self, monkeypatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        session = SynthesisSession(MemoryStore(), provider=FakeProvider())

        with pytest.raises(ValidationError, match="API key is required"):
            await resolve_api_key(None, session)


class TestOpenStore:
    def test_enabled_cache_uses_sqlite(self, tmp_path: Path) -> None:
        assert isinstance(open_store(make_config(tmp_path)), SQLiteStore)

    def test_disabled_cache_uses_memory(self, tmp_path: Path) -> None:
        store = open_store(make_config(tmp_path, enabled=False))

        assert isinstance(store, MemoryStore)
        assert not (tmp_path / "store.db").exists()


class TestSynthesizeText:
    @pytest.mark.asyncio
    async def test_overrides_reach_provider(
        self, tmp_path: Path, registered_fake, monkeypatch
    ) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        result = await synthesize_text(
            "Hello",
            make_config(tmp_path),
            api_key="sk-flag",
            voice="nova",
            speed=1.5,
        )

        provider = registered_fake.instances[0]
        _, used = provider.calls[0]
        assert result.data == b"audio:Hello"
        assert provider.base_url == "https://api.test/v1"
        assert (used.model, used.voice, used.speed, used.credential) == (
            "tts-1",
            "nova",
            1.5,
            "sk-flag",
        )

    @pytest.mark.asyncio
    async def test_remembered_key_reused_on_next_run(
        self, tmp_path: Path, registered_fake, monkeypatch
    ) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        config = make_config(tmp_path)

        await synthesize_text("First run", config, api_key="sk-first")
        result = await synthesize_text("Second run", config)

        _, used = registered_fake.instances[1].calls[0]
        assert used.credential == "sk-first"
        assert result.cached is False

    @pytest.mark.asyncio
    async def test_unknown_provider_raises_key_error(self, tmp_path: Path) -> None:
        with pytest.raises(KeyError, match="not found"):
            await synthesize_text(
                "Hello", make_config(tmp_path, provider="missing"), api_key="sk"
            )
