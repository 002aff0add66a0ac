"""OpenAI-compatible provider backed by httpx.MockTransport for integration tests."""

import json

import httpx

from ttsplay.providers.openai import OpenAISpeechProvider


class MockSpeechServer:
    """Fake /audio/speech endpoint that echoes the input text as audio.

    Args:
        fail_inputs: Input texts answered with HTTP 500
    """

    def __init__(self, fail_inputs: set[str] | None = None) -> None:
        self.fail_inputs = fail_inputs or set()
        self.requests: list[dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(
            {"auth": request.headers.get("Authorization"), **body}
        )
        if body["input"] in self.fail_inputs:
            return httpx.Response(500, text="upstream overloaded")
        return httpx.Response(
            200,
            content=f"<{body['input']}>".encode("utf-8"),
            headers={"content-type": "audio/mpeg"},
        )

    @property
    def inputs(self) -> list[str]:
        return [r["input"] for r in self.requests]

    def provider(self, base_url: str = "https://api.test/v1") -> OpenAISpeechProvider:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return OpenAISpeechProvider(base_url=base_url, client=client)


def registry_provider_class(server: MockSpeechServer) -> type[OpenAISpeechProvider]:
    """Build a provider class the registry can construct with base_url only."""

    class RoutedProvider(OpenAISpeechProvider):
        def __init__(self, base_url: str = "https://api.test/v1") -> None:
            super().__init__(
                base_url=base_url,
                client=httpx.AsyncClient(transport=httpx.MockTransport(server.handler)),
            )
            self._owns_client = True

    return RoutedProvider
