"""Custom TTS exceptions."""


class TTSError(Exception):
    """Base exception for TTS-related errors."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class ValidationError(TTSError):
    """Exception raised when a request is rejected before any network activity.

    This typically occurs when:
    - Text is empty
    - No API key was supplied
    """

    pass


class SynthesisError(TTSError):
    """Exception raised when the speech endpoint rejects a chunk.

    Carries the raw response body so it can be shown to the user verbatim.

    This typically occurs when:
    - API key is invalid (401)
    - Rate limits are exceeded (429)
    - Request format is invalid (4xx errors)
    - API server is unavailable (5xx errors) or the network is down
    """

    def __init__(
        self,
        message: str,
        body: str = "",
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.body = body
        self.status_code = status_code


class DecodeError(TTSError):
    """Exception raised when a stored audio payload cannot be decoded."""

    pass


class CacheWriteError(TTSError):
    """Exception raised when the key-value store refuses a write.

    Callers treat this as best-effort and never surface it.
    """

    pass


class SynthesisCancelledError(TTSError):
    """Exception raised when a caller cancels an in-flight synthesis."""

    pass
