"""
Error types for the terminal-ai request path.

Every failure on the network path is raised as a subclass of
TerminalAIError so the suggestion generator can catch them in one place.
"""

from typing import Optional


class TerminalAIError(Exception):
    """Base exception for all adapter errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message


class MissingCredential(TerminalAIError):
    """The API key is not configured."""

    def __init__(self, key_name: str = "GEMINI_API_KEY"):
        super().__init__(f"{key_name} environment variable not set")
        self.key_name = key_name


class RequestBuildError(TerminalAIError):
    """The request body could not be serialized."""


class NetworkError(TerminalAIError):
    """Transport-level failure (connection, timeout, TLS)."""


class UpstreamError(TerminalAIError):
    """The API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Gemini API error (status {status_code}): {body}",
            status_code=status_code,
        )
        self.body = body


class DecodeError(TerminalAIError):
    """The response body is not the JSON envelope we expect."""


class EmptyResponse(TerminalAIError):
    """The response held no candidate or no text part."""

    def __init__(self, message: str = "empty response from Gemini API"):
        super().__init__(message)
