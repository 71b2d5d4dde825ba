"""
Exceptions raised by the Sendinblue client.
"""

from typing import Any


class SendinblueError(Exception):
    """Failure while talking to the Sendinblue API.

    Network errors, non-2xx responses and unparseable response bodies all
    surface as this single error type. The underlying exception is kept on
    ``original_error``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider_response: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.provider_response = provider_response or {}
        self.original_error = original_error


class ConfigurationError(SendinblueError):
    """Client could not be built from settings."""


class BuilderConsumedError(RuntimeError):
    """A request builder was used after it handed its body on."""
