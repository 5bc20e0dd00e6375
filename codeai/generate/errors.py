"""Error taxonomy for the generator layer.

``ProviderError`` subclasses are recoverable: the dispatcher falls back to a
local reply or the local formatter. ``TaskError`` subclasses are terminal and
carry the HTTP status the API reports them with.
"""

from __future__ import annotations

from typing import Optional


class CodeAIError(RuntimeError):
    """Base class for errors raised by codeai."""


class ProviderError(CodeAIError):
    """The backend could not produce a usable reply."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class UpstreamError(ProviderError):
    """Transport failure or non-success status from the backend."""

    def __init__(self, provider: str, status: Optional[int], body: str) -> None:
        status_txt = status if status is not None else "no response"
        super().__init__(provider, f"{provider} returned {status_txt}: {body}")
        self.status = status
        self.body = body


class ResponseFormatError(ProviderError):
    """The backend answered, but not in a shape we understand."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(provider, f"Unexpected response format from {provider}: {reason}")
        self.reason = reason


class TaskError(CodeAIError):
    status_code = 500

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ExtractionError(TaskError):
    """No Swift array could be found in the input."""
    status_code = 400


class FormattingError(TaskError):
    """An array was found, but the local formatter could not rewrite it."""
    status_code = 500
