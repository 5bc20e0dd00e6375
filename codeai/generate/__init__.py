# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import ChatGenerator
from .types import Message, ChatResponse, ModelParams
from .errors import (
    CodeAIError,
    ProviderError,
    UpstreamError,
    ResponseFormatError,
    TaskError,
    ExtractionError,
    FormattingError,
)
from .clients import build_model_client, LocalClient

__all__ = [
    "ChatGenerator",
    "Message",
    "ChatResponse",
    "ModelParams",
    "CodeAIError",
    "ProviderError",
    "UpstreamError",
    "ResponseFormatError",
    "TaskError",
    "ExtractionError",
    "FormattingError",
    "build_model_client",
    "LocalClient",
]
