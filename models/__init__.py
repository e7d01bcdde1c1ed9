"""Pydantic shapes exchanged between the desktop UI and the backend."""

from models.command_models import (
    CHAT_MODES,
    DEFAULT_CHAT_MODE,
    DEFAULT_MESSAGE_TONE,
    MESSAGE_TONES,
    ChatMessage,
    ChatResponse,
    LiteratureResult,
    VoeAlert,
)

__all__ = [
    "CHAT_MODES",
    "DEFAULT_CHAT_MODE",
    "DEFAULT_MESSAGE_TONE",
    "MESSAGE_TONES",
    "ChatMessage",
    "ChatResponse",
    "LiteratureResult",
    "VoeAlert",
]
