from .chat import (
    ChatProvider,
    ChatServiceError,
    ChatRateLimitError,
    GeminiChatProvider,
    OpenAICompatibleChatProvider,
    get_chat_provider,
)

__all__ = [
    "ChatProvider",
    "ChatServiceError",
    "ChatRateLimitError",
    "GeminiChatProvider",
    "OpenAICompatibleChatProvider",
    "get_chat_provider",
]
