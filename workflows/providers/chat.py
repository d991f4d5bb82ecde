import logging
from abc import ABC, abstractmethod

import httpx
from google import genai
from google.genai import errors as genai_errors

from workflows.core import get_settings

logger = logging.getLogger(__name__)


class ChatServiceError(Exception):
    """Raised when the chat/LLM API is unavailable or returns an unexpected payload."""


class ChatRateLimitError(ChatServiceError):
    """Raised when the chat/LLM API rate limits the request."""


class ChatProvider(ABC):
    """Text generation collaborator: one prompt in, raw model text out."""

    @abstractmethod
    async def generate(self, prompt: str) -> str | None:
        """
        Send a single prompt and return the model's text.

        Returns None or blank text when the model produced nothing (content filter,
        empty candidate); callers decide whether that is an error.
        """


class OpenAICompatibleChatProvider(ChatProvider):
    """OpenAI-compatible endpoint (vLLM, etc.)."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        model: str,
        *,
        timeout: float = 60.0,
        max_tokens: int = 8192,
    ):
        self.base_url = base_url.rstrip("/")
        if not self.base_url.endswith("/v1"):
            self.base_url = f"{self.base_url}/v1"
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens

    async def generate(self, prompt: str) -> str | None:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": 0.2,
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                r = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers=headers,
                )
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 429:
                raise ChatRateLimitError(
                    "Chat API rate limited the request. Please retry later."
                ) from e
            body = getattr(e.response, "text", None) or ""
            if body:
                logger.warning(
                    "Chat API error %s: %s",
                    e.response.status_code,
                    body[:500],
                )
            raise ChatServiceError(
                f"Chat API returned {e.response.status_code}. Please try again later."
            ) from e
        except httpx.RequestError as e:
            raise ChatServiceError(
                "Chat service unavailable (timeout or connection error). Please try again later."
            ) from e
        except ValueError as e:
            raise ChatServiceError("Chat API returned a non-JSON body.") from e

        try:
            choices = data.get("choices") or []
            if not choices:
                return None
            content = (choices[0].get("message") or {}).get("content")
        except (AttributeError, KeyError, TypeError, IndexError) as e:
            raise ChatServiceError("Chat API returned unexpected response format.") from e
        return content if isinstance(content, str) else None


class OpenAIChatProvider(OpenAICompatibleChatProvider):
    """Official OpenAI API."""

    def __init__(self):
        s = get_settings()
        super().__init__(
            base_url="https://api.openai.com/v1",
            api_key=s.openai_api_key,
            model=s.chat_model or _OPENAI_DEFAULT_MODEL,
            timeout=s.chat_timeout_seconds,
            max_tokens=s.chat_max_tokens,
        )


class GeminiChatProvider(ChatProvider):
    """Google Gemini through the google-genai SDK (async client)."""

    def __init__(self, api_key: str, model: str):
        self.client = genai.Client(api_key=api_key)
        self.model = model

    async def generate(self, prompt: str) -> str | None:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except genai_errors.APIError as e:
            if e.code == 429:
                raise ChatRateLimitError(
                    "Gemini rate limited the request. Please retry later."
                ) from e
            logger.warning("Gemini API error %s: %s", e.code, str(e)[:500])
            raise ChatServiceError(
                f"Gemini returned {e.code}. Please try again later."
            ) from e
        except httpx.RequestError as e:
            raise ChatServiceError(
                "Gemini unavailable (timeout or connection error). Please try again later."
            ) from e
        return getattr(response, "text", None)


# Default model for OpenAI official API when CHAT_MODEL is not set
_OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
# Default model for OpenAI-compatible (vLLM, etc.) when CHAT_MODEL is not set
_OPENAI_COMPATIBLE_DEFAULT_MODEL = "Qwen/Qwen2.5-7B-Instruct"


def get_chat_provider() -> ChatProvider:
    s = get_settings()
    choice = (s.chat_provider or "").strip().lower()

    if choice == "gemini" or (not choice and s.gemini_api_key and not s.chat_api_base_url and not s.openai_api_key):
        if not s.gemini_api_key:
            raise RuntimeError("Gemini selected but GEMINI_API_KEY is not set.")
        return GeminiChatProvider(api_key=s.gemini_api_key, model=s.gemini_model)
    if choice == "openai" or (not choice and s.openai_api_key and not s.chat_api_base_url):
        return OpenAIChatProvider()
    if choice in ("openai_compatible", "") and s.chat_api_base_url:
        return OpenAICompatibleChatProvider(
            base_url=s.chat_api_base_url,
            api_key=s.chat_api_key,
            model=s.chat_model or _OPENAI_COMPATIBLE_DEFAULT_MODEL,
            timeout=s.chat_timeout_seconds,
            max_tokens=s.chat_max_tokens,
        )
    raise RuntimeError(
        "Chat LLM not configured. Set GEMINI_API_KEY, OPENAI_API_KEY or CHAT_API_BASE_URL (and CHAT_MODEL)."
    )
