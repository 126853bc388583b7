"""Google Gemini chat transport.

Uses the official Google GenAI SDK for async content generation.
Reference: https://github.com/googleapis/python-genai

The request carries a single user turn, which the SDK serialises as
``{"contents": [{"parts": [{"text": message}]}]}``. The reply is the text of
the first part of the first candidate.
"""

from typing import Any

from google import genai
from google.genai import errors, types

from ..errors import TransportError
from .base import ChatTransport

DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiTransport(ChatTransport):
    """Gemini implementation of ChatTransport.

    Hidden design decisions:
    - Google GenAI client initialization
    - Message format conversion
    - Which part of the response is the reply
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, **client_kwargs: Any):
        """Initialize Gemini transport.

        Args:
            api_key: Google AI API key
            model: Model name (default: gemini-2.0-flash)
            **client_kwargs: Additional kwargs for Client
        """
        self._api_key = api_key
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def api_key(self) -> str:
        """Get the API key."""
        return self._api_key

    @staticmethod
    def build_contents(message: str) -> list[types.Content]:
        return [types.Content(role="user", parts=[types.Part(text=message)])]

    @staticmethod
    def extract_reply(response: types.GenerateContentResponse) -> str:
        """Return the first part's text of the first candidate.

        Raises:
            TransportError: No candidate, or a candidate with no text part
        """
        if not response.candidates:
            raise TransportError("No candidates found in response")

        content = response.candidates[0].content
        if not content or not content.parts or content.parts[0].text is None:
            raise TransportError("No response parts found")

        return content.parts[0].text

    async def send_message(self, message: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=self.build_contents(message),
            )
        except errors.APIError as e:
            raise TransportError(f"API request failed: {e.message or e}") from e

        return self.extract_reply(response)

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
