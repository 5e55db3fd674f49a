"""OpenAI-compatible chat completions client for recipe generation."""

from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from recipe_generator.errors import MalformedJSONError
from recipe_generator.services.generation import GenerationClient


@dataclass
class OpenAIChatClient(GenerationClient):
    """Generation client backed by the chat completions API.

    The base URL is configurable so DeepSeek and other OpenAI-compatible
    providers work with the same SDK.
    """

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 60.0
    ) -> "OpenAIChatClient":
        """Create a chat client with a managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, base_url=base_url, http_client=http_client
            )
        )

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
    ) -> str:
        """Call chat completions and return the first choice's content."""
        completion = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
        )
        if not completion.choices:
            raise MalformedJSONError("completion has no choices")
        content = completion.choices[0].message.content
        if not content:
            raise MalformedJSONError("completion content is empty")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
