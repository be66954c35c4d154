from collections.abc import Sequence
from typing import Any

import httpx
import openai

from app.completion.client_base import BaseCompletionClient
from app.completion.exceptions import CompletionError, CompletionNetworkError
from app.extraction.models import ImageInput


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        images: Sequence[ImageInput] = (),
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": self._user_content(user_prompt, images)},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise CompletionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise CompletionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise CompletionError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise CompletionError("AI returned empty response")
        return content

    @staticmethod
    def _user_content(
        user_prompt: str, images: Sequence[ImageInput]
    ) -> str | list[dict[str, Any]]:
        if not images:
            return user_prompt
        parts: list[dict[str, Any]] = [{"type": "text", "text": user_prompt}]
        parts.extend(
            {"type": "image_url", "image_url": {"url": image.data_url}} for image in images
        )
        return parts
