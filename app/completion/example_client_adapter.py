"""Offline completion client.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in CompletionDispatcherFactory.
"""

from collections.abc import Sequence
from typing import ClassVar

from app.completion.client_base import BaseCompletionClient
from app.extraction.models import ImageInput


class ExampleClientAdapter(BaseCompletionClient):
    """Returns a fixed scenario script without any network calls.

    Useful for local development and tests of the HTTP surface.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "# Role-play scenario (example provider)\n"
        "Prompt received: {prompt_chars} chars, {image_count} image(s)."
    )

    def create_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        images: Sequence[ImageInput] = (),
    ) -> str:
        _ = model, system_prompt
        return self.DEFAULT_RESPONSE.format(
            prompt_chars=len(user_prompt), image_count=len(images)
        )
