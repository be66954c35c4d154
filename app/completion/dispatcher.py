"""Single-shot completion call for an assembled scenario prompt."""

from collections.abc import Sequence

from app.completion.client_base import BaseCompletionClient
from app.extraction.models import ImageInput
from app.logging.logger import Log


class CompletionDispatcher:
    """Sends one prompt (plus optional images) to the provider; no retries."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        system_prompt: str,
    ) -> None:
        self._client = client
        self._model = model
        self._system_prompt = system_prompt

    @property
    def model(self) -> str:
        return self._model

    def complete(self, prompt: str, images: Sequence[ImageInput] = ()) -> str:
        Log.debug(f"Completion prompt:\n{prompt}")
        Log.info(
            f"Calling model {self._model} with {len(prompt)} prompt chars "
            f"and {len(images)} image(s)"
        )
        output = self._client.create_completion(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            images=images,
        )
        Log.info(f"Completion returned {len(output)} chars")
        return output
