from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.extraction.models import ImageInput


class BaseCompletionClient(ABC):
    """Contract for provider-specific completion clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        images: Sequence[ImageInput] = (),
    ) -> str:
        """Return the provider's generated text for one user turn."""
