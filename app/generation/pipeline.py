from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.extraction.models import ImageInput, InputField, TextChunk
from app.generation.models import GenerationRequest


@dataclass(slots=True)
class GenerationContext:
    request: GenerationRequest
    chunks: dict[InputField, list[TextChunk]] = field(
        default_factory=lambda: {f: [] for f in InputField}
    )
    images: list[ImageInput] = field(default_factory=list)
    bundles: dict[InputField, str] = field(default_factory=dict)
    prompt: str = ""
    output: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: GenerationContext) -> GenerationContext:
        raise NotImplementedError
