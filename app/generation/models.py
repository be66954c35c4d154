from dataclasses import dataclass, field

from app.extraction.models import Attachment, InputField


@dataclass(frozen=True)
class GenerationRequest:
    """Everything submitted to one generate call."""

    transcript_text: str = ""
    rubric_text: str = ""
    transcript_files: list[Attachment] = field(default_factory=list)
    rubric_files: list[Attachment] = field(default_factory=list)

    def literal_text(self, input_field: InputField) -> str:
        if input_field is InputField.TRANSCRIPT:
            return self.transcript_text
        return self.rubric_text

    def files(self, input_field: InputField) -> list[Attachment]:
        if input_field is InputField.TRANSCRIPT:
            return self.transcript_files
        return self.rubric_files

    def uploads(self) -> dict[InputField, list[Attachment]]:
        return {f: self.files(f) for f in InputField}
