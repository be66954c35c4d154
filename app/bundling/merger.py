"""Merges literal field text with the text extracted from its attachments."""

from collections.abc import Sequence

from app.extraction.models import InputField, TextChunk

RUBRIC_SEPARATOR = "────────────────────"
RUBRIC_HEADER = "[Supplementary: scoring rules / rubric (part of the input)]"


def attachments_banner(field: InputField) -> str:
    return f"[{field.label} field attachments]"


def merge(literal_text: str, chunks: Sequence[TextChunk], banner: str) -> str:
    """Combine literal text with attachment chunks, keeping submission order.

    With no chunks the trimmed literal text is returned. Otherwise the banner
    line and all rendered chunks follow the literal text, separated by blank
    lines; an empty literal segment is omitted.
    """
    literal = literal_text.strip()
    if not chunks:
        return literal
    attachments = banner + "\n" + "\n\n".join(chunk.render() for chunk in chunks)
    return "\n\n".join(part for part in (literal, attachments) if part)


def merge_field(
    field: InputField, literal_text: str, chunks: Sequence[TextChunk]
) -> str:
    return merge(literal_text, chunks, attachments_banner(field))


def bundle_rubric(transcript_bundle: str, rubric_bundle: str) -> str:
    """Append the rubric bundle to the transcript bundle under its own header."""
    transcript = transcript_bundle.strip()
    rubric = rubric_bundle.strip()
    if not rubric:
        return transcript
    return "\n".join([transcript, "", RUBRIC_SEPARATOR, RUBRIC_HEADER, rubric])
