from app.bundling.merger import (
    RUBRIC_HEADER,
    attachments_banner,
    bundle_rubric,
    merge,
    merge_field,
)
from app.extraction.models import InputField, TextChunk

BANNER = "[Attachments]"


def _chunk(name: str, text: str) -> TextChunk:
    return TextChunk(label=f"Transcript attachment (Text): {name}", text=text)


class TestMerge:
    def test_empty_literal_and_no_chunks_is_empty(self) -> None:
        assert merge("", [], BANNER) == ""

    def test_literal_without_chunks_is_trimmed(self) -> None:
        assert merge("  abc \n", [], BANNER) == "abc"

    def test_empty_literal_with_chunk_keeps_banner(self) -> None:
        chunk = _chunk("a.txt", "hello")
        assert merge("", [chunk], BANNER) == f"{BANNER}\n{chunk.render()}"

    def test_literal_then_banner_then_chunks(self) -> None:
        result = merge("intro", [_chunk("a.txt", "A"), _chunk("b.txt", "B")], BANNER)
        assert result == (
            "intro\n\n[Attachments]\n"
            "[Transcript attachment (Text): a.txt]\nA\n\n"
            "[Transcript attachment (Text): b.txt]\nB"
        )

    def test_preserves_submission_order(self) -> None:
        chunks = [_chunk(f"{i}.txt", str(i)) for i in (3, 1, 2)]
        result = merge("", chunks, BANNER)
        assert result.index("3.txt") < result.index("1.txt") < result.index("2.txt")


class TestMergeField:
    def test_uses_field_banner(self) -> None:
        result = merge_field(InputField.RUBRIC, "", [_chunk("a.txt", "A")])
        assert result.startswith(attachments_banner(InputField.RUBRIC))


class TestBundleRubric:
    def test_returns_transcript_when_rubric_empty(self) -> None:
        assert bundle_rubric("transcript", "  ") == "transcript"

    def test_appends_rubric_under_header(self) -> None:
        result = bundle_rubric("transcript", "rubric")
        assert result.startswith("transcript\n\n")
        assert result.endswith(f"{RUBRIC_HEADER}\nrubric")
