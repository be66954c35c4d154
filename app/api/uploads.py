"""Turns an incoming multipart or JSON body into a GenerationRequest."""

import json
from typing import Any

from fastapi import Request
from starlette.datastructures import FormData, UploadFile

from app.extraction.models import Attachment
from app.generation.exceptions import UploadLimitError, ValidationError
from app.generation.models import GenerationRequest

TRANSCRIPT_FILES_FIELD = "contextFiles"
RUBRIC_FILES_FIELD = "rubricFiles"


def clean_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def transcript_text(values: dict[str, Any]) -> str:
    """contextDocuments wins over text when both are present."""
    return clean_text(values.get("contextDocuments")) or clean_text(values.get("text"))


async def read_generation_request(
    request: Request, max_files: int, max_file_size_bytes: int
) -> GenerationRequest:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        return await _from_json(request)
    async with request.form(max_files=max_files) as form:
        return GenerationRequest(
            transcript_text=transcript_text(dict(form)),
            rubric_text=clean_text(form.get("rubricInput")),
            transcript_files=await _attachments(
                form, TRANSCRIPT_FILES_FIELD, max_file_size_bytes
            ),
            rubric_files=await _attachments(form, RUBRIC_FILES_FIELD, max_file_size_bytes),
        )


async def _from_json(request: Request) -> GenerationRequest:
    try:
        body = await request.json()
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return GenerationRequest(
        transcript_text=transcript_text(body),
        rubric_text=clean_text(body.get("rubricInput")),
    )


async def _attachments(
    form: FormData, field_name: str, max_file_size_bytes: int
) -> list[Attachment]:
    attachments: list[Attachment] = []
    for item in form.getlist(field_name):
        if not isinstance(item, UploadFile):
            continue
        # Oversized parts stay spooled on disk; reject before reading them into memory.
        if item.size is not None and item.size > max_file_size_bytes:
            raise UploadLimitError(
                f"File too large: {item.filename} "
                f"({item.size} bytes, max {max_file_size_bytes})"
            )
        attachments.append(
            Attachment(original_name=item.filename or "", content=await item.read())
        )
    return attachments


def summarize(request: GenerationRequest) -> dict[str, object]:
    """Loggable summary of a request, without file contents."""
    return {
        "has_transcript_text": bool(request.transcript_text),
        "has_rubric_text": bool(request.rubric_text),
        "transcript_files": [
            {"name": a.original_name, "size": a.size_bytes} for a in request.transcript_files
        ],
        "rubric_files": [
            {"name": a.original_name, "size": a.size_bytes} for a in request.rubric_files
        ],
    }
