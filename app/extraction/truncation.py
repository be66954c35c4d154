DEFAULT_MAX_CHARS = 80_000


def clamp(text: str, max_chars: int = DEFAULT_MAX_CHARS) -> str:
    """Cut text to max_chars, appending a note with the original length."""
    if len(text) <= max_chars:
        return text
    return f"{text[:max_chars]}{truncation_notice(len(text))}"


def truncation_notice(original_length: int) -> str:
    return f"\n\n(... truncated, original length {original_length} chars)"
