"""Text helpers shared by the engine and the HTTP boundary."""


def clamp_text(value: object, max_chars: int) -> str:
    """
    Coerce a value to text and truncate it to ``max_chars``.

    ``None`` becomes the empty string. Oversized input is cut silently.
    """
    if value is None:
        return ""
    return str(value)[:max_chars]


def count_words(text: str) -> int:
    """Count whitespace-delimited words; blank text has zero words."""
    return len(text.split())
