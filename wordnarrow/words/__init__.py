from .plural import get_singular_form, get_effective_length, is_plural, explain_singular
from .extract import extract_words_from_text

__all__ = [
    "get_singular_form",
    "get_effective_length",
    "is_plural",
    "explain_singular",
    "extract_words_from_text",
]
