"""Text cleanup components.

This package provides the deterministic rule pipeline used to clean pasted
text before it is written back to the caller.
"""

from .cleaners import (
    DEFAULT_RULES,
    ConvertFullWidth,
    RemoveExtraSpaces,
    RemoveNewlines,
    RemoveReferenceMarks,
    TextCleaner,
    TextCleaningReport,
    clean_text,
)

__all__ = [
    "TextCleaner",
    "TextCleaningReport",
    "clean_text",
    "DEFAULT_RULES",
    "RemoveReferenceMarks",
    "RemoveExtraSpaces",
    "RemoveNewlines",
    "ConvertFullWidth",
]
