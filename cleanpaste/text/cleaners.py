"""Deterministic text cleaning rules.

Responsibilities:
- Provide the cleanup rules for pasted or copied text.
- Apply enabled rules in one fixed order, independent of configuration.

Key types:
- `TextCleaner`: stateless pipeline over the default rule sequence.
- `TextCleaningReport`: cleaned text plus per-rule diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol

from ..config import CleaningConfig


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    name: str

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class RemoveReferenceMarks:
    """Remove numeric citation markers such as `[12]`, `[3-5]` or `(1, 2)`."""

    name = "remove_reference_marks"

    _BRACKETED_RE = re.compile(r"\[[0-9,\-\s]+\]")
    _PARENTHESIZED_RE = re.compile(r"\([0-9,\-\s]+\)")

    def apply(self, text: str) -> str:
        """Drop square-bracket markers first, then parenthesized ones."""

        text = self._BRACKETED_RE.sub("", text)
        return self._PARENTHESIZED_RE.sub("", text)


class RemoveExtraSpaces:
    """Delete ASCII space runs.

    Runs are removed entirely rather than collapsed to one space, so adjacent
    words merge. Tabs and other whitespace are left alone.
    """

    name = "remove_extra_spaces"

    _SPACES_RE = re.compile(r" +")

    def apply(self, text: str) -> str:
        """Apply space removal rule."""

        return self._SPACES_RE.sub("", text)


class RemoveNewlines:
    """Join lines by deleting carriage returns and line feeds."""

    name = "remove_newlines"

    _LINE_BREAKS_RE = re.compile(r"[\r\n]+")

    def apply(self, text: str) -> str:
        """Apply newline removal rule."""

        return self._LINE_BREAKS_RE.sub("", text)


_FULL_WIDTH_FIRST = 0xFF01
_FULL_WIDTH_LAST = 0xFF5E
_FULL_WIDTH_OFFSET = 0xFEE0


class ConvertFullWidth:
    """Convert full-width ASCII variants (U+FF01..U+FF5E) to half-width.

    The ideographic space U+3000 lies outside the block and is not converted.
    """

    name = "convert_full_width"

    _TABLE = {
        codepoint: codepoint - _FULL_WIDTH_OFFSET
        for codepoint in range(_FULL_WIDTH_FIRST, _FULL_WIDTH_LAST + 1)
    }

    def apply(self, text: str) -> str:
        """Apply full-width to half-width conversion."""

        return text.translate(self._TABLE)


# Space separators (Zs), tab, VT, FF, CR, LF, U+2028/U+2029 and the BOM.
# U+0085 and U+001C..U+001F are not in this set, unlike `str.strip`.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_TRIM_RE = re.compile(f"\\A[{_TRIM_CHARS}]+|[{_TRIM_CHARS}]+\\Z")


def trim_whitespace(text: str) -> str:
    """Strip leading and trailing whitespace, BOM included."""

    return _TRIM_RE.sub("", text)


DEFAULT_RULES: tuple[CleanerRule, ...] = (
    RemoveReferenceMarks(),
    RemoveExtraSpaces(),
    RemoveNewlines(),
    ConvertFullWidth(),
)


@dataclass(frozen=True, slots=True)
class TextCleaningReport:
    """Structured output of one cleaning pass."""

    cleaned_text: str
    applied_rules: tuple[str, ...]
    changed_rules: tuple[str, ...]


class TextCleaner:
    """Apply enabled cleaner rules in fixed order and trim the result."""

    def __init__(self) -> None:
        """Initialize with the default rule sequence."""

        self.rules = DEFAULT_RULES

    def clean_with_report(
        self, text: str, config: CleaningConfig | None = None
    ) -> TextCleaningReport:
        """Apply enabled rules and return cleaned text with diagnostics."""

        resolved = config if config is not None else CleaningConfig()
        applied: list[str] = []
        changed: list[str] = []
        current = text
        for rule in self.rules:
            if not resolved.is_enabled(rule.name):
                continue
            updated = rule.apply(current)
            applied.append(rule.name)
            if updated != current:
                changed.append(rule.name)
            current = updated
        return TextCleaningReport(
            cleaned_text=trim_whitespace(current),
            applied_rules=tuple(applied),
            changed_rules=tuple(changed),
        )

    def clean(self, text: str, config: CleaningConfig | None = None) -> str:
        """Apply enabled rules in order and return the trimmed result."""

        return self.clean_with_report(text, config).cleaned_text


_DEFAULT_CLEANER = TextCleaner()


def clean_text(text: str, config: CleaningConfig | None = None) -> str:
    """Clean `text` with the shared default cleaner."""

    return _DEFAULT_CLEANER.clean(text, config)
