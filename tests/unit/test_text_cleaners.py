"""Unit tests for text cleaning rules and the fixed-order cleaning pipeline."""

from __future__ import annotations

import pytest

from cleanpaste.config import RULE_NAMES, CleaningConfig
from cleanpaste.text.cleaners import (
    ConvertFullWidth,
    RemoveExtraSpaces,
    RemoveNewlines,
    RemoveReferenceMarks,
    TextCleaner,
    clean_text,
)


ALL_ENABLED = CleaningConfig()
ALL_DISABLED = CleaningConfig.all_disabled()


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("see [12] here", "see  here"),
        ("range [3-5].", "range ."),
        ("list [1, 2, 3]!", "list !"),
        ("paren (12-15) done", "paren  done"),
        ("both [1](2)", "both "),
    ],
)
def test_reference_marks_rule_removes_numeric_markers(source: str, expected: str) -> None:
    """Reference-mark rule should drop bracket/paren spans of digits, commas, hyphens, spaces."""

    assert RemoveReferenceMarks().apply(source) == expected


@pytest.mark.parametrize(
    "source",
    ["[abc]", "(see 3)", "[1a]", "[]", "()", "[1.2]", "(12;13)"],
)
def test_reference_marks_rule_keeps_non_numeric_brackets(source: str) -> None:
    """Reference-mark rule should leave spans with any other character untouched."""

    assert RemoveReferenceMarks().apply(source) == source


def test_reference_marks_rule_ignores_full_width_digits() -> None:
    """Only ASCII digits count as citation content."""

    assert RemoveReferenceMarks().apply("[１２]") == "[１２]"


def test_extra_spaces_rule_deletes_runs_instead_of_collapsing() -> None:
    """Space rule deletes every ASCII space run, merging adjacent words."""

    assert RemoveExtraSpaces().apply("a  b c") == "abc"


def test_extra_spaces_rule_keeps_tabs_and_other_space_characters() -> None:
    """Space rule should only target U+0020."""

    assert RemoveExtraSpaces().apply("a\tb\u3000c\u00a0d") == "a\tb\u3000c\u00a0d"


def test_newlines_rule_deletes_cr_and_lf_runs() -> None:
    """Newline rule should join lines without a separator."""

    assert RemoveNewlines().apply("a\r\nb\n\n\nc\rd") == "abcd"


def test_full_width_rule_maps_block_boundaries() -> None:
    """Full-width rule should convert U+FF01 and U+FF5E inclusive."""

    assert ConvertFullWidth().apply("！～") == "!~"


def test_full_width_rule_converts_letters_digits_and_punctuation() -> None:
    """Full-width alphanumerics and punctuation should become ASCII."""

    assert ConvertFullWidth().apply("Ｈｅｌｌｏ，１２３？") == "Hello,123?"


def test_full_width_rule_leaves_characters_outside_block() -> None:
    """Ideographic space, CJK ideographs and halfwidth katakana are unchanged."""

    source = "　中文＀｟･"
    assert ConvertFullWidth().apply(source) == source


def test_clean_removes_marks_then_deletes_spaces() -> None:
    """Example pipeline run should remove marks, delete spaces, then trim."""

    assert TextCleaner().clean("Hello [12] World (3-5) test", ALL_ENABLED) == "HelloWorldtest"


def test_clean_newlines_only() -> None:
    """Only the newline rule should run when it is the single enabled flag."""

    config = CleaningConfig.only("remove_newlines")

    assert TextCleaner().clean("line1\r\nline2\nline3", config) == "line1line2line3"


def test_clean_full_width_only() -> None:
    """Only full-width conversion should run when it is the single enabled flag."""

    config = CleaningConfig.only("convert_full_width")

    assert TextCleaner().clean("Ａ！Ｂ？", config) == "A!B?"


def test_clean_bracket_precision_with_all_rules() -> None:
    """Non-numeric brackets survive while numeric ones are removed."""

    cleaner = TextCleaner()

    assert cleaner.clean("[abc]", ALL_ENABLED) == "[abc]"
    assert cleaner.clean("[1,2]", ALL_ENABLED) == ""


@pytest.mark.parametrize(
    "config",
    [ALL_ENABLED, ALL_DISABLED] + [CleaningConfig.only(name) for name in RULE_NAMES],
)
def test_clean_empty_and_whitespace_input_returns_empty_string(config: CleaningConfig) -> None:
    """Empty and whitespace-only input should clean to an empty string for every config."""

    cleaner = TextCleaner()

    assert cleaner.clean("", config) == ""
    assert cleaner.clean(" \t\r\n ", config) == ""


@pytest.mark.parametrize(
    "source",
    ["  Hello [1]  \n World ", "\tＡ Ｂ\r\n", "plain", "(1) [2]\n"],
)
def test_clean_with_all_rules_disabled_only_trims(source: str) -> None:
    """All rules disabled should be equivalent to stripping the input."""

    assert TextCleaner().clean(source, ALL_DISABLED) == source.strip()


@pytest.mark.parametrize(
    "source",
    [
        "Hello [12] World (3-5) test",
        "第一章 [3]\r\n正文，Ｈｅｌｌｏ！",
        "  keep (see note)  and\ttabs ",
        "",
    ],
)
def test_clean_is_idempotent(source: str) -> None:
    """A second pass over cleaned output should not change it."""

    cleaner = TextCleaner()
    once = cleaner.clean(source, ALL_ENABLED)

    assert cleaner.clean(once, ALL_ENABLED) == once


def test_clean_keeps_order_when_rules_are_disabled() -> None:
    """Disabling space removal must not move newline removal ahead of mark removal."""

    config = CleaningConfig(remove_extra_spaces=False)

    # A marker holding only a line break is removed whole; joining lines first
    # would leave an empty `[]` behind.
    assert TextCleaner().clean("a[\n]b c", config) == "ab c"


def test_marks_removed_before_spaces_are_deleted() -> None:
    """A whitespace-only marker is dropped before space deletion can empty it."""

    assert TextCleaner().clean("x[ ]y( )z") == "xyz"


def test_trim_removes_byte_order_mark_and_unicode_spaces() -> None:
    """Final trim should drop a leading BOM and Unicode space separators."""

    cleaner = TextCleaner()

    assert cleaner.clean("\ufeffHello") == "Hello"
    assert cleaner.clean("\u3000\u00a0Hello\u2003 ", ALL_DISABLED) == "Hello"


@pytest.mark.parametrize("edge", ["\x85", "\x1c", "\x1f"])
def test_trim_keeps_next_line_and_information_separators(edge: str) -> None:
    """U+0085 and U+001C..U+001F are not trimmed."""

    assert TextCleaner().clean(f"Hello{edge}", ALL_DISABLED) == f"Hello{edge}"
    assert TextCleaner().clean(f"{edge}Hello", ALL_DISABLED) == f"{edge}Hello"


def test_marks_removed_before_full_width_conversion() -> None:
    """Full-width brackets are converted after mark removal, so they stay in place."""

    assert TextCleaner().clean("note［１］", ALL_ENABLED) == "note[1]"


def test_spaces_deleted_before_newlines_are_joined() -> None:
    """Space deletion never inserts separators, so joined lines stay glued."""

    config = CleaningConfig.only("remove_extra_spaces", "remove_newlines")

    assert TextCleaner().clean("one \ntwo", config) == "onetwo"


def test_clean_with_report_lists_applied_and_changed_rules() -> None:
    """Report should list enabled rules in order and the ones that changed text."""

    report = TextCleaner().clean_with_report("a [1] b", CleaningConfig(remove_newlines=False))

    assert report.cleaned_text == "ab"
    assert report.applied_rules == (
        "remove_reference_marks",
        "remove_extra_spaces",
        "convert_full_width",
    )
    assert report.changed_rules == ("remove_reference_marks", "remove_extra_spaces")


def test_clean_defaults_to_all_rules_enabled() -> None:
    """Omitting config should enable every rule."""

    assert clean_text(" Ａ [1]\nＢ ") == "AB"
    assert TextCleaner().clean(" Ａ [1]\nＢ ") == "AB"
