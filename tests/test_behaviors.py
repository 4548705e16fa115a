"""Behaviour-layer stories: greeting, trimming, capitalization, and demo report."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from example_app.application.demo import DemoReport, run_demo
from example_app.domain import behaviors
from example_app.domain.arithmetic import MathUtils
from example_app.domain.enums import OverflowMode


@pytest.mark.os_agnostic
def test_build_greeting_returns_canonical_text() -> None:
    assert behaviors.build_greeting() == "Hello Maven World!"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  maven tutorial  ", "maven tutorial"),
        ("\t\nabc\r\n", "abc"),
        ("\x00\x1fabc\x7f", "abc\x7f"),
        ("   ", ""),
        ("", ""),
        ("inner  space", "inner  space"),
    ],
)
def test_trim_strips_blank_and_control_characters(raw: str, expected: str) -> None:
    """Everything at or below U+0020 is trimmed from both ends, DEL is kept."""
    assert behaviors.trim(raw) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("maven tutorial", "Maven tutorial"),
        ("Maven", "Maven"),
        ("mAVEN", "MAVEN"),
        ("x", "X"),
        ("", ""),
        ("1st place", "1st place"),
        ("éclair", "Éclair"),
    ],
)
def test_capitalize_changes_only_the_first_character(raw: str, expected: str) -> None:
    assert behaviors.capitalize(raw) == expected


@pytest.mark.os_agnostic
def test_capitalize_uses_titlecase_for_digraphs() -> None:
    """U+01C6 (dž) becomes its titlecase form U+01C5, not the uppercase U+01C4."""
    assert behaviors.capitalize("ǆep") == "ǅep"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["ßtraße", "ﬁne", "ŉ apostrophe"])
def test_capitalize_keeps_a_first_character_that_expands_when_titled(raw: str) -> None:
    assert behaviors.capitalize(raw) == raw


@pytest.mark.os_agnostic
@given(text=st.text())
def test_capitalize_never_changes_the_length(text: str) -> None:
    result = behaviors.capitalize(text)

    assert len(result) == len(text)
    assert result[1:] == text[1:]


@pytest.mark.os_agnostic
def test_clean_message_trims_then_capitalizes() -> None:
    assert behaviors.clean_message("  maven tutorial  ") == "Maven tutorial"


@pytest.mark.os_agnostic
def test_format_operation_renders_equation() -> None:
    assert behaviors.format_operation(-2, "*", 5, -10) == "-2 * 5 = -10"


@pytest.mark.os_agnostic
def test_run_demo_produces_the_classic_output() -> None:
    report = run_demo("  maven tutorial  ", 5, 3)

    assert report.lines() == [
        "Hello Maven World!",
        "Original: '  maven tutorial  '",
        "Processed: 'Maven tutorial'",
        "5 + 3 = 8",
    ]


@pytest.mark.os_agnostic
def test_run_demo_honours_the_given_overflow_mode() -> None:
    report = run_demo("x", 2**31 - 1, 1, math_utils=MathUtils(OverflowMode.WRAP32))

    assert report.total == -(2**31)
    assert report.lines()[-1] == "2147483647 + 1 = -2147483648"


@pytest.mark.os_agnostic
def test_demo_report_is_frozen() -> None:
    report = DemoReport(greeting="g", original="o", processed="p", left=1, right=2, total=3)
    with pytest.raises(AttributeError):
        report.total = 4  # type: ignore[misc]
