"""
Module: test_case_style.py

Author: Michael Economou
Date: 2026-01-05

Tests for the CaseStyle enumeration.
"""

import pytest

from casefix.models.case_style import SUPPORTED_CASE_STYLES, CaseStyle


def test_exactly_seven_styles():
    assert CaseStyle.names() == [
        "title",
        "pascal",
        "camel",
        "snake",
        "kebab",
        "pascal-snake",
        "pascal-kebab",
    ]
    assert SUPPORTED_CASE_STYLES == frozenset(CaseStyle.names())


def test_parse_name_and_enum():
    assert CaseStyle.parse("pascal-snake") is CaseStyle.PASCAL_SNAKE
    assert CaseStyle.parse("  title ") is CaseStyle.TITLE
    assert CaseStyle.parse(CaseStyle.CAMEL) is CaseStyle.CAMEL


@pytest.mark.parametrize("value", ["", "TITLE", "pascal_snake", "lower"])
def test_parse_rejects_unknown(value):
    with pytest.raises(ValueError) as exc_info:
        CaseStyle.parse(value)
    assert "pascal-kebab" in str(exc_info.value)
