"""Module: case_style.py

Author: Michael Economou
Date: 2026-01-03

The closed set of casing conventions a file name can be converted to.
"""

from __future__ import annotations

from enum import Enum


class CaseStyle(Enum):
    """Supported case styles. Values are the names accepted on the command line."""

    TITLE = "title"  # This is an Example
    PASCAL = "pascal"  # ThisIsAnExample
    CAMEL = "camel"  # thisIsAnExample
    SNAKE = "snake"  # this_is_an_example
    KEBAB = "kebab"  # this-is-an-example
    PASCAL_SNAKE = "pascal-snake"  # This_Is_An_Example
    PASCAL_KEBAB = "pascal-kebab"  # This-Is-An-Example

    @classmethod
    def parse(cls, value: CaseStyle | str) -> CaseStyle:
        """Return the style for a CLI name (surrounding whitespace ignored).

        Raises:
            ValueError: If the name is not one of the supported styles.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise ValueError(
                f"Unsupported case style: {value!r} (expected one of: {', '.join(cls.names())})"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        return [style.value for style in cls]


SUPPORTED_CASE_STYLES = frozenset(CaseStyle.names())
