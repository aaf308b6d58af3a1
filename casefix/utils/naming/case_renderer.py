"""Module: case_renderer.py

Author: Michael Economou
Date: 2026-01-03

case_renderer.py
Joins word tokens into a single name according to a case style.
Functions:
- capitalize_first: Uppercase the first character, keep the rest as-is.
- to_title_case, to_pascal_case, to_camel_case, to_snake_case, to_kebab_case,
  to_pascal_snake_case, to_pascal_kebab_case: One renderer per style.
- render: Dispatch on CaseStyle.
"""

from collections.abc import Callable, Sequence

from casefix.config import SMALL_WORDS
from casefix.models.case_style import CaseStyle


class EmptyNameError(ValueError):
    """Raised when there are no tokens to build a name from."""


def capitalize_first(token: str) -> str:
    """Uppercase the first character of a token, leaving the rest unchanged.

    Unlike str.capitalize, interior upper case (e.g. preserved "NASA") survives.
    """
    return token[:1].upper() + token[1:]


def _capitalize_all(tokens: Sequence[str]) -> list[str]:
    return [capitalize_first(token) for token in tokens]


def to_title_case(tokens: Sequence[str]) -> str:
    """Title Case with small words kept lowercase except in first position.

    Examples:
        >>> to_title_case(["an", "example", "starts", "with", "a", "short"])
        'An Example Starts With a Short'
    """
    words = [
        token if index > 0 and token.lower() in SMALL_WORDS else capitalize_first(token)
        for index, token in enumerate(tokens)
    ]
    return " ".join(words)


def to_pascal_case(tokens: Sequence[str]) -> str:
    return "".join(_capitalize_all(tokens))


def to_camel_case(tokens: Sequence[str]) -> str:
    """Like PascalCase, but the first token is left exactly as given."""
    if not tokens:
        return ""
    return tokens[0] + "".join(_capitalize_all(tokens[1:]))


def to_snake_case(tokens: Sequence[str]) -> str:
    return "_".join(tokens)


def to_kebab_case(tokens: Sequence[str]) -> str:
    return "-".join(tokens)


def to_pascal_snake_case(tokens: Sequence[str]) -> str:
    return "_".join(_capitalize_all(tokens))


def to_pascal_kebab_case(tokens: Sequence[str]) -> str:
    return "-".join(_capitalize_all(tokens))


RENDERERS: dict[CaseStyle, Callable[[Sequence[str]], str]] = {
    CaseStyle.TITLE: to_title_case,
    CaseStyle.PASCAL: to_pascal_case,
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.SNAKE: to_snake_case,
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.PASCAL_SNAKE: to_pascal_snake_case,
    CaseStyle.PASCAL_KEBAB: to_pascal_kebab_case,
}


def render(tokens: Sequence[str], style: CaseStyle | str) -> str:
    """Render tokens in the given case style.

    Args:
        tokens: Non-empty token sequence, as produced by tokenize().
        style: A CaseStyle or its CLI name.

    Returns:
        str: The joined name.

    Raises:
        EmptyNameError: If tokens is empty.
        ValueError: If style is not a supported case style.
    """
    renderer = RENDERERS[CaseStyle.parse(style)]
    if not tokens:
        raise EmptyNameError("Cannot build a name from an empty token sequence")
    return renderer(tokens)
