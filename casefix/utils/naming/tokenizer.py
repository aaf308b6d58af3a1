"""Module: tokenizer.py

Author: Michael Economou
Date: 2026-01-03

tokenizer.py
Splits a file name stem into word tokens.

Delimiters are folded in a fixed order: '-' onto '_', '_' onto ',', ',' onto
a space, then the text is split on whitespace. Each piece is stripped at every
step, so "This is - an Random Name" and "This-is_an_random-Name" end up with
the same words.
"""

from casefix.config import DELIMITER_CASCADE


def normalize_delimiters(stem: str) -> str:
    """Fold every cascade delimiter onto single spaces.

    Examples:
        >>> normalize_delimiters("This-is_an_random-Name")
        'This is an random Name'
    """
    text = stem
    joiners = DELIMITER_CASCADE[1:] + (" ",)
    for delimiter, joiner in zip(DELIMITER_CASCADE, joiners):
        text = joiner.join(part.strip() for part in text.split(delimiter))
    return text


def normalize_token(token: str, keep_upper: bool = False) -> str:
    """Lowercase a token unless it is all upper case and keep_upper is set.

    Tokens without cased characters (digits, symbols) count as upper case;
    lowercasing would not change them anyway.
    """
    if keep_upper and token == token.upper():
        return token
    return token.lower()


def tokenize(stem: str, keep_upper: bool = False) -> list[str]:
    """Split a stem into ordered, non-empty word tokens.

    Args:
        stem: File base name without extension.
        keep_upper: Preserve tokens that are entirely upper case.

    Returns:
        Tokens in original order. Empty when the stem holds only delimiters.

    Examples:
        >>> tokenize("This is AN random, name")
        ['this', 'is', 'an', 'random', 'name']
        >>> tokenize("this-is_an_random-NAME", keep_upper=True)
        ['this', 'is', 'an', 'random', 'NAME']
    """
    words = normalize_delimiters(stem).split()
    return [normalize_token(word, keep_upper) for word in words]
