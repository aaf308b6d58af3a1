"""Module: casefix.config.naming

Author: Michael Economou
Date: 2026-01-01

Naming rules: title-case small words, delimiter cascade, traversal defaults.
"""

# =====================================
# TITLE CASE
# =====================================

# Articles, conjunctions and short prepositions kept lowercase in title case
# (unless they are the first word)
SMALL_WORDS = frozenset(
    {
        "a", "an", "the",
        "and", "as", "but", "for", "if", "nor", "or", "so", "yet",
        "at", "by", "in", "of", "off", "on", "per", "to", "up", "via",
    }
)

# =====================================
# TOKENIZATION
# =====================================

# Each delimiter is folded onto the next one before splitting again.
# The last one is folded onto a space and the final split is on whitespace.
DELIMITER_CASCADE = ("-", "_", ",")

# =====================================
# TRAVERSAL
# =====================================

DEFAULT_DEPTH = 10
HIDDEN_FILE_PREFIX = "."
