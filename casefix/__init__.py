"""
casefix

Bulk file renamer that converts file base names into a casing convention
(title, pascal, camel, snake, kebab, pascal-snake, pascal-kebab) while
keeping extensions untouched.
"""

from casefix.config import APP_VERSION
from casefix.models.case_style import CaseStyle
from casefix.utils.naming.case_renderer import EmptyNameError, render
from casefix.utils.naming.tokenizer import tokenize

__version__ = APP_VERSION

__all__ = [
    "CaseStyle",
    "EmptyNameError",
    "render",
    "tokenize",
]
