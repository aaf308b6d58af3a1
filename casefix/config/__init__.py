"""Module: casefix.config

Author: Michael Economou
Date: 2026-01-01

Configuration package for casefix.

- app: Application info, logging settings, user directories
- naming: Small words, delimiter cascade, traversal defaults

All settings are re-exported from this module:
    from casefix.config import APP_NAME, SMALL_WORDS
"""

from casefix.config.app import *  # noqa: F401, F403
from casefix.config.naming import *  # noqa: F401, F403
