"""Module: name_transform_module.py

Author: Michael Economou
Date: 2026-01-03

modules/name_transform_module.py
Applies a case style to a file base name, keeping the extension untouched.
"""

import os
from typing import Any

from casefix.models.case_style import SUPPORTED_CASE_STYLES, CaseStyle
from casefix.utils.logging.logger_factory import get_cached_logger
from casefix.utils.naming.case_renderer import render
from casefix.utils.naming.tokenizer import tokenize

logger = get_cached_logger(__name__)


class NameTransformModule:
    """Logic component for converting a stem into a case style."""

    DISPLAY_NAME = "Name Transform"
    DESCRIPTION = "Convert file base names into a casing convention"

    @staticmethod
    def apply_from_data(data: dict[str, Any], base_name: str) -> str:
        """Applies the case transformation to the given base name.

        Args:
            data (dict): Contains 'case' (style name or CaseStyle) and 'keep_upper'
            base_name (str): Stem to transform (no extension)

        Returns:
            str: Transformed base name

        Raises:
            EmptyNameError: If the base name holds no word tokens.
        """
        style = CaseStyle.parse(data["case"])
        keep_upper = bool(data.get("keep_upper", False))

        tokens = tokenize(base_name, keep_upper=keep_upper)
        logger.debug(
            "[NameTransformModule] Input: %s | case: %s | keep_upper: %s | tokens: %s",
            base_name,
            style.value,
            keep_upper,
            tokens,
            extra={"dev_only": True},
        )
        return render(tokens, style)

    @staticmethod
    def is_effective_data(data: dict[str, Any]) -> bool:
        """Returns True if a supported case style is selected."""
        case = data.get("case")
        if isinstance(case, CaseStyle):
            return True
        return isinstance(case, str) and case.strip() in SUPPORTED_CASE_STYLES

    @staticmethod
    def split_filename(filename: str) -> tuple[str, str]:
        """Split a file name into stem and extension.

        A leading dot belongs to the stem (".bashrc" has no extension).
        """
        return os.path.splitext(filename)

    @classmethod
    def build_new_filename(cls, filename: str, data: dict[str, Any]) -> str:
        """Transform the stem of a file name and reattach its original extension.

        Examples:
            >>> NameTransformModule.build_new_filename("My File.TXT", {"case": "snake"})
            'my_file.TXT'
        """
        stem, extension = cls.split_filename(filename)
        return f"{cls.apply_from_data(data, stem)}{extension}"
