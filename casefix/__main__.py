#!/usr/bin/env python3
"""
Module: casefix.__main__

This module allows the casefix package to be executed as a module using:
    python -m casefix
"""

import sys

from casefix.cli import main

if __name__ == "__main__":
    sys.exit(main())
