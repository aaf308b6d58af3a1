"""
Module: conftest.py

Author: Michael Economou
Date: 2026-01-05

Global pytest configuration and fixtures for the casefix test suite.
"""

import logging
import os
import shutil
import sys
import tempfile

# Add project root to sys.path so 'casefix' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from casefix.utils.logging.logger_factory import LoggerFactory


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


@pytest.fixture
def temp_dir():
    path = tempfile.mkdtemp()
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def make_files(temp_dir):
    """Create empty files (relative paths, parents created) under temp_dir."""

    def _make(*relative_paths: str) -> list[str]:
        created = []
        for relative in relative_paths:
            full_path = os.path.join(temp_dir, relative)
            os.makedirs(os.path.dirname(full_path), exist_ok=True)
            with open(full_path, "w", encoding="utf-8") as f:
                f.write(relative)
            created.append(full_path)
        return created

    return _make


@pytest.fixture
def restore_logger_levels():
    """Undo LoggerFactory.set_global_level changes made by a test."""
    yield
    LoggerFactory.set_global_level(logging.DEBUG)
    LoggerFactory._global_level = None
