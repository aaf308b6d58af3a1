"""
Module: test_name_transform_module.py

Author: Michael Economou
Date: 2026-01-05

Tests for NameTransformModule: stem transformation and extension handling.
"""

import pytest

from casefix.models.case_style import CaseStyle
from casefix.modules.name_transform_module import NameTransformModule
from casefix.utils.naming.case_renderer import EmptyNameError


@pytest.mark.parametrize(
    "case, expected",
    [
        ("title", "My File.TXT"),
        ("pascal", "MyFile.TXT"),
        ("camel", "myFile.TXT"),
        ("snake", "my_file.TXT"),
        ("kebab", "my-file.TXT"),
        ("pascal-snake", "My_File.TXT"),
        ("pascal-kebab", "My-File.TXT"),
    ],
)
def test_extension_is_preserved(case, expected):
    assert NameTransformModule.build_new_filename("My File.TXT", {"case": case}) == expected


def test_only_last_suffix_is_the_extension():
    data = {"case": "snake"}
    new_name = NameTransformModule.build_new_filename("Backup Copy.tar.gz", data)
    assert new_name == "backup_copy.tar.gz"


def test_file_without_extension():
    assert NameTransformModule.build_new_filename("READ ME", {"case": "kebab"}) == "read-me"


def test_leading_dot_belongs_to_stem():
    assert NameTransformModule.split_filename(".bashrc") == (".bashrc", "")
    assert NameTransformModule.split_filename("My File.TXT") == ("My File", ".TXT")


def test_apply_from_data_keep_upper():
    data = {"case": CaseStyle.KEBAB, "keep_upper": True}
    assert NameTransformModule.apply_from_data(data, "GO is fun") == "GO-is-fun"
    assert NameTransformModule.apply_from_data({"case": "kebab"}, "GO is fun") == "go-is-fun"


def test_apply_from_data_empty_stem_raises():
    with pytest.raises(EmptyNameError):
        NameTransformModule.build_new_filename("-_-.txt", {"case": "snake"})


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"case": "snake"}, True),
        ({"case": CaseStyle.TITLE}, True),
        ({"case": " camel "}, True),
        ({"case": "upper"}, False),
        ({"case": None}, False),
        ({}, False),
    ],
)
def test_is_effective_data(data, expected):
    assert NameTransformModule.is_effective_data(data) is expected
