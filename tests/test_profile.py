"""Tests for activation selector parsing."""

import pytest

from conditional_demo.constants import PROFILE_TYPEONE, PROFILE_TYPETWO
from conditional_demo.profile import parse_profile


@pytest.mark.parametrize(
    "config,expected",
    [
        ("typeone", PROFILE_TYPEONE),
        ("typetwo", PROFILE_TYPETWO),
        ("TypeOne", PROFILE_TYPEONE),
        ("  typetwo\n", PROFILE_TYPETWO),
    ],
)
def test_recognized_profiles(config: str, expected: str):
    assert parse_profile(config) == expected


@pytest.mark.parametrize("config", [None, "", "   "])
def test_unset_profile_is_inactive(config: str | None):
    assert parse_profile(config) is None


@pytest.mark.parametrize("config", ["typethree", "typeone,typetwo", "rest", "type one"])
def test_unrecognized_profile_is_inactive_not_an_error(config: str):
    assert parse_profile(config) is None
