"""Test helpers."""

from tests.test_utils.helpers.fixture import fixture_path, read_fixture

__all__ = [
    "fixture_path",
    "read_fixture",
]
