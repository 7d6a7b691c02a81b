"""Shared test utilities."""

from tests.test_utils import factories, helpers, strategies

__all__ = [
    "factories",
    "helpers",
    "strategies",
]
