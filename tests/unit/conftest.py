from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _no_sleep() -> Generator[None, None, None]:
    """Disable time.sleep globally in unit tests to avoid real delays from retry backoff."""
    with patch("time.sleep"):
        yield
