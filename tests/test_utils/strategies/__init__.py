from __future__ import annotations

from tests.test_utils.strategies.url import (
    component_flags_strategy,
    query_tokens_strategy,
    url_strategy,
)

__all__ = [
    "component_flags_strategy",
    "query_tokens_strategy",
    "url_strategy",
]
