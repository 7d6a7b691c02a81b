"""Query string canonicalization."""

from __future__ import annotations


def canonicalize_query(raw: str | None) -> str | None:
    """Return ``raw`` with its ``key=value`` pairs sorted, or ``None`` when it has none.

    Pairs are kept verbatim (no decoding, ``a[]`` stays an opaque key) and sorted
    as whole strings, so repeated keys are ordered by value: ``a=1337&a=42``.
    A flag without ``=`` is rendered as ``key=``.
    """
    if not raw or raw == "?":
        return None

    pairs = [_render_pair(token) for token in raw.split("&") if token]
    if not pairs:
        return None
    return "&".join(sorted(pairs))


def _render_pair(token: str) -> str:
    key, _, value = token.partition("=")
    return f"{key}={value}"
