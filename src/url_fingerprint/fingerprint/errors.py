"""URL validation errors."""

from __future__ import annotations

from enum import StrEnum


class InvalidUrlKind(StrEnum):
    EMPTY_URL = "empty_url"
    MISSING_SCHEME = "missing_scheme"
    MALFORMED_URL = "malformed_url"


class InvalidUrl(ValueError):
    """Raised when a URL cannot be fingerprinted."""

    kind: InvalidUrlKind

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(message)


class EmptyUrl(InvalidUrl):
    kind = InvalidUrlKind.EMPTY_URL

    def __init__(self, url: str = "") -> None:
        super().__init__(url, "The URL string is empty!")


class MissingScheme(InvalidUrl):
    kind = InvalidUrlKind.MISSING_SCHEME

    def __init__(self, url: str) -> None:
        super().__init__(url, f"The scheme for url ({url}) is missing!")


class MalformedUrl(InvalidUrl):
    kind = InvalidUrlKind.MALFORMED_URL

    def __init__(self, url: str, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(url, f"The uri `{url}` is invalid for the `{scheme}` scheme.")
