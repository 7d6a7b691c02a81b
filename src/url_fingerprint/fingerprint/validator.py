"""URL validation and component extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from .errors import EmptyUrl, MalformedUrl, MissingScheme

# Schemes whose URLs are meaningless without a host.
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")
# urlsplit deletes these anywhere in the URL, so they are escaped before parsing.
_STRIPPED_CHARS_PATTERN = re.compile(r"[\t\r\n]")


@dataclass(frozen=True, slots=True)
class ValidatedUrl:
    scheme: str | None
    userinfo: str | None
    host: str | None
    port: int | None
    path: str
    query: str | None
    fragment: str | None


def validate_url(raw: str, *, require_scheme: bool) -> ValidatedUrl:
    """Check ``raw`` and split it into the seven fingerprinted components.

    Surrounding whitespace is ignored; tabs and line breaks inside the URL are
    kept percent-encoded. Raises ``EmptyUrl``, ``MissingScheme``
    (only when ``require_scheme`` is set) or ``MalformedUrl``.
    """
    url = raw.strip()
    if not url:
        raise EmptyUrl(url)

    try:
        parts = urlsplit(_STRIPPED_CHARS_PATTERN.sub(lambda match: quote(match.group(0)), url))
    except ValueError as exc:
        raise MalformedUrl(url, _guess_scheme(url)) from exc

    scheme = parts.scheme or None
    if scheme is None and require_scheme:
        raise MissingScheme(url)

    try:
        port = parts.port
    except ValueError as exc:
        raise MalformedUrl(url, parts.scheme) from exc

    userinfo, host = _split_authority(parts.netloc)
    if scheme is not None and host is None and (scheme in _HOST_REQUIRED_SCHEMES or not parts.path):
        raise MalformedUrl(url, scheme)

    return ValidatedUrl(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=parts.path,
        query=parts.query or None,
        fragment=parts.fragment or None,
    )


def _guess_scheme(url: str) -> str:
    match = _SCHEME_PATTERN.match(url)
    return match.group(1).lower() if match else ""


def _split_authority(netloc: str) -> tuple[str | None, str | None]:
    userinfo: str | None
    userinfo, sep, hostport = netloc.rpartition("@")
    if not sep:
        userinfo = None

    if hostport.startswith("["):
        host = hostport[: hostport.find("]") + 1]
    else:
        host = hostport.partition(":")[0]
    return userinfo, host or None
