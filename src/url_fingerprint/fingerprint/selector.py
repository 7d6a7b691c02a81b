from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from .gist import Gist
from .query import canonicalize_query

if TYPE_CHECKING:
    from url_fingerprint.config.models import FingerprintConfig

    from .validator import ValidatedUrl

# RFC 3986 pchar sub-delims plus "/" and "%" so existing escapes survive.
_PATH_SAFE = "/%:@!$&'()*+,;="


def select_components(url: ValidatedUrl, config: FingerprintConfig) -> Gist:
    return Gist(
        scheme=url.scheme if config.include_scheme else None,
        userinfo=url.userinfo if config.include_userinfo else None,
        host=url.host if config.include_host else None,
        port=url.port if config.include_port else None,
        path=encode_path(url.path) if config.include_path else "",
        query=canonicalize_query(url.query) if config.include_query else None,
        fragment=url.fragment if config.include_fragment else None,
    )


def encode_path(path: str) -> str:
    return quote(path, safe=_PATH_SAFE)
