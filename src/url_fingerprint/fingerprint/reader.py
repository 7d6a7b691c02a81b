from __future__ import annotations

from typing import TYPE_CHECKING

from url_fingerprint.observability import get_logger

from .errors import InvalidUrl
from .gist import serialize_gist
from .hashing import hmac_hasher
from .models import Fingerprint
from .selector import select_components
from .validator import validate_url

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from url_fingerprint.config.models import FingerprintConfig

    from .hashing import Hasher

logger = get_logger(__name__)


class FingerprintReader:
    """Capture and compare URL fingerprints under one configuration."""

    def __init__(self, config: FingerprintConfig, *, hasher: Hasher = hmac_hasher) -> None:
        self._config = config
        self._hasher = hasher

    @property
    def config(self) -> FingerprintConfig:
        return self._config

    def capture(self, url: str) -> Fingerprint:
        config = self._config
        try:
            validated = validate_url(url, require_scheme=config.include_scheme)
        except InvalidUrl as exc:
            logger.debug("url_rejected", kind=exc.kind.value, url=exc.url)
            raise

        gist = serialize_gist(select_components(validated, config))
        digest = self._hasher(config.hash_algorithm, config.secret, gist)
        logger.debug("url_captured", host=validated.host, algorithm=config.hash_algorithm.value)
        return Fingerprint(gist=gist, hash=digest, hash_algorithm=config.hash_algorithm)

    def capture_many(self, urls: Iterable[str]) -> list[Fingerprint]:
        return [self.capture(url) for url in urls]

    def compare(self, a: Fingerprint, b: Fingerprint) -> bool:
        # Both fingerprints are assumed to come from this reader's configuration.
        return a.hash == b.hash


def new_fingerprint_reader(
    config: FingerprintConfig | Mapping[str, object],
    *,
    hasher: Hasher = hmac_hasher,
) -> FingerprintReader:
    """Build a reader from a config or from a raw option mapping.

    Raw mappings accept both field names (``include_query``) and the short
    option names (``hash_query``, ``hash_algo``).
    """
    from url_fingerprint.config import FingerprintConfig

    if not isinstance(config, FingerprintConfig):
        config = FingerprintConfig.from_raw(config)
    return FingerprintReader(config, hasher=hasher)
