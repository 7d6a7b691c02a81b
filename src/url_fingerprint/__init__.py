"""Stable, configurable URL fingerprints."""

from url_fingerprint.config import ConfigError, FingerprintConfig, load_config
from url_fingerprint.fingerprint import (
    EmptyUrl,
    Fingerprint,
    FingerprintReader,
    HashAlgorithm,
    InvalidUrl,
    MalformedUrl,
    MissingScheme,
    new_fingerprint_reader,
)

__all__ = [
    "ConfigError",
    "EmptyUrl",
    "Fingerprint",
    "FingerprintConfig",
    "FingerprintReader",
    "HashAlgorithm",
    "InvalidUrl",
    "MalformedUrl",
    "MissingScheme",
    "load_config",
    "new_fingerprint_reader",
]
