from url_fingerprint.fingerprint.errors import EmptyUrl, InvalidUrl, InvalidUrlKind, MalformedUrl, MissingScheme
from url_fingerprint.fingerprint.gist import Gist, serialize_gist
from url_fingerprint.fingerprint.hashing import HashAlgorithm, Hasher, hmac_hasher
from url_fingerprint.fingerprint.models import Fingerprint
from url_fingerprint.fingerprint.query import canonicalize_query
from url_fingerprint.fingerprint.reader import FingerprintReader, new_fingerprint_reader
from url_fingerprint.fingerprint.remote import HashServiceError, RemoteHasher
from url_fingerprint.fingerprint.selector import select_components
from url_fingerprint.fingerprint.validator import ValidatedUrl, validate_url

__all__ = [
    "EmptyUrl",
    "Fingerprint",
    "FingerprintReader",
    "Gist",
    "HashAlgorithm",
    "HashServiceError",
    "Hasher",
    "InvalidUrl",
    "InvalidUrlKind",
    "MalformedUrl",
    "MissingScheme",
    "RemoteHasher",
    "ValidatedUrl",
    "canonicalize_query",
    "hmac_hasher",
    "new_fingerprint_reader",
    "select_components",
    "serialize_gist",
    "validate_url",
]
