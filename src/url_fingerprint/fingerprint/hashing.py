"""Hash collaborators used to digest gists."""

from __future__ import annotations

import hmac
from enum import StrEnum
from typing import Protocol


class HashAlgorithm(StrEnum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_256 = "sha3_256"
    SHA3_512 = "sha3_512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"


class Hasher(Protocol):
    def __call__(self, algorithm: HashAlgorithm, secret: str, message: str) -> str: ...


def hmac_hasher(algorithm: HashAlgorithm, secret: str, message: str) -> str:
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), algorithm.value).hexdigest()
