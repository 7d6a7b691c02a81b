from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .hashing import HashAlgorithm


@dataclass(frozen=True, slots=True)
class Fingerprint:
    gist: str
    hash: str
    hash_algorithm: HashAlgorithm

    def get_gist(self) -> str:
        return self.gist

    def get_hash(self) -> str:
        return self.hash

    def get_hash_algo(self) -> HashAlgorithm:
        return self.hash_algorithm
