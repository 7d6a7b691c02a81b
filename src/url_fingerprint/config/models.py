from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from url_fingerprint.fingerprint.hashing import HashAlgorithm

if TYPE_CHECKING:
    from collections.abc import Mapping


def _flag(name: str) -> Any:
    return Field(default=True, validation_alias=AliasChoices(f"include_{name}", f"hash_{name}"))


class FingerprintConfig(BaseModel):
    """Secret, hash algorithm and the per-component inclusion flags."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    secret: str
    hash_algorithm: HashAlgorithm = Field(validation_alias=AliasChoices("hash_algorithm", "hash_algo"))
    include_scheme: bool = _flag("scheme")
    include_userinfo: bool = _flag("userinfo")
    include_host: bool = _flag("host")
    include_port: bool = _flag("port")
    include_path: bool = _flag("path")
    include_query: bool = _flag("query")
    include_fragment: bool = _flag("fragment")

    @field_validator("secret")
    @classmethod
    def _validate_secret(cls, value: str) -> str:
        if value == "":
            msg = "is required"
            raise ValueError(msg)
        return value

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> FingerprintConfig:
        return cls.model_validate(data)
