"""Canonical serialization of selected URL components."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Gist(BaseModel):
    """The seven fingerprinted components, in gist key order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    scheme: str | None = Field(default=None, serialization_alias="hash_scheme")
    userinfo: str | None = Field(default=None, serialization_alias="hash_userinfo")
    host: str | None = Field(default=None, serialization_alias="hash_host")
    port: int | None = Field(default=None, serialization_alias="hash_port")
    path: str = Field(default="", serialization_alias="hash_path")
    query: str | None = Field(default=None, serialization_alias="hash_query")
    fragment: str | None = Field(default=None, serialization_alias="hash_fragment")


def serialize_gist(gist: Gist) -> str:
    # Field declaration order is the key order; model_dump_json emits compact JSON.
    return gist.model_dump_json(by_alias=True)
