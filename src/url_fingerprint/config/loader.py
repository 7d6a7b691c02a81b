from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import FingerprintConfig

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

SECRET_ENV_VAR = "URL_FINGERPRINT_SECRET"


def _fingerprint_table(data: dict[str, Any]) -> dict[str, Any]:
    table = data.get("fingerprint")
    if table is None:
        msg = "fingerprint table is required"
        raise ConfigError(msg)
    if not isinstance(table, dict):
        msg = "fingerprint must be a table"
        raise ConfigError(msg)
    return dict(table)


def build_config(data: Mapping[str, object]) -> FingerprintConfig:
    try:
        return FingerprintConfig.from_raw(data)
    except ValidationError as exc:
        msg = f"invalid fingerprint config: {exc.error_count()} error(s)"
        raise ConfigError(msg) from exc


def load_config(path: Path) -> FingerprintConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc
    except FileNotFoundError as exc:
        msg = f"config not found: {path}"
        raise ConfigError(msg) from exc

    table = _fingerprint_table(data)
    secret = os.environ.get(SECRET_ENV_VAR)
    if secret:
        table["secret"] = secret

    return build_config(table)
