from .errors import ConfigError
from .loader import SECRET_ENV_VAR, build_config, load_config
from .models import FingerprintConfig

__all__ = [
    "SECRET_ENV_VAR",
    "ConfigError",
    "FingerprintConfig",
    "build_config",
    "load_config",
]
