"""
Client configuration

Loaded from ~/.remoteapi/config.yaml when present:

    timeout: 10.0
    transport: httpx        # or aiohttp
    default_version: "1.0"   # used by ApiClient.call and the CLI
    headers:
      User-Agent: remoteapi
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from remoteapi.core.models import ApiVersion

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / '.remoteapi' / 'config.yaml'
TRANSPORTS = ("httpx", "aiohttp")


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by the client and its transport"""
    timeout: float = 10.0
    transport: str = "httpx"
    default_version: ApiVersion = ApiVersion.V1_0
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if (not isinstance(self.timeout, (int, float)) or isinstance(self.timeout, bool)
                or self.timeout <= 0):
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")
        if self.transport not in TRANSPORTS:
            raise ValueError(f"transport must be one of {TRANSPORTS}, got {self.transport!r}")
        object.__setattr__(self, "timeout", float(self.timeout))
        version = self.default_version
        if isinstance(version, float):
            # unquoted YAML versions load as floats
            version = f"{version:.1f}"
        object.__setattr__(self, "default_version", ApiVersion(version))
        if not isinstance(self.headers, dict):
            raise ValueError("headers must be a mapping")
        for key, value in self.headers.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError(f"header names and values must be strings, got {key!r}: {value!r}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ClientConfig":
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path: Optional[Union[str, Path]] = None) -> ClientConfig:
    """Load configuration from YAML, falling back to defaults"""
    config_file = Path(path) if path else DEFAULT_CONFIG_PATH
    if not config_file.exists():
        if path:
            raise ValueError(f"Config file not found: {config_file}")
        return ClientConfig()

    with open(config_file, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_file}")

    logger.debug(f"Loaded config from {config_file}")
    return ClientConfig.from_dict(data)
