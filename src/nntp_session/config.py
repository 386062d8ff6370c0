"""Connection configuration.

Sources, in order of precedence for the CLI:
- command line options
- a YAML file (--config)
- NNTP_* environment variables
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .transport.channel import DEFAULT_ENCODING

NNTP_PORT = 119
NNTP_SSL_PORT = 563

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class ConnectionConfig:
    """Where and how to connect.

    If port is not given it defaults to 563 with SSL and 119 without, and
    follows use_ssl when the config is merged with overrides.
    """

    host: str = "localhost"
    port: int | None = None
    use_ssl: bool = False
    encoding: str = DEFAULT_ENCODING
    connect_timeout: float | None = None

    def __post_init__(self) -> None:
        self._explicit_port = self.port is not None
        if self.port is None:
            self.port = NNTP_SSL_PORT if self.use_ssl else NNTP_PORT
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}")
        if self.connect_timeout is not None and self.connect_timeout <= 0:
            raise ValueError(f"connect_timeout must be positive, got {self.connect_timeout}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ConnectionConfig:
        """Build a config from NNTP_HOST, NNTP_PORT, NNTP_SSL, NNTP_ENCODING
        and NNTP_CONNECT_TIMEOUT. Unset variables keep their defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if host := env.get("NNTP_HOST"):
            values["host"] = host
        if port := env.get("NNTP_PORT"):
            values["port"] = int(port)
        if ssl_flag := env.get("NNTP_SSL"):
            values["use_ssl"] = ssl_flag.strip().lower() in _TRUTHY
        if encoding := env.get("NNTP_ENCODING"):
            values["encoding"] = encoding
        if timeout := env.get("NNTP_CONNECT_TIMEOUT"):
            values["connect_timeout"] = float(timeout)

        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ConnectionConfig:
        """Load a config from a YAML mapping using the field names as keys.

        Raises:
            ValueError: If the file is not a mapping or has unknown keys
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"{path}: unknown config keys: {', '.join(unknown)}")

        return cls(**data)

    def merged(self, **overrides: Any) -> ConnectionConfig:
        """Return a copy with every non-None override applied.

        A port that was only defaulted is recomputed from the resulting
        use_ssl; a port given explicitly (even 119) is kept.
        """
        values = asdict(self)
        if not self._explicit_port:
            values["port"] = None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ConnectionConfig(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
