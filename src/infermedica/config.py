"""Default credentials and deployment settings.

A Configuration can be built explicitly, from environment variables or
from a YAML file. A lazily created process-wide default backs the
``infermedica.configure()`` / ``infermedica.api()`` helpers; the last
write wins and there is no locking.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import structlog
import yaml
from dotenv import load_dotenv

logger = structlog.get_logger()

_ENV_PREFIX = "INFERMEDICA_"


@dataclass(slots=True)
class Configuration:
    """Defaults merged into every Api built by ``infermedica.api()``."""

    api_id: str | None = None
    api_key: str | None = None
    model: str | None = None
    endpoint: str | None = None
    interview_id: str | None = None

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    @classmethod
    def from_mapping(cls, data: Any) -> Configuration:
        """Build from a plain mapping. Unknown keys are rejected."""
        if not isinstance(data, Mapping):
            raise TypeError(f"configuration must be a mapping, got {type(data).__name__}")
        unknown = set(data) - cls.field_names()
        if unknown:
            raise ValueError(f"unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> Configuration:
        """Read INFERMEDICA_API_ID, INFERMEDICA_API_KEY, ... from the environment."""
        if dotenv:
            load_dotenv()
        values = {
            name: os.environ.get(_ENV_PREFIX + name.upper()) or None for name in cls.field_names()
        }
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Configuration:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        config = cls.from_mapping(data)
        logger.debug("infermedica_config_loaded", path=str(path), keys=sorted(data))
        return config

    def as_kwargs(self) -> dict[str, Any]:
        """Non-empty settings as keyword arguments for ``Api``."""
        return {k: v for k, v in asdict(self).items() if v is not None}


_configuration: Configuration | None = None


def configuration() -> Configuration:
    """Get or create the process-wide default configuration."""
    global _configuration
    if _configuration is None:
        _configuration = Configuration()
    return _configuration


def configure(fn: Callable[[Configuration], Any]) -> Configuration:
    """Edit the default configuration in place.

        infermedica.configure(lambda c: setattr(c, "api_id", "xxxx"))
    """
    config = configuration()
    fn(config)
    return config


def reset_configuration() -> None:
    global _configuration
    _configuration = None
