"""Client configuration: defaults, optional YAML file, env overrides."""
from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError

DEFAULT_CFG_PATH = "configs/client.yaml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "GEMINI_API_HOST": "api_host",
    "GEMINI_API_VERSION": "api_version",
    "GEMINI_MODEL": "model",
    "GEMINI_TIMEOUT": "timeout",
}

class ConfigError(Exception):
    """Raised when the client configuration cannot be loaded or is invalid."""

class ClientConfig(BaseModel):
    api_host: str = "generativelanguage.googleapis.com"
    api_version: str = "v1beta"
    model: str = "gemini-1.5-pro"
    timeout: float = Field(default=120.0, gt=0)
    api_key_env: str = Field(default="GEMINI_API_KEY", min_length=1)

    @property
    def endpoint(self) -> str:
        """generateContent URL without the key query parameter."""
        return f"https://{self.api_host}/{self.api_version}/models/{self.model}:generateContent"

def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data

def load_config(
    cfg_path: str | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ClientConfig:
    """
    Resolve the client configuration.

    Args:
        cfg_path: YAML config path. ``None`` means the default path, which may
            be absent; an explicit path must exist.
        env: Environment mapping; defaults to ``os.environ``.
        overrides: Final overrides (CLI flags). ``None`` values are skipped.
    """
    env = os.environ if env is None else env
    values: dict[str, Any] = {}

    path = cfg_path or DEFAULT_CFG_PATH
    if Path(path).exists():
        try:
            values.update(load_cfg(path))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    elif cfg_path is not None:
        raise ConfigError(f"Config file not found at {cfg_path}")

    for var, field in ENV_OVERRIDES.items():
        if env.get(var):
            values[field] = env[var]

    for field, value in (overrides or {}).items():
        if value is not None:
            values[field] = value

    try:
        return ClientConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid client configuration: {e}") from e
