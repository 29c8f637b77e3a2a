"""YAML/dict config loader for packet-obfuscator.

Supports loading from a YAML file or a plain dict (for embedding in the
collector's own config).

Example YAML:

    obfuscation:
      enabled: true
      pattern: "*"
      json_indent: 4
      allow_list:
        - 127.0.0.1
        - localhost
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any

from .redactor import Obfuscator, ObfuscatorConfig
from .types import DirectoryReport

logger = logging.getLogger(__name__)

DISABLE_ENV = "MM_SUP_NO_OBFUSCATE"
CONFIG_ENV = "PACKET_OBFUSCATOR_CONFIG"

_TRUTHY = {"1", "t", "true", "y", "yes", "on"}


class _NoopObfuscator:
    """Pass-through obfuscator when obfuscation is disabled."""
    def obfuscate_data(self, data: Any) -> Any:
        return data
    def obfuscate_text(self, text: str) -> str:
        return text
    def obfuscate_directory(self, directory: str | Path, pattern: str = "*") -> DirectoryReport:
        return DirectoryReport(directory=str(directory))


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return _as_bool(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "obfuscation" key or flat
    if "obfuscation" in data:
        data = data["obfuscation"] or {}

    return {
        "enabled": _as_bool(data.get("enabled", True)),
        "pattern": str(data.get("pattern", "*")),
        "json_indent": int(data.get("json_indent", 4)),
        "allow_list": set(data.get("allow_list") or []),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(Path(path).expanduser()) as f:
        return load_config(yaml.safe_load(f))


def create_obfuscator(config: dict[str, Any] | None = None) -> Obfuscator | _NoopObfuscator:
    """Create a fully configured obfuscator from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        logger.warning("Data obfuscation is DISABLED - sensitive data will NOT be masked!")
        return _NoopObfuscator()

    return Obfuscator(ObfuscatorConfig(
        json_indent=cfg["json_indent"],
        allow_list=cfg["allow_list"],
    ))
