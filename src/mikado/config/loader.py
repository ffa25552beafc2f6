"""
mikado.config.loader - Configuration file discovery, loading and merging.

Configuration is resolved in three layers, later layers winning:
1. DEFAULT_CONFIG
2. The nearest .mikado.toml (working directory, then its parents)
3. MIKADO_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit

from mikado.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG

ENV_PREFIX = "MIKADO_"


def find_config_file(start_dir: Path) -> Path | None:
    """Find .mikado.toml in start_dir or any parent directory.

    Args:
        start_dir: Directory to start searching from.

    Returns:
        Path to the config file, or None if not found.
    """
    current = Path(start_dir).resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a TOML config file and merge it over the defaults.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    content = Path(config_path).read_text(encoding="utf-8")
    user_config = tomlkit.parse(content).unwrap()
    return merge_configs(DEFAULT_CONFIG, user_config)


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into bool, list, dict, or leave it a string."""
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.strip().startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply MIKADO_<SECTION>_<KEY> environment variables to config.

    MIKADO_OUTPUT_FORMAT=svg sets config["output"]["format"] = "svg".
    Variables whose section is unknown are ignored.
    """
    for env_name, raw in os.environ.items():
        if not env_name.startswith(ENV_PREFIX):
            continue
        parts = env_name[len(ENV_PREFIX) :].lower().split("_", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        if section not in config or not isinstance(config[section], dict):
            continue
        config[section][key] = _try_parse_env_value(raw)
    return config


def get_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit config file; skips discovery when given.
        start_dir: Where discovery starts (defaults to the working directory).

    Returns:
        Configuration dict with defaults, file values and env overrides applied.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())

    if config_path is not None:
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)

    return _apply_env_overrides(config)
