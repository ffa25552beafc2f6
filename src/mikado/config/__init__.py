"""
mikado.config - Configuration loading and defaults
"""

from mikado.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG
from mikado.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
)
from mikado.config.options import Options

__all__ = [
    "load_config",
    "find_config_file",
    "get_config",
    "merge_configs",
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG",
    "Options",
    "_apply_env_overrides",
    "_try_parse_env_value",
]
