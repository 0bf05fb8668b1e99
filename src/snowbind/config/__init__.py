"""Configuration module exports."""

from .config import load_profile, list_profiles
from .paths import resolve_config_path, get_default_config_path, get_example_config_path, CONF_DIR

__all__ = [
    "load_profile",
    "list_profiles", 
    "resolve_config_path",
    "get_default_config_path",
    "get_example_config_path",
    "CONF_DIR",
]
