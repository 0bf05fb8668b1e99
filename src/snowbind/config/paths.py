"""Path resolution for snowbind configuration files."""

import os
from pathlib import Path
from typing import Optional, Union

from importlib.resources import files as importlib_files


def _get_config_directory() -> Path:
    """
    Get the configuration directory for snowbind.
    
    Priority order:
    1. SNOWBIND_CONFIG_DIR environment variable (override)
    2. ~/.snowbind/ (dotfile directory in user home)
    
    Returns:
        Path: Configuration directory path
    """
    env_config_dir = os.getenv("SNOWBIND_CONFIG_DIR")
    if env_config_dir:
        return Path(env_config_dir)
    
    # Same dotfile convention as ~/.snowsql and ~/.snowflake
    dotfile_config = Path.home() / ".snowbind"
    dotfile_config.mkdir(parents=True, exist_ok=True)
    return dotfile_config


def _get_example_files_dir() -> Path:
    """Get the directory containing example configuration files from the installed package"""
    package_data = importlib_files("snowbind") / "_data"
    return Path(str(package_data))


CONF_DIR = _get_config_directory()


def get_default_config_path() -> Path:
    """
    Get the path to connections.toml in the configuration directory.
    
    Returns:
        Path: The path to connections.toml
    
    Raises:
        FileNotFoundError: If connections.toml doesn't exist
    """
    config_path = CONF_DIR / "connections.toml"
    
    if not config_path.exists():
        example_file = _get_example_files_dir() / "connections.toml.example"
        
        error_msg = (
            f"Configuration file 'connections.toml' not found at: {config_path}\n\n"
            f"To create it:\n"
            f"1. Copy example: {example_file}\n"
            f"2. To: {config_path}\n"
            f"3. Edit with your connection details\n\n"
            f"Configuration directory priority:\n"
            f"  1. SNOWBIND_CONFIG_DIR environment variable (if set)\n"
            f"  2. ~/.snowbind/ (dotfile directory)\n"
        )
        
        raise FileNotFoundError(error_msg)
    
    return config_path


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the path to connections.toml using an explicit path or the default location"""
    if path:
        return Path(path)
    return get_default_config_path()


def get_example_config_path(filename: str = "connections.toml.example") -> Path:
    """
    Get path to an example configuration file shipped with the package.
    
    Raises:
        FileNotFoundError: If the example file doesn't exist
    """
    example_path = _get_example_files_dir() / filename
    if not example_path.exists():
        raise FileNotFoundError(f"Example file not found: {example_path}")
    return example_path
