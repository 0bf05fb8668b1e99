"""Fixtures for integration tests that need a live Snowflake profile."""

import sys
from typing import Dict, Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import pytest
from snowbind.config import CONF_DIR


def _load_test_config() -> Dict[str, Any]:
    """
    Load the [test] section of test_config.toml from the config directory.
    
    Returns an empty dict when the file is missing so integration tests skip
    instead of failing collection.
    """
    test_config_path = CONF_DIR / "test_config.toml"
    
    if not test_config_path.exists():
        return {}
    
    with open(test_config_path, "rb") as f:
        config = tomllib.load(f)
    
    return config.get("test", {})


_TEST_CONFIG = _load_test_config()


@pytest.fixture(scope="session")
def test_profile() -> str:
    """Snowflake profile to use for integration tests."""
    profile = _TEST_CONFIG.get("profile")
    if not profile:
        pytest.skip(
            f"No integration profile configured. Create {CONF_DIR / 'test_config.toml'} "
            "with a [test] section containing 'profile = \"your_profile_name\"'."
        )
    return profile
