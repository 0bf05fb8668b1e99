"""Unit tests for snowbind configuration module."""

import pytest
from pathlib import Path
from unittest.mock import patch

from snowbind.config import load_profile, list_profiles, resolve_config_path, get_default_config_path


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary TOML config file for testing."""
    config_content = """
[default]
account = "test-account.region"
user = "test-user@example.com"
warehouse = "TEST_WH"

[dev]
account = "dev-account.region"
user = "dev-user@example.com"
warehouse = "DEV_WH"
paramstyle = "qmark"
"""
    config_path = tmp_path / "connections.toml"
    config_path.write_text(config_content)
    return config_path


class TestLoadProfile:
    """Tests for load_profile function."""
    
    def test_load_default_profile(self, temp_config_file):
        config = load_profile("default", path=temp_config_file)
        
        assert config["account"] == "test-account.region"
        assert config["warehouse"] == "TEST_WH"
    
    def test_driver_settings_pass_through(self, temp_config_file):
        """Driver options such as paramstyle come back untouched."""
        config = load_profile("dev", path=temp_config_file)
        
        assert config["paramstyle"] == "qmark"
    
    def test_returned_profile_is_a_copy(self, temp_config_file):
        config = load_profile("dev", path=temp_config_file)
        config["warehouse"] = "CHANGED"
        
        assert load_profile("dev", path=temp_config_file)["warehouse"] == "DEV_WH"
    
    def test_missing_profile_raises_error(self, temp_config_file):
        with pytest.raises(KeyError) as exc_info:
            load_profile("nonexistent", path=temp_config_file)
        
        assert "Profile 'nonexistent' not found" in str(exc_info.value)
        assert "Available profiles: default, dev" in str(exc_info.value)
    
    def test_missing_file_raises_error(self, tmp_path):
        with pytest.raises(FileNotFoundError) as exc_info:
            load_profile("default", path=tmp_path / "does_not_exist.toml")
        
        assert "not found" in str(exc_info.value).lower()


class TestListProfiles:
    """Tests for list_profiles function."""
    
    def test_list_profiles(self, temp_config_file):
        assert list_profiles(path=temp_config_file) == ["default", "dev"]
    
    def test_list_profiles_missing_file(self, tmp_path):
        assert list_profiles(path=tmp_path / "missing.toml") == []


class TestConfigPaths:
    """Tests for config path resolution."""
    
    def test_explicit_path_is_used(self, tmp_path):
        explicit = tmp_path / "custom.toml"
        
        assert resolve_config_path(explicit) == explicit
        assert resolve_config_path(str(explicit)) == explicit
    
    def test_default_path_missing_raises(self, tmp_path):
        with patch("snowbind.config.paths.CONF_DIR", tmp_path):
            with pytest.raises(FileNotFoundError, match="SNOWBIND_CONFIG_DIR"):
                get_default_config_path()
    
    def test_default_path_found(self, tmp_path):
        (tmp_path / "connections.toml").write_text("[default]\n")
        
        with patch("snowbind.config.paths.CONF_DIR", tmp_path):
            assert get_default_config_path() == Path(tmp_path / "connections.toml")
