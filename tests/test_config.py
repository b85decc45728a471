"""
Tests for HookConfig and load_config.
"""

import dataclasses
from pathlib import Path
from unittest.mock import patch

import pytest

import agentshield_hook
from agentshield_hook.config import HookConfig, PACKAGE_DIR, load_config


ENV_VARS = ["AGENTSHIELD_BINARY", "AGENTSHIELD_INSTALL_HINT", "AGENTSHIELD_PROBE_TIMEOUT_MS"]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear hook variables and stop .env files from being picked up."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("agentshield_hook.config.load_env"):
        yield monkeypatch


class TestHookConfig:
    """Tests for the HookConfig dataclass."""

    def test_defaults(self):
        config = HookConfig()
        assert config.binary == "agentshield"
        assert config.probe_timeout_ms == 5000
        assert config.install_hint == "brew install gzhole/tap/agentshield"
        assert config.document_name == "AGENTSHIELD.md"

    def test_install_dir_is_package_dir(self):
        """Test that the default install dir is the package, not the cwd."""
        assert HookConfig().install_dir == Path(agentshield_hook.__file__).resolve().parent
        assert HookConfig().document_path == PACKAGE_DIR / "AGENTSHIELD.md"

    def test_warning_message(self):
        assert HookConfig().warning_message == (
            "⚠️ AgentShield hook enabled but binary not found. "
            "Install: brew install gzhole/tap/agentshield"
        )

    def test_frozen(self):
        """Test that a config cannot be changed after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            HookConfig().binary = "other"


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_env(self, clean_env):
        assert load_config() == HookConfig()

    def test_reads_env(self, clean_env, tmp_path):
        clean_env.setenv("AGENTSHIELD_BINARY", "/opt/bin/agentshield")
        clean_env.setenv("AGENTSHIELD_INSTALL_HINT", "apt install agentshield")
        clean_env.setenv("AGENTSHIELD_PROBE_TIMEOUT_MS", "1500")

        config = load_config(install_dir=tmp_path)

        assert config.binary == "/opt/bin/agentshield"
        assert config.install_hint == "apt install agentshield"
        assert config.probe_timeout_ms == 1500
        assert config.install_dir == tmp_path

    @pytest.mark.parametrize("value", ["fast", "0", "-5"])
    def test_invalid_timeout(self, clean_env, value):
        clean_env.setenv("AGENTSHIELD_PROBE_TIMEOUT_MS", value)
        with pytest.raises(ValueError):
            load_config()

    def test_loads_dotenv(self, monkeypatch):
        """Test that a .env file is looked up and loaded."""
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        with patch("agentshield_hook.config.find_dotenv", return_value="/x/.env") as mock_find, \
                patch("agentshield_hook.config.load_dotenv") as mock_load:
            load_config()
        mock_find.assert_called_once()
        mock_load.assert_called_once_with("/x/.env")
