"""
Tests for environment-driven configuration.
"""

import importlib

import socialnet.config


class TestEnvironment:
    """Test environment overrides."""

    def test_bad_port_does_not_break_import(self, monkeypatch):
        """A malformed PORT is only parsed by the server script."""
        monkeypatch.setenv("PORT", "not-a-port")
        try:
            config = importlib.reload(socialnet.config)
            assert config.API_PORT == "not-a-port"
            assert config.NO_PATH_DISTANCE == -1
        finally:
            monkeypatch.undo()
            importlib.reload(socialnet.config)

    def test_port_default(self, monkeypatch):
        """PORT falls back to 7860."""
        monkeypatch.delenv("PORT", raising=False)
        try:
            config = importlib.reload(socialnet.config)
            assert int(config.API_PORT) == 7860
        finally:
            monkeypatch.undo()
            importlib.reload(socialnet.config)
