"""Unit tests for the shared config module."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import importlib

import pytest

from page_extract import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under patched env vars, restoring the defaults afterwards."""
    yield importlib.reload
    monkeypatch.undo()
    importlib.reload(config)


class TestDefaults:

    def test_delimiter_priority(self):
        assert config.DELIMITERS == ("\t", ",", ";", "|")

    def test_thresholds(self):
        assert config.DELIMITED_MIN_CONSISTENCY == 0.8
        assert config.MAX_EDIT_DISTANCE == 2
        assert config.PARTIAL_EMPTY_LIMIT == 3

    def test_root_is_project_root(self):
        """ROOT should point to the project root (contains pyproject.toml)."""
        assert (config.ROOT / "pyproject.toml").exists()


class TestEnvOverrides:

    def test_partial_empty_limit(self, monkeypatch, reload_config):
        monkeypatch.setenv("PAGE_EXTRACT_PARTIAL_EMPTY_LIMIT", "5")
        assert reload_config(config).PARTIAL_EMPTY_LIMIT == 5

    def test_min_consistency(self, monkeypatch, reload_config):
        monkeypatch.setenv("PAGE_EXTRACT_DELIMITED_MIN_CONSISTENCY", "0.5")
        assert reload_config(config).DELIMITED_MIN_CONSISTENCY == 0.5
