"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest

from locator_warden.config import DEFAULT_REGISTRY_PATH, Config, load_config


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run from an empty directory with no LOCATOR_WARDEN_ variables set."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("LOCATOR_WARDEN_"):
            monkeypatch.delenv(name)


class TestDefaults:
    def test_defaults(self):
        config = load_config()

        assert config.environment.name == "development"
        assert config.paths.registry == DEFAULT_REGISTRY_PATH
        assert config.paths.results_dir == Path("test-results")
        assert config.timeouts.default_ms == 10000
        assert config.retry.max_attempts == 3

    def test_base_url_strips_trailing_slash(self):
        config = Config(environment={"name": "staging", "base_urls": {"staging": "https://staging.example.com/"}})
        assert config.base_url == "https://staging.example.com"


class TestYamlConfig:
    def test_loads_namespaced_yaml(self, tmp_path):
        (tmp_path / "locator_warden.yaml").write_text(
            "locator_warden:\n"
            "  environment:\n"
            "    name: production\n"
            "  timeouts:\n"
            "    default: long\n"
            "  retry:\n"
            "    max_attempts: 5\n"
        )

        config = load_config()

        assert config.base_url == "https://production.example.com"
        assert config.timeouts.default_ms == 30000
        assert config.retry.max_attempts == 5

    def test_loads_flat_yaml_from_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("paths:\n  scan_dirs: [e2e]\n")

        assert load_config(path).paths.scan_dirs == ["e2e"]

    def test_empty_yaml(self, tmp_path):
        (tmp_path / ".locator_warden.yaml").write_text("")
        assert load_config().environment.name == "development"


class TestEnvironmentOverrides:
    def test_env_beats_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "locator_warden.yaml").write_text("retry:\n  max_attempts: 5\n")
        monkeypatch.setenv("LOCATOR_WARDEN_RETRY__MAX_ATTEMPTS", "7")

        assert load_config().retry.max_attempts == 7

    def test_nested_env_variable(self, monkeypatch):
        monkeypatch.setenv("LOCATOR_WARDEN_ENVIRONMENT__NAME", "staging")
        assert load_config().base_url == "https://staging.example.com"
