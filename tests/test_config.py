"""Tests for the config module."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from hoist.config import (
    DEFAULT_HOME,
    DEFAULT_REPOSITORY,
    HoistConfig,
    find_config_file,
    generate_default_config,
    load_config,
    resolve_env_var,
    save_config,
)


@pytest.fixture(autouse=True)
def _no_home_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("HOIST_HOME", raising=False)


class TestHoistConfig:
    def test_defaults(self):
        config = HoistConfig()
        assert config.home == DEFAULT_HOME
        assert config.repository == DEFAULT_REPOSITORY
        assert config.git == "git"
        assert config.kubectl == "kubectl"

    def test_home_path_expands_user(self):
        config = HoistConfig(home="~/charts-home")
        assert config.home_path == Path.home() / "charts-home"

    def test_roundtrip(self):
        config = HoistConfig(
            home="/srv/hoist",
            repository="https://example.com/charts.git",
            kubectl="/opt/bin/kubectl",
        )
        assert HoistConfig.from_dict(config.to_dict()) == config

    def test_from_dict_partial(self):
        config = HoistConfig.from_dict({"repository": "https://example.com/c.git"})
        assert config.repository == "https://example.com/c.git"
        assert config.home == DEFAULT_HOME

    def test_from_dict_env_reference(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHART_REPO", "https://mirror.example.com/charts.git")
        config = HoistConfig.from_dict({"repository": "${CHART_REPO}"})
        assert config.repository == "https://mirror.example.com/charts.git"

    def test_from_dict_unset_env_reference_falls_back(self):
        config = HoistConfig.from_dict({"repository": "$HOIST_TEST_UNSET_VAR"})
        assert config.repository == DEFAULT_REPOSITORY


class TestResolveEnvVar:
    def test_plain(self):
        assert resolve_env_var("value") == "value"

    def test_none(self):
        assert resolve_env_var(None) is None

    def test_dollar_forms(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOIST_TEST_VAR", "x")
        assert resolve_env_var("$HOIST_TEST_VAR") == "x"
        assert resolve_env_var("${HOIST_TEST_VAR}") == "x"

    def test_non_string_scalars(self):
        assert resolve_env_var(123) == "123"
        assert resolve_env_var(1.5) == "1.5"


class TestLoadConfig:
    def test_find_config_walks_up(self, tmp_path: Path):
        (tmp_path / ".hoist.yaml").write_text("home: /srv/hoist\n")
        nested: Path = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == tmp_path / ".hoist.yaml"

    def test_load_from_file(self, tmp_path: Path):
        config_path: Path = tmp_path / ".hoist.yaml"
        config_path.write_text(yaml.safe_dump({"home": "/srv/hoist", "git": "git2"}))

        config: HoistConfig = load_config(config_path)
        assert config.home == "/srv/hoist"
        assert config.git == "git2"
        assert config.source == config_path

    def test_numeric_values(self, tmp_path: Path):
        config_path: Path = tmp_path / ".hoist.yaml"
        config_path.write_text("home: 123\ngit: 2\n")

        config: HoistConfig = load_config(config_path)
        assert config.home == "123"
        assert config.git == "2"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config_path: Path = tmp_path / ".hoist.yaml"
        config_path.write_text("")

        assert load_config(config_path) == HoistConfig()

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") == HoistConfig()
        assert load_config(tmp_path / "missing.yaml").source is None

    def test_env_overrides_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        config_path: Path = tmp_path / ".hoist.yaml"
        config_path.write_text("home: /srv/hoist\n")
        monkeypatch.setenv("HOIST_HOME", "/data/hoist")

        assert load_config(config_path).home == "/data/hoist"

    def test_save_and_reload(self, tmp_path: Path):
        config_path: Path = tmp_path / ".hoist.yaml"
        config = HoistConfig(home="/srv/hoist", kubectl="kubectl-1.2")

        save_config(config, config_path)

        assert load_config(config_path) == config

    def test_generate_default_config(self):
        data = yaml.safe_load(generate_default_config())
        assert data == HoistConfig().to_dict()
