"""Configuration loading: YAML values, environment overrides and typed readers."""

import pytest

from refine_e2e.config import BUNDLED_DEFAULTS, Config, env_name

from conftest import write_config


def test_yaml_values_and_dotted_keys(tmp_path) -> None:
    config = Config(write_config(tmp_path, {"ui": {"browser": "firefox", "timeout": 2500}}))
    assert config.get("ui.browser") == "firefox"
    assert config.get_int("ui.timeout") == 2500
    assert config.get("ui.missing", "default") == "default"


def test_environment_takes_precedence(tmp_path, monkeypatch) -> None:
    config = Config(write_config(tmp_path, {"openrefine": {"url": "http://yaml:3333"}}))
    monkeypatch.setenv("OPENREFINE_URL", "http://env:3333/")
    assert config.openrefine_url == "http://env:3333"


def test_openrefine_url_is_required(tmp_path) -> None:
    config = Config(write_config(tmp_path, {"ui": {}}))
    with pytest.raises(ValueError, match="openrefine.url"):
        config.openrefine_url


@pytest.mark.parametrize("raw, expected", [("true", True), ("No", False), ("1", True), ("off", False)])
def test_get_bool_parses_environment_strings(tmp_path, monkeypatch, raw, expected) -> None:
    config = Config(write_config(tmp_path, {"ui": {"headless": not expected}}))
    monkeypatch.setenv("UI_HEADLESS", raw)
    assert config.get_bool("ui.headless") is expected


def test_get_bool_rejects_garbage(tmp_path, monkeypatch) -> None:
    config = Config(write_config(tmp_path, {}))
    monkeypatch.setenv("UI_HEADLESS", "sometimes")
    with pytest.raises(ValueError):
        config.get_bool("ui.headless")


def test_missing_file_gives_empty_config(tmp_path) -> None:
    config = Config(str(tmp_path / "nope.yaml"))
    assert config.data == {}
    assert config.get("ui.browser", "chromium") == "chromium"


def test_config_path_from_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("REFINE_E2E_CONFIG", write_config(tmp_path, {"ui": {"browser": "webkit"}}))
    assert Config().get("ui.browser") == "webkit"


def test_bundled_defaults_without_a_file() -> None:
    """With no path given, the defaults packaged with refine_e2e are used."""
    config = Config()
    assert config.source == BUNDLED_DEFAULTS
    assert config.openrefine_url == "http://127.0.0.1:3333"
    assert config.get_int("ui.timeout") == 10000
    assert config.get_bool("cleanup.delete_projects") is True


def test_explicit_path_beats_environment_path(tmp_path, monkeypatch) -> None:
    explicit = tmp_path / "explicit"
    explicit.mkdir()
    monkeypatch.setenv("REFINE_E2E_CONFIG", write_config(tmp_path, {"ui": {"browser": "webkit"}}))
    assert Config(write_config(explicit, {"ui": {"browser": "firefox"}})).get("ui.browser") == "firefox"


def test_env_name() -> None:
    assert env_name("openrefine.url") == "OPENREFINE_URL"
