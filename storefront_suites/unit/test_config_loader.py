import pytest
import yaml

from storefront_suites.ui_testing.framework import config_loader
from storefront_suites.ui_testing.framework.config_loader import (
    ConfigurationError,
    Settings,
    load_settings,
    reset_settings,
)


def test_missing_file_yields_defaults(tmp_path):
    settings = Settings.from_file(tmp_path / "missing.yaml", environ={})

    assert settings.base_url == "https://www.saucedemo.com/"
    assert settings.explicit_wait == 20
    assert settings.query_wait == 2
    assert settings.password == "secret_sauce"
    assert settings.get_int("execution.thread_count") == 3


def test_file_values_merge_over_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"app": {"base_url": "http://localhost:8080/"}, "timeouts": {"explicit_wait": 5}}),
        encoding="utf-8",
    )

    settings = Settings.from_file(config_path, environ={})
    assert settings.base_url == "http://localhost:8080/"
    assert settings.explicit_wait == 5
    assert settings.page_load_timeout == 30
    assert settings.credential("locked_out_user") == "locked_out_user"


def test_env_override_converted_to_reference_type(tmp_path):
    environ = {
        "APP_BASE_URL": "http://env.example.com/",
        "BROWSER_HEADLESS": "true",
        "TIMEOUTS_EXPLICIT_WAIT": "7",
    }
    settings = Settings.from_file(tmp_path / "missing.yaml", environ=environ)

    assert settings.get("app.base_url") == "http://env.example.com/"
    assert settings.get("browser.headless") is True
    assert settings.get("timeouts.explicit_wait") == 7
    assert settings.get_bool("browser.headless") is True


def test_unknown_key_returns_default():
    settings = Settings(environ={})
    assert settings.get("app.missing", "fallback") == "fallback"
    assert settings.get_int("app.base_url", 9) == 9


def test_invalid_yaml_raises_configuration_error(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("app: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Settings.from_file(config_path, environ={})


def test_non_mapping_root_is_rejected(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Settings.from_file(config_path, environ={})


def test_get_section_is_a_copy():
    settings = Settings(environ={})
    section = settings.get_section("credentials")
    section["password"] = "changed"

    assert settings.password == "secret_sauce"


def test_load_settings_is_cached_and_reset(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"reports": {"title": "First"}}), encoding="utf-8")
    monkeypatch.setattr(config_loader, "_settings", None)
    monkeypatch.setenv(config_loader.CONFIG_PATH_ENV, str(config_path))

    first = load_settings()
    assert first.get_str("reports.title") == "First"
    assert load_settings() is first

    reset_settings()
    assert load_settings() is not first
