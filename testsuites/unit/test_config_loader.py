import dataclasses

import pytest
import yaml

from basesetup.config import ConfigurationError, FrameworkConfig, load_config
from basesetup.config.config_loader import KNOWN_KEYS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("UI_CONFIG_DIR", raising=False)
    for _, _, env_key in KNOWN_KEYS.values():
        monkeypatch.delenv(env_key, raising=False)


def write_config(directory, env, data):
    path = directory / f"config-{env}.yaml"
    path.write_text(yaml.dump(data), encoding="utf-8")
    return path


def test_values_and_documented_defaults(tmp_path):
    write_config(tmp_path, "dev", {"baseUrl": "https://shop.test", "browser": "Firefox"})

    config = load_config("dev", config_dir=tmp_path)
    assert config.env == "dev"
    assert config.base_url == "https://shop.test"
    assert config.browser == "firefox"
    assert config.headless is True
    assert config.slow_mo == 0
    assert config.default_timeout == 30000
    assert config.log_file is None


def test_env_variable_overrides_file(monkeypatch, tmp_path):
    write_config(tmp_path, "dev", {"baseUrl": "https://shop.test", "headless": True, "slowMo": 10})
    monkeypatch.setenv("UI_BASE_URL", "https://override.test")
    monkeypatch.setenv("UI_HEADLESS", "false")
    monkeypatch.setenv("UI_SLOW_MO", "250")

    config = load_config("dev", config_dir=tmp_path)
    assert config.base_url == "https://override.test"
    assert config.headless is False
    assert config.slow_mo == 250


def test_invalid_integer_falls_back_to_default(tmp_path):
    write_config(tmp_path, "dev", {"defaultTimeout": "soon"})
    assert load_config("dev", config_dir=tmp_path).default_timeout == 30000


def test_environment_selected_from_env_variable(monkeypatch, tmp_path):
    write_config(tmp_path, "qa", {"baseUrl": "https://qa.test"})
    monkeypatch.setenv("ENV", "qa")
    monkeypatch.setenv("UI_CONFIG_DIR", str(tmp_path))

    config = load_config()
    assert config.env == "qa"
    assert config.base_url == "https://qa.test"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config("staging", config_dir=tmp_path)


def test_non_mapping_document_raises(tmp_path):
    (tmp_path / "config-dev.yaml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config("dev", config_dir=tmp_path)


def test_unsupported_browser_raises(tmp_path):
    write_config(tmp_path, "dev", {"browser": "netscape"})
    with pytest.raises(ConfigurationError, match="Unsupported browser"):
        load_config("dev", config_dir=tmp_path)


def test_config_is_immutable(tmp_path):
    write_config(tmp_path, "dev", {"customFlag": "yes", "retries": "3"})
    config = load_config("dev", config_dir=tmp_path)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.base_url = "https://elsewhere.test"
    with pytest.raises(TypeError):
        config.properties["customFlag"] = "no"

    assert config.get_bool("customFlag") is True
    assert config.get_int("retries") == 3
    assert config.get("missing", "fallback") == "fallback"


def test_bundled_environments_load():
    for env in ("dev", "qa"):
        config = load_config(env)
        assert isinstance(config, FrameworkConfig)
        assert config.base_url.startswith("https://")


def test_empty_values_fall_back_to_defaults(tmp_path):
    (tmp_path / "config-dev.yaml").write_text(
        "headless:\nslowMo:\ndefaultTimeout:\nbaseUrl:\n", encoding="utf-8"
    )

    config = load_config("dev", config_dir=tmp_path)
    assert config.headless is True
    assert config.slow_mo == 0
    assert config.default_timeout == 30000
    assert config.base_url == "https://example.com"
