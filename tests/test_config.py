import pytest

from vultr_cli.utils.config import ConfigManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("VULTR_API_KEY", "LOG_LEVEL", "LOG_PATH", "VULTR_CLI_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)


def test_settings_loaded_from_yaml(tmp_path):
    (tmp_path / "settings.yaml").write_text(
        "vultr:\n  api_key: from-file\nlogging:\n  level: DEBUG\n"
    )

    config = ConfigManager(tmp_path)

    assert config.get_api_key() == "from-file"
    assert config.get_logging_level() == "DEBUG"


def test_yml_extension_is_accepted(tmp_path):
    (tmp_path / "settings.yml").write_text("vultr:\n  api_key: yml-key\n")

    assert ConfigManager(tmp_path).get_api_key() == "yml-key"


def test_environment_overrides_file(tmp_path, monkeypatch):
    (tmp_path / "settings.yaml").write_text("vultr:\n  api_key: from-file\n")
    monkeypatch.setenv("VULTR_API_KEY", "from-env")

    assert ConfigManager(tmp_path).get_api_key() == "from-env"


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigManager(tmp_path)

    assert config.config == {}
    assert config.get_api_key() == ""
    assert config.get_logging_level() == "INFO"
    assert config.get_value("vultr.region.id", 42) == 42


def test_config_dir_from_environment(tmp_path, monkeypatch):
    (tmp_path / "settings.yaml").write_text("vultr:\n  api_key: env-dir\n")
    monkeypatch.setenv("VULTR_CLI_CONFIG_DIR", str(tmp_path))

    assert ConfigManager().get_api_key() == "env-dir"


def test_reload_config(tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text("vultr:\n  api_key: first\n")
    config = ConfigManager(tmp_path)
    assert config.get_api_key() == "first"

    settings.write_text("vultr:\n  api_key: second\n")
    assert config.get_api_key() == "first"

    config.reload_config()
    assert config.get_api_key() == "second"
