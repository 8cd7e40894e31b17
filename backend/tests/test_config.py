# backend/tests/test_config.py
import json

import pytest

import config
from config import settings, ConfigSource, ConfigurationError, load_database_config


@pytest.fixture()
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "CONFIG_PATH", str(path))
    monkeypatch.setattr(settings, "DB_HOST", None)
    return path


def test_file_source_when_db_host_absent(config_file):
    config_file.write_text(json.dumps({
        "database": {"host": "localhost", "user": "root", "password": "pw", "database": "tracker"}
    }))

    source, cfg = load_database_config()
    assert source is ConfigSource.FILE
    assert cfg.host == "localhost"
    assert cfg.port == 3306
    assert cfg.database == "tracker"
    assert cfg.ssl is False


def test_environment_source_ignores_the_file_entirely(config_file, monkeypatch):
    config_file.write_text(json.dumps({
        "database": {"host": "localhost", "database": "from_file", "port": 3307}
    }))
    monkeypatch.setattr(settings, "DB_HOST", "mysql-1.aivencloud.com")
    monkeypatch.setattr(settings, "DB_PORT", 25060)
    monkeypatch.setattr(settings, "DB_USER", "avnadmin")
    monkeypatch.setattr(settings, "DB_PASSWORD", "pw")
    monkeypatch.setattr(settings, "DB_NAME", "defaultdb")
    monkeypatch.setattr(settings, "DB_SSL", True)

    source, cfg = load_database_config()
    assert source is ConfigSource.ENVIRONMENT
    assert (cfg.host, cfg.port, cfg.database, cfg.ssl) == (
        "mysql-1.aivencloud.com", 25060, "defaultdb", True
    )


def test_missing_file_is_a_configuration_error(config_file):
    with pytest.raises(ConfigurationError):
        load_database_config()


@pytest.mark.parametrize("content", ["not json", json.dumps({"server": {}}), json.dumps({"database": {"port": 1}})])
def test_bad_file_is_a_configuration_error(config_file, content):
    config_file.write_text(content)
    with pytest.raises(ConfigurationError):
        load_database_config()


def test_write_then_read_config_file(config_file):
    config.write_config_file(config.CONFIG_TEMPLATE)
    assert config.read_config_file() == config.CONFIG_TEMPLATE
