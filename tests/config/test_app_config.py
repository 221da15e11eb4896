#!filepath: tests/config/test_app_config.py
import yaml
import pytest
from pydantic import ValidationError

from tabledb.config import AppConfig, LogConfig, QueryConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    Temporary YAML config; pytest cleans tmp_path.
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG",
        },
        "query": {
            "window_start": 1,
            "window_end": 100,
            "max_price": 50.0,
            "min_volume": 2.5,
            "carry_over_eligibility": False,
            "repeat": 2,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("TABLEDB_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TABLEDB_LOG_DIR", raising=False)


def test_default_config_loads():
    cfg = AppConfig.load()

    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.query, QueryConfig)
    assert cfg.query.window_start == 13
    assert cfg.query.window_end == 268
    assert cfg.query.max_price == 299.0
    assert cfg.query.min_volume == 10.0
    assert cfg.query.carry_over_eligibility is True
    assert cfg.query.repeat == 5
    assert cfg.log.dir is None


def test_defaults_match_packaged_file():
    assert AppConfig.load() == AppConfig()


def test_custom_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.retention == "7 days"
    assert cfg.query.window_end == 100
    assert cfg.query.carry_over_eligibility is False
    assert cfg.query.repeat == 2


def test_env_overrides(sample_config_file, monkeypatch, tmp_path):
    monkeypatch.setenv("TABLEDB_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("TABLEDB_LOG_DIR", str(tmp_path / "logs"))

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "ERROR"
    assert cfg.log.dir == str(tmp_path / "logs")


def test_partial_config_uses_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"query": {"max_price": 10.0}}), encoding="utf-8")

    cfg = AppConfig.load(path=str(f))

    assert cfg.query.max_price == 10.0
    assert cfg.query.window_start == 13
    assert cfg.log.level == "WARNING"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "missing.yaml"))


def test_inverted_window_should_fail(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text(yaml.safe_dump({"query": {"window_start": 300, "window_end": 10}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad))


def test_repeat_must_be_positive():
    with pytest.raises(ValidationError):
        QueryConfig(repeat=0)
