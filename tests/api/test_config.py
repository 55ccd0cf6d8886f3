"""
Tests for environment-driven configuration and logging setup.
"""

import logging
from pathlib import Path

from movies_api.api import config
from movies_api.utils.logging_config import setup_logging


def test_port_defaults_to_1234(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert config.get_api_port() == 1234


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    assert config.get_api_port() == 8081


def test_default_allowed_origins(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    assert config.get_allowed_origins() == [
        "http://localhost:8080",
        "http://localhost:1234",
        "http://movies.com",
        "http://midu.dev",
    ]


def test_allowed_origins_from_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    assert config.get_allowed_origins() == ["http://a.test", "http://b.test"]


def test_seed_path_default_exists(monkeypatch):
    monkeypatch.delenv("MOVIES_SEED_PATH", raising=False)
    assert Path(config.get_seed_path()).is_file()


def test_seed_path_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MOVIES_SEED_PATH", str(tmp_path / "seed.json"))
    assert config.get_seed_path() == str(tmp_path / "seed.json")


def test_setup_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_file="api.log", level="debug", log_dir=str(tmp_path))
        logging.getLogger("movies_api.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in (tmp_path / "api.log").read_text()
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
