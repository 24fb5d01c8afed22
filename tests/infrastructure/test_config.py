"""Tests for environment-driven settings and logging setup."""

import logging
import sys
from pathlib import Path

import structlog

from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.logging import bind_actor, configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("MARKETPLACE_DATA_DIR", "MARKETPLACE_LOG_LEVEL", "MARKETPLACE_LOG_FORMAT"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings.from_env()
        assert settings.data_dir.name == "data"
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MARKETPLACE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MARKETPLACE_LOG_LEVEL", "debug")
        monkeypatch.setenv("MARKETPLACE_LOG_FORMAT", "JSON")
        settings = Settings.from_env()
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_data_dir_override(self, tmp_path):
        settings = Settings(data_dir=Path("/nowhere"))
        assert settings.with_data_dir(tmp_path).data_dir == tmp_path
        assert settings.with_data_dir(None) is settings


class TestLogging:

    def test_json_lines_on_stderr(self, capsys):
        configure_logging(Settings(log_level="INFO", log_format="json"))
        bind_actor("7")

        structlog.get_logger("marketplace.test").info("order.created", order_id="1")

        err = capsys.readouterr().err
        assert '"event": "order.created"' in err
        assert '"actor": "7"' in err
        assert logging.getLogger().level == logging.INFO

    def test_single_stderr_stream_handler(self):
        configure_logging(Settings())
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert type(handlers[0]) is logging.StreamHandler
        assert handlers[0].stream is sys.stderr

    def test_level_filters(self, capsys):
        configure_logging(Settings(log_level="ERROR"))
        structlog.get_logger("marketplace.test").warning("stock.check_failed")
        assert capsys.readouterr().err == ""
