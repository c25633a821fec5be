# test_logging_config.py
# Unit tests for loguru sink configuration

import sys

import pytest
from loguru import logger

from navstack.Utils.logging_config import configure_logging, resolve_level


@pytest.fixture
def restore_logger():
    """Put back a default stderr sink after configure_logging() replaced the sinks."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestResolveLevel:
    """Test the level lookup order."""

    def test_default_is_info(self):
        assert resolve_level() == "INFO"

    def test_config_level(self, write_config):
        write_config('[logging]\nlevel = "debug"\n')
        assert resolve_level() == "DEBUG"

    def test_env_overrides_config(self, write_config, monkeypatch):
        write_config('[logging]\nlevel = "DEBUG"\n')
        monkeypatch.setenv("NAVSTACK_LOG_LEVEL", "error")

        assert resolve_level() == "ERROR"

    def test_argument_overrides_everything(self, monkeypatch):
        monkeypatch.setenv("NAVSTACK_LOG_LEVEL", "ERROR")
        assert resolve_level("trace") == "TRACE"

    def test_unknown_level(self):
        assert resolve_level("chatty") == "INFO"


class TestConfigureLogging:
    """Test sink setup."""

    def test_file_sink(self, write_config, tmp_path, restore_logger):
        log_file = tmp_path / "logs" / "navstack.log"
        write_config(f'[logging]\nlevel = "DEBUG"\nconsole = false\nlog_file = "{log_file.as_posix()}"\n')

        assert configure_logging() == "DEBUG"
        logger.debug("written to the file sink")
        logger.complete()

        contents = log_file.read_text(encoding="utf-8")
        assert "navstack logging configured: level=DEBUG" in contents
        assert "written to the file sink" in contents

    def test_level_filters_file_sink(self, write_config, tmp_path, restore_logger):
        log_file = tmp_path / "navstack.log"
        write_config(f'[logging]\nconsole = false\nlog_file = "{log_file.as_posix()}"\n')

        configure_logging(level="WARNING")
        logger.info("too quiet")
        logger.warning("loud enough")

        contents = log_file.read_text(encoding="utf-8")
        assert "too quiet" not in contents
        assert "loud enough" in contents

    def test_console_override(self, restore_logger, capsys):
        configure_logging(level="INFO", console=False)
        logger.info("nowhere to go")

        assert "nowhere to go" not in capsys.readouterr().err
