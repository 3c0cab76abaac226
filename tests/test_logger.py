import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from inventory_analytics import settings
from inventory_analytics.logger import setup_logger


def test_setup_logger_adds_handlers_once(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    name = "inventory_analytics.tests.logger"

    logger = setup_logger(name, logging.DEBUG)
    again = setup_logger(name, logging.DEBUG)

    try:
        assert again is logger
        assert len(logger.handlers) == 2
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert (tmp_path / "logs").is_dir()
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
