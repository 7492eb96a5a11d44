import logging

import pytest
import structlog

from nettag.logger import (
    NetTagStructLogger, find_structlog_handler, get_nettag_logger, init_logger, setup_logging
)

pytestmark = pytest.mark.unit


def structlog_handlers():
    return [
        handler for handler in logging.getLogger().handlers
        if isinstance(getattr(handler, "formatter", None), structlog.stdlib.ProcessorFormatter)
    ]


def active_renderer():
    return find_structlog_handler(logging.getLogger()).formatter.processors[-1]


class TestLogger:

    def test_package_import_configures_root_handler(self):
        import nettag
        assert isinstance(nettag.logger, NetTagStructLogger)
        assert len(structlog_handlers()) == 1

    def test_setup_keeps_existing_handler_by_default(self, restore_logging):
        level = logging.getLogger().level
        renderer = active_renderer()
        setup_logging(json_logs=True, log_level="DEBUG")
        assert len(structlog_handlers()) == 1
        assert logging.getLogger().level == level
        assert active_renderer() is renderer

    def test_forced_setup_applies_level_and_renderer(self, restore_logging):
        setup_logging(json_logs=True, log_level="debug", force=True)
        assert len(structlog_handlers()) == 1
        assert logging.getLogger().level == logging.DEBUG
        assert isinstance(active_renderer(), structlog.processors.JSONRenderer)

        setup_logging(json_logs=False, log_level="WARNING", force=True)
        assert logging.getLogger().level == logging.WARNING
        assert isinstance(active_renderer(), structlog.dev.ConsoleRenderer)

    def test_init_logger_without_arguments_keeps_setup(self, restore_logging, monkeypatch):
        monkeypatch.setenv("NETTAG_LOG_LEVEL", "ERROR")
        level = logging.getLogger().level
        init_logger()
        assert logging.getLogger().level == level

    def test_init_logger_explicit_arguments_reconfigure(self, restore_logging):
        init_logger(log_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        init_logger(json_logs=True)
        assert isinstance(active_renderer(), structlog.processors.JSONRenderer)
        assert len(structlog_handlers()) == 1

    def test_bind_returns_new_logger(self):
        base = get_nettag_logger("nettag.test")
        bound = base.bind(component="Test")
        assert isinstance(bound, NetTagStructLogger)
        assert bound is not base
        assert bound.log_name == "nettag.test"
        bound.info("bound logger works", value=1)

    def test_context_binding(self):
        logger = get_nettag_logger()
        logger.bind_context(instance="Ctx")
        try:
            assert structlog.contextvars.get_contextvars()["instance"] == "Ctx"
        finally:
            logger.unbind("instance")
        assert "instance" not in structlog.contextvars.get_contextvars()
