import logging
import os
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from nettag.constants import ENV_JSON_LOGS, ENV_LOG_LEVEL
from nettag.outils.helpers import parse_env

# Run on every record, whether it comes from structlog or plain `logging`
SHARED_PROCESSORS: List[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def find_structlog_handler(root_logger: logging.Logger) -> Optional[logging.Handler]:
    """Root handler rendering through structlog, if one is installed."""
    for handler in root_logger.handlers:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            return handler
    return None


def build_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering records as JSON or as coloured console lines."""
    renderers: List[Processor]
    if json_logs:
        # The console renderer pretty-prints tracebacks itself
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO", force: bool = False):
    """
    Route structlog and stdlib logging through one root handler.

    An existing structlog handler (installed by a host server or an earlier
    call) is left alone unless `force` is set, in which case its renderer
    and the root level are replaced.
    """
    root_logger = logging.getLogger()
    handler = find_structlog_handler(root_logger)
    if handler is not None and not force:
        return

    structlog.configure(
        processors=SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if handler is None:
        handler = logging.StreamHandler()
        root_logger.addHandler(handler)
    handler.setFormatter(build_formatter(json_logs))
    root_logger.setLevel(log_level.upper())


class NetTagStructLogger:
    """
    Structured logger for the nettag package.

    Wraps a structlog stdlib logger. `bind` returns a new logger carrying the
    extra key/value pairs; `bind_context` binds process-wide context variables
    that are merged into every record.
    """

    def __init__(self, log_name: str = "nettag", logger: Optional[Any] = None):
        self.log_name = log_name
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    def bind(self, **new_values: Any) -> "NetTagStructLogger":
        """Return a logger with `new_values` attached to every record."""
        return NetTagStructLogger(self.log_name, self.logger.bind(**new_values))

    @staticmethod
    def bind_context(**new_values: Any):
        """Bind values to the shared logger context"""
        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind(*keys: str):
        """Unbind keys from the logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_nettag_logger(log_name: str = "nettag") -> NetTagStructLogger:
    """Return a structured logger; call .bind(component=...) for per-component loggers."""
    return NetTagStructLogger(log_name)


def init_logger(json_logs: Optional[bool] = None, log_level: Optional[str] = None) -> NetTagStructLogger:
    """
    Initialize the structured logger for the nettag package.

    Explicit arguments reconfigure an already installed handler; with no
    arguments an existing setup is kept.

    Args:
        json_logs: Render records as JSON; defaults to the NETTAG_JSON_LOGS env var
        log_level: Root log level; defaults to the NETTAG_LOG_LEVEL env var or INFO

    Returns:
        NetTagStructLogger: Configured structured logger instance
    """
    force = json_logs is not None or log_level is not None
    if json_logs is None:
        json_logs = parse_env(ENV_JSON_LOGS) is True
    if log_level is None:
        log_level = os.environ.get(ENV_LOG_LEVEL, "INFO")

    setup_logging(json_logs=json_logs, log_level=log_level, force=force)

    return NetTagStructLogger("nettag")
