# core/logging.py
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import structlog

from users_api.config.settings import Settings, settings as default_settings

# stdlib logger every module logger in the package hangs off
ROOT_LOGGER_NAME = "users_api"

_HANDLER_TAG = "_users_api_handler"


def _shared_processors():
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(settings: Settings = None, log_file: str = None, log_to_console: bool = None):
    """Configure structlog for JSON logging to a daily rotated file and optional console output"""

    settings = settings or default_settings

    if log_file is None:
        log_file = str(Path(settings.log_dir) / settings.log_file)
    if log_to_console is None:
        log_to_console = settings.log_to_console

    # Ensure log directory exists
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    # JSON lines for the file sink
    file_handler = TimedRotatingFileHandler(
        log_file,
        when="midnight",
        backupCount=settings.log_backup_count,
        encoding="utf-8",
        utc=True,
    )
    file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
    ))
    handlers = [file_handler]

    # Console renderer for development
    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(),
            ],
        ))
        handlers.append(console_handler)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        setattr(handler, _HANDLER_TAG, True)
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False

    # Reduce noise from the server
    logging.getLogger("hypercorn").setLevel(logging.WARNING)

    structlog.configure(
        processors=_shared_processors() + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[settings.log_level]
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a structured logger for the given module name"""
    return structlog.get_logger(name)
