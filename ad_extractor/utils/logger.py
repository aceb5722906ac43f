import logging
import sys
from pathlib import Path
import structlog
from ad_extractor.config import LOG_LEVEL, LOG_FILE, LOG_FORMAT


def _renderer():
    """Pick the final structlog renderer from LOG_FORMAT."""
    if LOG_FORMAT == "json":
        return structlog.processors.JSONRenderer()
    if LOG_FORMAT == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer()


def setup_logging(log_file: str = LOG_FILE):
    """Configure structured logging for the application.

    Logs go to stderr, and also to log_file when one is given.
    """
    level = getattr(logging, LOG_LEVEL.upper())

    # stdout is reserved for extracted records
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        logging.getLogger().addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None):
    """Get a structured logger instance."""
    return structlog.get_logger(name)


# Initialize logging on import
setup_logging()
logger = get_logger("ad_extractor")
