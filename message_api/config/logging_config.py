import logging
from logging.handlers import TimedRotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from message_api.config.settings import Config

DEFAULT_CORRELATION_ID = "NO Correlation ID"
HANDLER_PREFIX = "message_api"

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=DEFAULT_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = DEFAULT_CORRELATION_ID
        return super().format(record)


def setup_logging(level: str = "INFO", log_file: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise

    # Repeated app factory calls (tests) must not stack handlers
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()

    formatter = SafeFormatter(Config.LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(CorrelationIdFilter())
    console_handler.set_name(f"{HANDLER_PREFIX}.console")
    root.addHandler(console_handler)

    # Daily rolling file, like the console but kept for LOG_BACKUP_DAYS
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=Config.LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        file_handler.set_name(f"{HANDLER_PREFIX}.file")
        root.addHandler(file_handler)

    logging.getLogger("message_api").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger("message_api").info("Logging is set up.")

    return root
