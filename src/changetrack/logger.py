from __future__ import annotations

import json
import logging
import sys
import traceback
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "changetrack"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "changetrack.log"

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
        "message",
    }
)


@dataclass(frozen=True)
class LoggingConfig:
    level: int = logging.INFO
    file: str | None = None
    enable_file_logging: bool = False
    log_dir: str = DEFAULT_LOG_DIR
    log_rotation: bool = False
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


class DetailedTextFormatter(logging.Formatter):
    """Formatter for file logs: one summary line plus one line per structured extra."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        module = record.name.rsplit(".", 1)[-1]
        lines = [f"{timestamp} | {record.levelname:5s} | {module:10s} | {record.getMessage()}"]

        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_FIELDS or key.startswith("_"):
                continue
            label = key.replace("_", " ").title()
            if isinstance(value, (dict, list, tuple)):
                lines.append(f"  {label}: {json.dumps(value, indent=2, default=repr)}")
            else:
                text = str(value)
                if len(text) > 100:
                    text = text[:100] + "..."
                lines.append(f"  {label}: {text}")

        if record.exc_info:
            lines.append("  Traceback:")
            lines.append("    " + "\n    ".join(traceback.format_exception(*record.exc_info)))

        lines.append("")
        return "\n".join(lines)


def get_logger(name: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name or LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Attach handlers to the package logger.

    Without a config, records at INFO and above go to stderr. File logging
    is opt-in through ``enable_file_logging`` or an explicit ``file``.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(config.level)
    logger.propagate = False

    if config.enable_file_logging and not config.file:
        log_dir = Path(config.log_dir)
        log_file = log_dir / DEFAULT_LOG_FILE
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            if config.log_rotation:
                file_handler: logging.Handler = RotatingFileHandler(
                    log_file,
                    mode="a",
                    maxBytes=config.max_bytes,
                    backupCount=config.backup_count,
                )
            else:
                file_handler = logging.FileHandler(log_file, mode="a")
            file_handler.setLevel(config.level)
            file_handler.setFormatter(DetailedTextFormatter())
            logger.addHandler(file_handler)
        except OSError as e:
            sys.stderr.write(f"Warning: Could not create log file {log_file}: {e}\n")
            sys.stderr.write("Falling back to stderr logging only\n")

    if config.file:
        main_handler: logging.Handler = logging.FileHandler(config.file, mode="w")
    else:
        main_handler = logging.StreamHandler(sys.stderr)
    main_handler.setLevel(config.level)
    main_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(main_handler)
