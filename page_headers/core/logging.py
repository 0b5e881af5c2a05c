"""Logging configuration using loguru."""
import json
import logging
import sys
from typing import Dict

from flask import Flask, has_request_context, request
from loguru import logger as loguru_logger

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _serialize(record: Dict) -> str:
    """Render a record as a single JSON object."""
    base = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    if has_request_context():
        base.update(
            {
                "method": request.method,
                "path": request.path,
                "ip": request.remote_addr,
            }
        )

    extra = {k: v for k, v in record["extra"].items() if k != "serialized"}
    if extra:
        base.update(extra)

    return json.dumps(base, default=str)


def format_json(record: Dict) -> str:
    """Loguru format function emitting one JSON line per record."""
    # the returned string is a loguru template; JSON braces must stay out of it
    record["extra"]["serialized"] = _serialize(record)
    return "{extra[serialized]}\n"


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru."""

    def emit(self, record):
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(app: Flask) -> None:
    """Configure loguru sinks from the app config."""
    log = loguru_logger
    # Remove default logger
    log.remove()

    log_format = app.config.get("LOG_FORMAT", "json")
    log_level = app.config.get("LOG_LEVEL", "INFO")
    log_file = app.config.get("LOG_FILE")

    if log_format == "json":
        formatter = format_json
        log.add(sys.stdout, format=formatter, level=log_level)
    else:
        formatter = TEXT_FORMAT
        log.add(sys.stdout, format=formatter, level=log_level, colorize=True)

    if log_file:
        log.add(
            log_file,
            rotation="1 day",
            retention="30 days",
            compression="zip",
            level=log_level,
            format=formatter,
        )

    app.logger.handlers = [InterceptHandler()]
    app.logger.setLevel(log_level)

    logging.getLogger("werkzeug").handlers = [InterceptHandler()]
    logging.getLogger("werkzeug").setLevel(log_level)

    log.info("Logging configured", log_format=log_format, log_level=log_level)
