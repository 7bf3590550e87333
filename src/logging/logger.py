# src/logging/logger.py - v1
"""Logger factory with JSON and text formatters."""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from graphlouvain.logging.context import get_context

if TYPE_CHECKING:
    from graphlouvain.config.settings import Settings

ROOT_LOGGER = "graphlouvain"


class JsonFormatter(logging.Formatter):
    """Structured one-line JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context_dict = ctx.as_dict()
        if context_dict:
            log_entry["context"] = context_dict

        if hasattr(record, "data") and record.data:  # type: ignore[attr-defined]
            log_entry["data"] = record.data  # type: ignore[attr-defined]

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter for development."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        parts = [
            datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
        ]
        if ctx.run_id:
            parts.append(f"[{ctx.run_id}]")
        if ctx.pass_index is not None:
            parts.append(f"(pass {ctx.pass_index}{'/' + ctx.phase if ctx.phase else ''})")
        parts.append(f"- {record.getMessage()}")
        return " ".join(parts)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Configuration is applied by setup_logging()."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def parse_size(size_str: str) -> int:
    """Parse a size string like '10MB' into bytes (KB, MB, GB)."""
    match = re.match(r"^(\d+)\s*(KB|MB|GB)$", size_str.strip(), re.IGNORECASE)
    if not match:
        raise ValueError(f"Invalid size format: {size_str!r}. Use e.g. '10MB'.")
    multipliers = {"KB": 1024, "MB": 1024**2, "GB": 1024**3}
    return int(match.group(1)) * multipliers[match.group(2).upper()]


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | Path | None = None,
    rotation: str = "10MB",
    retention: int = 5,
) -> logging.Logger:
    """Configure the root graphlouvain logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_format: Output format ("json" or "text").
        log_file: Path to a rotating log file (None = stdout only).
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files to keep.

    Returns:
        The configured root logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates on re-init
    root_logger.handlers.clear()

    formatter: logging.Formatter
    if log_format == "json":
        formatter = JsonFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(path),
            maxBytes=parse_size(rotation),
            backupCount=retention,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def setup_logging_from_settings(settings: Settings) -> logging.Logger:
    """Configure logging from loaded Settings."""
    return setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
