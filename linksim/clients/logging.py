"""Structured logging utilities."""

import json
import logging
from typing import Any, Dict, Optional

_RESERVED = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED or key.startswith("_"):
                continue
            log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger with JSON formatting configured."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level:
        logger.setLevel(level.upper())
    return logger


def log_config_load(
    logger: logging.Logger,
    run_id: str,
    duration_ms: float,
    config_version: Optional[str] = None,
) -> None:
    """Log config load stage."""
    extra: Dict[str, Any] = {
        "run_id": run_id,
        "stage": "config_load",
        "duration_ms": round(duration_ms, 3),
    }
    if config_version:
        extra["config_version"] = config_version
    logger.info("Config loaded", extra=extra)


def log_mismatch(
    logger: logging.Logger,
    run_id: str,
    metric: str,
    a: str,
    b: str,
    expected: float,
    actual: float,
) -> None:
    """Log a reference pair whose score deviates from the published value."""
    logger.warning(
        f"{metric}({a!r}, {b!r}) = {actual!r}, expected {expected!r}",
        extra={
            "run_id": run_id,
            "stage": "verify",
            "metric": metric,
            "expected": expected,
            "actual": actual,
        },
    )


def log_benchmark(
    logger: logging.Logger,
    run_id: str,
    metric: str,
    pair_count: int,
    iterations: int,
    duration_ms: float,
    per_call_us: float,
) -> None:
    """Log benchmark stage."""
    logger.info(
        f"Benchmark {metric} completed",
        extra={
            "run_id": run_id,
            "stage": f"benchmark_{metric}",
            "pair_count": pair_count,
            "iterations": iterations,
            "duration_ms": round(duration_ms, 3),
            "per_call_us": round(per_call_us, 3),
        },
    )
