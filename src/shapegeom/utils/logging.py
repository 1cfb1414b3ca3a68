"""Logging utilities for ShapeGeom."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARKER = "_shapegeom_handler"


@dataclass
class QueryStats:
    """Statistics about the queries evaluated in one run."""

    query_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _remove_own_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Calling this again replaces the handlers installed by an earlier call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    _remove_own_handlers(root_logger)
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shapegeom")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class QueryLogger:
    """Logger for tracking evaluated geometry queries."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = QueryStats(start_time=time.perf_counter())

    def log_query(self, command: str, **arguments: object) -> None:
        """Log a query before it is evaluated."""
        self._logger.debug("Evaluating query", command=command, **{k: str(v) for k, v in arguments.items()})

    def log_result(self, command: str, result: object) -> None:
        """Log the result of a query; None counts as an empty result."""
        self._stats.query_count += 1
        if result is None:
            self._stats.empty_count += 1
            self._logger.info("Query has no result", command=command)
        else:
            self._logger.debug("Query evaluated", command=command, result=str(result))

    def log_error(self, command: str, error: Exception) -> None:
        """Log a failed query."""
        self._logger.error(
            "Query failed",
            command=command,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((command, str(error)))

    def finish(self) -> QueryStats:
        """Stop the run clock and return the statistics."""
        self._stats.end_time = time.perf_counter()
        self._logger.debug(
            "Run finished",
            queries=self._stats.query_count,
            empty=self._stats.empty_count,
            errors=self._stats.error_count,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )
        return self._stats

    @property
    def stats(self) -> QueryStats:
        """Get current query statistics."""
        return self._stats
