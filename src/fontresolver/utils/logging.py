"""Logging utilities for fontresolver."""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ResolutionStats:
    """Counters for resolution and byte fetch activity."""

    cache_hits: int = 0
    cache_misses: int = 0
    fallbacks: int = 0
    fetch_count: int = 0
    bytes_read: int = 0

    @property
    def resolve_count(self) -> int:
        """Total number of resolve calls."""
        return self.cache_hits + self.cache_misses


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger backed by the stdlib logger ``name``.

    Once configure_logging() has run, loggers come from the global structlog
    configuration. Before that, events are rendered as key/value text and
    handed to stdlib logging, so nothing is emitted unless the application
    enabled the level.
    """
    if structlog.is_configured():
        return structlog.stdlib.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by a previous call
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

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

    logger = structlog.stdlib.get_logger("fontresolver")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class ResolutionLogger:
    """Logger for tracking font resolution and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ResolutionStats()
        self._lock = threading.Lock()

    def log_cache_hit(self, cache_key: str, file_name: str | None) -> None:
        """Log a request answered from the resolution cache."""
        self._logger.debug("Face cache hit", key=cache_key, file=file_name)
        with self._lock:
            self._stats.cache_hits += 1

    def log_resolved(
        self,
        cache_key: str,
        file_name: str | None,
        candidates: int,
        rule: str,
    ) -> None:
        """Log a freshly resolved face."""
        self._logger.debug(
            "Face resolved",
            key=cache_key,
            file=file_name,
            candidates=candidates,
            rule=rule,
        )
        with self._lock:
            self._stats.cache_misses += 1

    def log_fallback(self, family: str, file_name: str | None) -> None:
        """Log a request that matched no candidate and fell back to the first file."""
        self._logger.info("No font matches family, using first font", family=family, file=file_name)
        with self._lock:
            self._stats.fallbacks += 1

    def log_fetch(self, requested: str, path: Path, size: int) -> None:
        """Log a byte fetch."""
        self._logger.debug("Font bytes read", requested=requested, path=str(path), size=size)
        with self._lock:
            self._stats.fetch_count += 1
            self._stats.bytes_read += size

    def log_no_fonts(self, requested: str, root: Path | None) -> None:
        """Log a fetch against an empty index."""
        self._logger.error(
            "No font files available",
            requested=requested,
            root=str(root) if root else None,
        )

    @property
    def stats(self) -> ResolutionStats:
        """Get current statistics."""
        return self._stats
