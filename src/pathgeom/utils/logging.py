"""Logging utilities for Pathgeom."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class CompileStats:
    """Statistics from a compile run."""

    compiled_count: int = 0
    failed_count: int = 0
    vertex_count: int = 0
    triangle_count: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)
    shape_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate compile duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_shape_time_ms(self) -> float | None:
        """Average compile time per shape in milliseconds."""
        if not self.shape_times_ms:
            return None
        return sum(self.shape_times_ms) / len(self.shape_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by an earlier call
    for handler in list(root_logger.handlers):
        if getattr(handler, "_pathgeom", False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(console_handler)

    for handler in handlers:
        handler._pathgeom = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)

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

    logger = structlog.get_logger("pathgeom")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class CompileLogger:
    """Logger for tracking shape compilation and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CompileStats()

    def log_shape_start(self, shape_name: str, vertex_count: int) -> None:
        """Log start of shape compilation."""
        self._logger.debug("Compiling shape", shape=shape_name, vertices=vertex_count)

    def log_shape_complete(
        self,
        shape_name: str,
        vertex_count: int,
        triangle_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful shape compilation."""
        self._logger.info(
            "Shape compiled",
            shape=shape_name,
            vertices=vertex_count,
            triangles=triangle_count,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.compiled_count += 1
        self._stats.vertex_count += vertex_count
        self._stats.triangle_count += triangle_count
        self._stats.shape_times_ms.append(duration_ms)

    def log_shape_error(self, shape_name: str, error: Exception) -> None:
        """Log shape compilation failure."""
        self._logger.error(
            "Shape compilation failed",
            shape=shape_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_count += 1
        self._stats.failures.append((shape_name, str(error)))

    def log_area_mismatch(self, shape_name: str, path_area: float, fill_area: float) -> None:
        """Log a fill mesh whose area differs from its boundary's area."""
        self._logger.warning(
            "Fill area differs from path area",
            shape=shape_name,
            path_area=path_area,
            fill_area=fill_area,
        )

    @property
    def stats(self) -> CompileStats:
        """Get current compile statistics."""
        return self._stats
