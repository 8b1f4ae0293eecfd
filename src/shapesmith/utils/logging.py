"""Logging utilities for Shapesmith."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class GenerationStats:
    """Statistics of generation calls made through one composer."""

    generated_count: int = 0
    rejected_count: int = 0
    total_duration_ms: float = 0.0
    rejections: list[tuple[str, str]] = field(default_factory=list)

    @property
    def avg_duration_ms(self) -> float:
        """Average duration of successful generations."""
        if self.generated_count == 0:
            return 0.0
        return self.total_duration_ms / self.generated_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and, optionally, a file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
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

    logger = structlog.get_logger("shapesmith")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking generation calls and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_start(self, kind: str, width: float, height: float, opaque: bool) -> None:
        """Log start of a generation."""
        self._logger.debug(
            "Generating image",
            kind=kind,
            width=width,
            height=height,
            opaque=opaque,
        )

    def log_complete(
        self,
        kind: str,
        pixel_width: int,
        pixel_height: int,
        duration_ms: float,
    ) -> None:
        """Log successful generation."""
        self._logger.info(
            "Image generated",
            kind=kind,
            pixels=f"{pixel_width}x{pixel_height}",
            duration_ms=round(duration_ms, 2),
        )
        self._stats.generated_count += 1
        self._stats.total_duration_ms += duration_ms

    def log_rejected(self, kind: str, error: Exception) -> None:
        """Log a generation that failed validation or rendering."""
        self._logger.warning(
            "Image generation rejected",
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.rejected_count += 1
        self._stats.rejections.append((kind, str(error)))

    def log_path(self, kind: str, subpaths: int, segments: int) -> None:
        """Log the size of the built path."""
        self._logger.debug(
            "Path built",
            kind=kind,
            subpaths=subpaths,
            segments=segments,
        )

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
