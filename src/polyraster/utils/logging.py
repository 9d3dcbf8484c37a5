"""Logging utilities for Polyraster."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    rendered_count: int = 0
    pixel_count: int = 0
    segment_count: int = 0
    render_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_render_time_ms(self) -> float | None:
        """Average time per rendered bitmap, None before any render."""
        if not self.render_timings_ms:
            return None
        return sum(self.render_timings_ms) / len(self.render_timings_ms)


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

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install_handler(root_logger, file_handler, "polyraster-file")

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _install_handler(root_logger, console_handler, "polyraster-console")

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

    logger = structlog.get_logger("polyraster")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def _install_handler(root: logging.Logger, handler: logging.Handler, name: str) -> None:
    """Add a named handler, replacing one installed by an earlier call."""
    for existing in list(root.handlers):
        if existing.get_name() == name:
            root.removeHandler(existing)
            existing.close()
    handler.set_name(name)
    root.addHandler(handler)


class RenderLogger:
    """Logger for tracking rendering progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, scale_x: float, scale_y: float) -> None:
        """Log start of rendering at one scale."""
        self._logger.debug("Rendering scale", scale_x=scale_x, scale_y=scale_y)

    def log_render_complete(
        self,
        scale_x: float,
        scale_y: float,
        segments: int,
        width: int,
        height: int,
        duration_ms: float,
    ) -> None:
        """Log a finished bitmap."""
        self._logger.info(
            "Bitmap rendered",
            scale_x=scale_x,
            scale_y=scale_y,
            segments=segments,
            size=f"{width}x{height}",
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.pixel_count += width * height
        self._stats.segment_count += segments
        self._stats.render_timings_ms.append(duration_ms)

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
