"""
Structured logging setup using loguru.
Console output always; a rotating file sink when a log directory is configured.
"""
import sys
from pathlib import Path
from loguru import logger as _logger

from pickem.config import cfg


def setup_logger(log_dir: Path | None = None, level: str | None = None) -> None:
    """
    Configure loguru logger with console and optional file sink.

    Args:
        log_dir: Directory for log files. Defaults to PICKEM_LOG_DIR; no file
            logging when neither is set.
        level: Minimum log level. Defaults to PICKEM_LOG_LEVEL.
    """
    log_dir = log_dir if log_dir is not None else cfg.log.dir
    level = level or cfg.log.level

    _logger.remove()  # Remove default handler

    _logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        _logger.add(
            log_dir / "pickem_{time:YYYY-MM-DD}.log",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="1 day",
            retention="7 days",
            compression="gz",
        )


logger = _logger
