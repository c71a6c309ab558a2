"""
Resume context logger.

Provides logging interface for the application and infrastructure layers with
automatic [resume] prefix. Modules in those layers import from here, not from
utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resume_builder.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[resume]"


def setup_resume_logger(log_dir: Path, backend: str = "", console_level: str = "WARNING") -> Path:
    """
    Setup logging for one resume-builder command.

    Args:
        log_dir: Directory for log files
        backend: Storage backend name, recorded in the run header
        console_level: Minimum level echoed to stderr

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="resume",
        log_dir=log_dir,
        run_details={"backend": backend} if backend else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [resume] prefix


def _log_info(message: str) -> None:
    """Log info message with [resume] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [resume] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [resume] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [resume] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [resume] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_rejected_operation(operation: str, error: Exception) -> None:
    """Log a mutation that was refused without touching the document."""
    _log_warning(f"{operation} rejected: {error}")
