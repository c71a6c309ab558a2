"""
Loguru sinks for resume-builder runs.

Every CLI command is a short run, so all runs append to one log file per
context (rotated by size, old files pruned) instead of a directory per run.
Each run starts with a single header line identifying the command.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

LOG_ROTATION = "1 MB"
LOG_RETENTION = 5


def setup_logger(
    context_name: str,
    log_dir: Path,
    run_details: Optional[Dict[str, str]] = None,
    console_level: str = "WARNING",
) -> Path:
    """
    Route loguru output to the context's log file and to stderr.

    The file sink records DEBUG and above. The console sink writes to stderr
    so stdout carries only command output.

    Args:
        context_name: Log file stem (e.g., "resume")
        log_dir: Directory holding the log files
        run_details: Extra fields for the run header (e.g., {"backend": "sqlite"})
        console_level: Minimum level echoed to stderr

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(
        log_file,
        format=FILE_FORMAT,
        level="DEBUG",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        encoding="utf-8",
    )
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_run_header(run_details)

    return log_file


def log_run_header(run_details: Optional[Dict[str, str]] = None) -> None:
    """Write one DEBUG line naming the command, working directory and run details."""
    fields = {"command": " ".join(sys.argv), "cwd": str(Path.cwd())}
    fields.update(run_details or {})
    logger.debug("run | " + " | ".join(f"{key}={value}" for key, value in fields.items()))
