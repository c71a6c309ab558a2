"""
Shared utilities for the resume builder.

Common functionality used across contexts:
- Loguru sink setup with a per-run header line
"""

from resume_builder.utils.logger import log_run_header, setup_logger

__all__ = ["setup_logger", "log_run_header"]
