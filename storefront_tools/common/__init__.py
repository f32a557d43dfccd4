"""
================================================================================
Storefront Tools Common Utilities
================================================================================

Exports:
    - init_logger: Configure loguru sinks once per process

Usage:
    from storefront_tools.common import init_logger

    init_logger(level="DEBUG", log_file="logs/automation.log")

================================================================================
"""

from .log_setup import DEFAULT_LOG_FORMAT, init_logger

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
]
