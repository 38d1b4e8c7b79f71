"""
Ferris Discord Bot - Core Package
=================================

Core components shared by every other package: configuration and
logging.

DESIGN:
    Core modules are singletons or global instances so state stays
    consistent across the application:
    - get_config() returns the same Config instance
    - logger is a global TreeLogger instance

Author: حَـــــنَّـــــا
"""

# =============================================================================
# Core Imports
# =============================================================================

from .config import (
    Config,
    ConfigValidationError,
    get_config,
    load_config,
    validate_and_log_config,
)

from .logger import logger, TreeLogger


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    # Config
    "Config",
    "ConfigValidationError",
    "get_config",
    "load_config",
    "validate_and_log_config",
    # Logger
    "logger",
    "TreeLogger",
]
