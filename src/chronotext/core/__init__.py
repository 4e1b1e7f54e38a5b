"""Core modules for ChronoText.

Configuration, error handling and logging shared by the processors and the
command line entry point.
"""

from .config_manager import ConfigManager, RecognizerConfig, ResolutionConfig
from .error_handler import (
    ChronoTextError,
    ConfigurationError,
    CultureResourceError,
    ParseError,
    ErrorHandler,
    ErrorSeverity
)
from .logging_manager import LoggingManager

__all__ = [
    "ConfigManager",
    "RecognizerConfig",
    "ResolutionConfig",
    "ChronoTextError",
    "ConfigurationError",
    "CultureResourceError",
    "ParseError",
    "ErrorHandler",
    "ErrorSeverity",
    "LoggingManager"
]
