"""Error Handling for ChronoText

Exception hierarchy and a small error handler that logs by severity and
dispatches registered callbacks. Malformed input text never raises; these
errors signal configuration or culture resource bugs.
"""

from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Type, TypeVar

from .logging_manager import LoggingManager

K = TypeVar("K")
V = TypeVar("V")


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ChronoTextError(Exception):
    """Base exception class for ChronoText."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM):
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class ConfigurationError(ChronoTextError):
    """Error raised when configuration is invalid."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.HIGH):
        super().__init__(message, severity)


class CultureResourceError(ConfigurationError):
    """Error raised when a culture resource table lacks a required entry."""

    def __init__(self, table: str, key: str):
        self.table = table
        self.key = key
        super().__init__(f"Culture table '{table}' has no entry for '{key}'", ErrorSeverity.CRITICAL)


class ParseError(ChronoTextError):
    """Error raised when caller supplied values cannot be interpreted."""
    pass


def lookup(table: Mapping[K, V], key: K, table_name: str) -> V:
    """Read a culture table entry that a matched regex guarantees to exist.

    Raises:
        CultureResourceError: the regex and the table disagree
    """
    try:
        return table[key]
    except KeyError:
        raise CultureResourceError(table_name, str(key)) from None


class ErrorHandler:
    """Error handler for command line and embedding applications."""

    def __init__(self):
        """Initialize error handler."""
        self.logger = LoggingManager.get_logger(__name__)
        self.error_callbacks: Dict[Type[Exception], Callable[[Exception], None]] = {}

    def register_error_callback(self, exception_type: Type[Exception],
                                callback: Callable[[Exception], None]):
        """Register a callback for specific exception types.

        Args:
            exception_type: The exception type to handle
            callback: Function to call when this exception occurs
        """
        self.error_callbacks[exception_type] = callback

    def handle_error(self, error: Exception, context: Optional[str] = None) -> ErrorSeverity:
        """Log an error and run the callback registered for its type.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            The severity the error was handled with
        """
        severity = self._get_error_severity(error)
        message = str(error)
        if context:
            message = f"{context}: {message}"

        log_methods = {
            ErrorSeverity.LOW: self.logger.info,
            ErrorSeverity.MEDIUM: self.logger.warning,
            ErrorSeverity.HIGH: self.logger.error,
            ErrorSeverity.CRITICAL: self.logger.critical,
        }
        log_methods[severity](message)

        for error_type in type(error).__mro__:
            if error_type in self.error_callbacks:
                self.error_callbacks[error_type](error)
                break

        return severity

    def _get_error_severity(self, error: Exception) -> ErrorSeverity:
        """Determine error severity based on exception type."""
        if isinstance(error, ChronoTextError):
            return error.severity

        # Mapping standard exceptions to severity levels
        severity_map = {
            FileNotFoundError: ErrorSeverity.MEDIUM,
            PermissionError: ErrorSeverity.HIGH,
            ValueError: ErrorSeverity.MEDIUM,
            MemoryError: ErrorSeverity.CRITICAL,
            KeyboardInterrupt: ErrorSeverity.LOW,
        }

        return severity_map.get(type(error), ErrorSeverity.MEDIUM)
