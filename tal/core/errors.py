"""
Exception types raised by the TAL page strategy layer.

File system errors raised while reading device configuration are not wrapped;
callers receive the original OSError.
"""


class TALError(Exception):
    """Base exception for TAL errors."""
    pass


class DeserializationError(TALError, ValueError):
    """Exception raised when a device configuration is not valid JSON or has the wrong shape."""

    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.source = source


class StrategyNotFoundError(TALError, LookupError):
    """Exception raised when a page strategy store has no value for a strategy element."""

    def __init__(self, strategy_name: str, element_name: str, message: str = None):
        self.strategy_name = strategy_name
        self.element_name = element_name
        super().__init__(
            message or f"Page strategy element '{element_name}' not found for strategy '{strategy_name}'"
        )
