"""
Error types raised by the quote store.

The QuoteBook errors are recoverable: the store raises them to report
why an operation could not be served, and the API layer turns each one
into an HTTP response.  None of them should ever terminate the server.
``ConfigurationError`` is raised at startup for bad settings.
"""


class QuoteBookError(Exception):
    """Base class for recoverable QuoteBook errors."""


class QuoteBookEmpty(QuoteBookError):
    """Raised when reading from a QuoteBook that holds no quotations."""

    def __init__(self) -> None:
        super().__init__("empty QuoteBook")


class QuoteIndexOutOfRange(QuoteBookError):
    """Raised when the requested index is not a position in the QuoteBook."""

    def __init__(self, index: int) -> None:
        super().__init__(f"id {index} out of bounds")
        self.index = index


class QuoteBookFull(QuoteBookError):
    """Raised when adding to a QuoteBook that has reached its capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__("QuoteBook is full")
        self.capacity = capacity


class ConfigurationError(ValueError):
    """Raised when a configuration value is missing or malformed."""
