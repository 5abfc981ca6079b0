"""
Shared dependencies for API endpoints.

The QuoteBook belongs to the application instance that created it
(``app.state.quote_book``), so each app, and each test, gets its own
store.
"""

from fastapi import Request

from quotaday_api.app.services.quote_book import QuoteBook


def get_quote_book(request: Request) -> QuoteBook:
    """Return the QuoteBook owned by the application serving ``request``."""
    return request.app.state.quote_book
