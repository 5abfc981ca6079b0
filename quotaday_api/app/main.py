"""
Main entrypoint for the Quotaday API.

This module assembles the FastAPI application, sets up logging,
creates the QuoteBook the application owns and includes the versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn quotaday_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from quotaday_api import __version__

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import QuoteBookEmpty
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware
from .services.quote_book import QuoteBook
from .services.rendering import render_html

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, quote_book: Optional[QuoteBook] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment.
    quote_book : Optional[QuoteBook]
        Store to serve.  When omitted, a new QuoteBook with capacity
        ``settings.max_quotes`` is created and, if
        ``settings.seed_examples`` is set, seeded with the built-in
        examples.  A store passed in is used as is.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=__version__)

    if quote_book is None:
        quote_book = QuoteBook(capacity=settings.max_quotes)
        if settings.seed_examples:
            quote_book.seed_examples()
    app.state.settings = settings
    app.state.quote_book = quote_book

    app.add_middleware(RequestLoggingMiddleware)

    # The quote routes are served both under /api/v1 and at the root,
    # where clients of the plain ``/quote`` path expect them.
    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(v1_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed query parameters are client errors like any other bad request.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index(request: Request) -> HTMLResponse:
        """Landing page showing a random quotation."""
        book: QuoteBook = request.app.state.quote_book
        try:
            quote = book.random()
        except QuoteBookEmpty as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
        return HTMLResponse(content=render_html(quote))

    logger.debug("Application created with a QuoteBook of capacity %d", quote_book.capacity)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
