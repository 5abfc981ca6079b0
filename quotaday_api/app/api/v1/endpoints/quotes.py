"""
Quotation endpoints for API v1.

``GET`` returns a random quotation, or the one at a given position
when ``id`` is supplied, as JSON or HTML depending on the ``Accept``
header.  ``POST`` adds a quotation to the application's QuoteBook and
echoes it back.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from quotaday_api.app.api.deps import get_quote_book
from quotaday_api.app.core.errors import QuoteBookError, QuoteBookFull
from quotaday_api.app.schemas.quote import Quotation
from quotaday_api.app.services.quote_book import QuoteBook
from quotaday_api.app.services.rendering import negotiate_media_type, render_quote

router = APIRouter()

logger = logging.getLogger(__name__)


def _http_error(exc: QuoteBookError) -> HTTPException:
    """Translate a store error into the matching HTTP error."""
    if isinstance(exc, QuoteBookFull):
        return HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("", responses={400: {"description": "Empty QuoteBook or id out of bounds"}})
async def get_quote(
    request: Request,
    quote_id: Optional[int] = Query(None, alias="id", description="Position of the quotation in the book"),
    book: QuoteBook = Depends(get_quote_book),
) -> Response:
    """Return a quotation.

    Without ``id`` a quotation is picked at random.  Returns HTTP 400
    if the book is empty or ``id`` is not a position in it.
    """
    try:
        quote = book.random() if quote_id is None else book.get(quote_id)
    except QuoteBookError as exc:
        raise _http_error(exc)
    return render_quote(quote, negotiate_media_type(request.headers.get("accept")))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid body"}, 507: {"description": "QuoteBook is full"}},
)
async def post_quote(request: Request, book: QuoteBook = Depends(get_quote_book)) -> JSONResponse:
    """Add a quotation and echo it back.

    The body must be a JSON object with ``Quote`` and ``Author``
    strings; key case is ignored.  Returns HTTP 507 once the book has
    reached its capacity.
    """
    body = await request.body()
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        # Deeply nested bodies raise RecursionError from the decoder.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="could not read request body")
    try:
        quote = Quotation.from_wire(payload)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid quote format")

    try:
        stored = book.add(quote)
    except QuoteBookError as exc:
        raise _http_error(exc)
    logger.info("Stored quotation by %s", stored.author)
    return JSONResponse(content=stored.to_wire(), status_code=status.HTTP_201_CREATED)
