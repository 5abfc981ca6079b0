"""
Representations of a quotation.

Clients pick the representation with the ``Accept`` header.  Browsers
ask for ``text/html`` and get a small page; everything else (``curl``
sends ``*/*``, API clients send ``application/json`` or nothing at
all) gets JSON.
"""

import html
from typing import Optional

from fastapi.responses import HTMLResponse, JSONResponse, Response

from quotaday_api.app.schemas.quote import Quotation

HTML_MEDIA_TYPE = "text/html"
JSON_MEDIA_TYPE = "application/json"

# Media types this service knows how to answer.  Anything else in the
# Accept header is skipped.
_KNOWN_MEDIA_TYPES = {HTML_MEDIA_TYPE, JSON_MEDIA_TYPE, "*/*"}

_HTML_TEMPLATE = """
<!DOCTYPE html>
<html>
<body>

<q style=font-size:200%;font-family:cursive>{quote}</q>
<p><i>{author}</i></p>

</body>
</html>"""


def negotiate_media_type(accept: Optional[str]) -> str:
    """Return the media type to answer a request with ``accept`` header.

    HTML is chosen only when ``text/html`` is explicitly listed.
    Otherwise, including when the header is missing or lists nothing
    known, JSON is used.  Media type parameters such as ``q`` are
    ignored.
    """
    if not accept:
        return JSON_MEDIA_TYPE
    offered = set()
    for item in accept.split(","):
        media_type = item.split(";", 1)[0].strip().lower()
        if media_type in _KNOWN_MEDIA_TYPES:
            offered.add(media_type)
    if HTML_MEDIA_TYPE in offered:
        return HTML_MEDIA_TYPE
    return JSON_MEDIA_TYPE


def render_html(quote: Quotation) -> str:
    return _HTML_TEMPLATE.format(quote=html.escape(quote.text), author=html.escape(quote.author))


def render_quote(quote: Quotation, media_type: str, status_code: int = 200) -> Response:
    """Build the response carrying ``quote`` as ``media_type``."""
    if media_type == HTML_MEDIA_TYPE:
        return HTMLResponse(content=render_html(quote), status_code=status_code)
    return JSONResponse(content=quote.to_wire(), status_code=status_code)
