"""
Pydantic schema for quotations.

A quotation is an immutable ``(text, author)`` pair.  On the wire it
is a JSON object with capitalised keys::

    {"Quote": "Eat the frog first.", "Author": "Brian Tracy"}

Inside Python code the fields are called ``text`` and ``author``;
either spelling is accepted when building a ``Quotation`` in code.
Request bodies go through ``Quotation.from_wire``, which only knows
the wire keys.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Lower-cased wire key -> wire key.
_WIRE_KEYS = {"quote": "Quote", "author": "Author"}


class Quotation(BaseModel):
    """A single quotation and its author."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(..., alias="Quote", description="Text of the quotation")
    author: str = Field(..., alias="Author", description="Who said or wrote it")

    @classmethod
    def from_wire(cls, payload: Any) -> "Quotation":
        """Build a quotation from a decoded JSON request body.

        Keys are matched to ``Quote`` and ``Author`` ignoring case, so
        ``{"quote": ..., "AUTHOR": ...}`` is accepted.  Other keys,
        including the Python field name ``text``, are ignored.  Raises
        ``pydantic.ValidationError`` when ``payload`` is not an object or
        lacks either key.
        """
        if isinstance(payload, dict):
            payload = {
                _WIRE_KEYS[key.lower()]: value
                for key, value in payload.items()
                if key.lower() in _WIRE_KEYS
            }
        return cls.model_validate(payload)

    def to_wire(self) -> dict:
        """Return the JSON-ready form with the wire field names."""
        return self.model_dump(by_alias=True)
