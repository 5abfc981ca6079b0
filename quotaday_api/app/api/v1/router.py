"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import quotes

router = APIRouter()

# Singular: existing clients call ``/quote``.
router.include_router(quotes.router, prefix="/quote", tags=["quotes"])
