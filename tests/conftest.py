"""Shared fixtures for the test suite."""

import random

import pytest
from fastapi.testclient import TestClient

from quotaday_api.app.core.config import Settings
from quotaday_api.app.main import create_app
from quotaday_api.app.services.quote_book import QuoteBook


@pytest.fixture
def book():
    """Empty QuoteBook with the default capacity and a fixed seed."""
    return QuoteBook(rng=random.Random(1234))


@pytest.fixture
def seeded_book(book):
    book.seed_examples()
    return book


@pytest.fixture
def settings():
    return Settings(max_quotes=20, seed_examples=True, git_commit="")


@pytest.fixture
def client(settings):
    """TestClient over a fresh app seeded with the example quotations."""
    return TestClient(create_app(settings))


@pytest.fixture
def empty_client(settings):
    """TestClient over a fresh app whose QuoteBook starts empty."""
    return TestClient(create_app(settings, quote_book=QuoteBook(capacity=settings.max_quotes)))
