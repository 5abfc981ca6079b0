"""
In-memory store of quotations.

``QuoteBook`` keeps an ordered, append-only list of quotations bounded
by a fixed capacity.  A quotation is identified by its position in the
book; positions never change once assigned, because the book only ever
appends.

All operations, reads included, run under one lock for the whole book.
Every operation is a constant-time list access, so the lock is only
held for a moment and a reader never sees a half-finished append.
Concurrent ``add`` calls never lose an accepted quotation and never
accept one past capacity.

Errors are reported with the exceptions from
:mod:`quotaday_api.app.core.errors`, which callers are expected to
handle.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import List, Optional

from quotaday_api.app.core.errors import QuoteBookEmpty, QuoteBookFull, QuoteIndexOutOfRange
from quotaday_api.app.schemas.quote import Quotation

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20

EXAMPLE_QUOTATIONS = (
    Quotation(text="Start before you are ready. Don't prepare, begin.", author="Mel Robbins"),
    Quotation(text="Eat the frog first.", author="Brian Tracy"),
    Quotation(text="Imperfect action beats perfect inaction.", author="Harry S. Truman"),
    Quotation(text="Succeed or survive (but try).", author="Mel Robbins"),
    Quotation(
        text="Be responsible for telling people the truth, not managing people's reactions to it.",
        author="Mel Robbins",
    ),
    Quotation(text="Today's favor is tomorrow's expectation.", author="Mel Robbins"),
)


class QuoteBook:
    """Bounded, thread-safe, ordered collection of quotations."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, rng: Optional[random.Random] = None) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._rng = rng or random.Random()
        self._quotes: List[Quotation] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._quotes)

    def is_full(self) -> bool:
        with self._lock:
            return len(self._quotes) >= self._capacity

    def seed_examples(self) -> None:
        """Replace the contents of the book with the built-in examples.

        Anything stored before is discarded.  If the book is smaller
        than the example set, only the first ``capacity`` examples are
        kept.
        """
        with self._lock:
            self._quotes = list(EXAMPLE_QUOTATIONS[: self._capacity])
            count = len(self._quotes)
        logger.info("QuoteBook seeded with %d example quotations", count)

    def add(self, quote: Quotation) -> Quotation:
        """Append ``quote`` and return the stored copy.

        Raises
        ------
        QuoteBookFull
            If the book already holds ``capacity`` quotations.  The book
            is left unchanged.
        """
        stored = quote.model_copy()
        with self._lock:
            full = len(self._quotes) >= self._capacity
            if not full:
                self._quotes.append(stored)
                index = len(self._quotes) - 1
        if full:
            logger.warning("QuoteBook is full (%d), rejecting quotation", self._capacity)
            raise QuoteBookFull(self._capacity)
        logger.debug("Added quotation %d by %s", index, stored.author)
        return stored.model_copy()

    def get(self, index: int) -> Quotation:
        """Return a copy of the quotation at position ``index``.

        Raises
        ------
        QuoteBookEmpty
            If the book holds no quotations, whatever the index.
        QuoteIndexOutOfRange
            If ``index`` is negative or not smaller than the size.
        """
        with self._lock:
            if not self._quotes:
                raise QuoteBookEmpty()
            if index < 0 or index >= len(self._quotes):
                raise QuoteIndexOutOfRange(index)
            return self._quotes[index].model_copy()

    def random(self) -> Quotation:
        """Return a copy of a quotation picked uniformly at random.

        Raises
        ------
        QuoteBookEmpty
            If the book holds no quotations.
        """
        with self._lock:
            if not self._quotes:
                raise QuoteBookEmpty()
            index = self._rng.randrange(len(self._quotes))
            return self._quotes[index].model_copy()
