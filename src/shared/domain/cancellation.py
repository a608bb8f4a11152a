"""Cooperative cancellation signal threaded from the caller to the store."""

from __future__ import annotations

import threading

from shared.domain.errors import OperationCancelled


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    Work checks the token at its suspension points (store reads and the
    commit step).  Once cancelled a token stays cancelled.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @classmethod
    def none(cls) -> CancellationToken:
        """A fresh token nobody holds a reference to cancel."""
        return cls()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelled("Operation was cancelled.")
