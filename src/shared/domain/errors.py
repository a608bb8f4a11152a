"""Error taxonomy for request dispatch.

- ``ValidationFailed`` and ``NotFound`` are expected outcomes.  They are
  returned inside ``Err`` and the transport layer maps them to 400/404.
- ``NoHandlerRegistered``, ``StoreFailure`` and ``OperationCancelled``
  are raised.  They signal wiring defects or infrastructure problems and
  are never converted into result values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class ValidationFailed:
    """Request fields violate one or more rules; ``errors`` keeps rule order."""

    errors: Tuple[str, ...]

    def __str__(self) -> str:
        return "; ".join(self.errors)


@dataclass(frozen=True)
class NotFound:
    """A write targeted an entity id that does not exist."""

    id: int
    entity: str = "Product"

    def __str__(self) -> str:
        return f"{self.entity} with ID {self.id} not found."


class NoHandlerRegistered(Exception):
    """Zero or several handlers are registered for a request kind."""

    def __init__(self, kind: Any, count: int) -> None:
        self.kind = kind
        self.count = count
        super().__init__(
            f"Expected exactly one handler for {kind!s}, found {count}."
        )


class StoreFailure(Exception):
    """The underlying storage operation failed; nothing was persisted."""


class OperationCancelled(Exception):
    """The caller cancelled the operation before it could complete."""
