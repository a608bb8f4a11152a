"""Request bus interfaces for in-process command/query dispatch."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ClassVar, Generic, Optional, Protocol, TypeVar

from shared.domain.cancellation import CancellationToken
from shared.domain.results import Result

R = TypeVar("R", contravariant=True)


class Request(Protocol):
    """Anything the mediator can route.

    ``kind`` is the explicit discriminator used for handler lookup.
    """

    kind: ClassVar[Enum]


class IRequestHandler(Protocol, Generic[R]):
    """Handler interface: one handler per request kind."""

    def handle(self, request: R, cancellation: CancellationToken) -> Result: ...


# Stage of the pipeline: the handler itself or a behavior wrapping it.
NextStage = Callable[[Any, CancellationToken], Result]

# Cross-cutting step wrapping the rest of the pipeline (onion model).
PipelineBehavior = Callable[[Any, NextStage, CancellationToken], Result]

# Builds a handler bound to the unit-of-work store of the current request.
HandlerFactory = Callable[[Any], IRequestHandler]


class IMediator(Protocol):
    """Mediator interface."""

    def send(
        self, request: Request, cancellation: Optional[CancellationToken] = None
    ) -> Result: ...
