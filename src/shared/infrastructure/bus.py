"""In-memory request mediator.

Handlers are looked up through an explicit ``kind -> factories`` table
filled once at start-up (see ``modules.products.apps``).  A new
``Mediator`` is built for each unit of work so every handler it
creates shares that unit of work's store and nothing else.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import structlog

from shared.domain.bus import (
    HandlerFactory,
    IMediator,
    IRequestHandler,
    NextStage,
    PipelineBehavior,
    Request,
)
from shared.domain.cancellation import CancellationToken
from shared.domain.errors import NoHandlerRegistered
from shared.domain.results import Result

logger = structlog.get_logger(__name__)


class HandlerRegistry:
    """Maps a request kind to the factory building its handler."""

    def __init__(self) -> None:
        self._factories: Dict[Enum, List[HandlerFactory]] = {}

    def register(self, kind: Enum, factory: HandlerFactory) -> None:
        factories = self._factories.setdefault(kind, [])
        if factory not in factories:
            factories.append(factory)

    def resolve(self, kind: Enum, store: Any) -> IRequestHandler:
        """Build the single handler for ``kind``.

        Raises:
            NoHandlerRegistered: if zero or several factories are registered.
        """
        factories = self._factories.get(kind, [])
        if len(factories) != 1:
            logger.error(
                "mediator.handler_resolution_failed",
                kind=str(kind),
                handlers=len(factories),
            )
            raise NoHandlerRegistered(kind, len(factories))
        return factories[0](store)

    def __contains__(self, kind: Enum) -> bool:
        return bool(self._factories.get(kind))


def _wrap(behavior: PipelineBehavior, next_stage: NextStage) -> NextStage:
    def stage(request: Any, cancellation: CancellationToken) -> Result:
        return behavior(request, next_stage, cancellation)

    return stage


class Mediator(IMediator):
    """Routes a request through the behaviors to its handler.

    ``behaviors`` are applied in order, the first one being the outermost
    layer: it runs before every other behavior and sees the final result.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        store: Any,
        behaviors: Sequence[PipelineBehavior] = (),
    ) -> None:
        self._registry = registry
        self._store = store
        self._behaviors = tuple(behaviors)

    def send(
        self, request: Request, cancellation: Optional[CancellationToken] = None
    ) -> Result:
        token = cancellation if cancellation is not None else CancellationToken.none()
        handler = self._registry.resolve(request.kind, self._store)

        pipeline: NextStage = handler.handle
        for behavior in reversed(self._behaviors):
            pipeline = _wrap(behavior, pipeline)

        log = logger.bind(kind=str(request.kind))
        log.debug("mediator.request_dispatched")
        result = pipeline(request, token)
        log.debug("mediator.request_completed", ok=result.is_ok)
        return result


# Global registry instance (populated by AppConfig.ready)

handler_registry = HandlerRegistry()
