"""Pipeline behaviors applied by the mediator around every handler."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Mapping, Sequence

import structlog

from shared.domain.bus import NextStage
from shared.domain.cancellation import CancellationToken
from shared.domain.errors import ValidationFailed
from shared.domain.results import Err, Result

logger = structlog.get_logger(__name__)

Validator = Callable[[Any], List[str]]


class ValidationBehavior:
    """Runs every validator registered for the request's kind.

    All messages are collected, in registration order, before deciding.
    Any message short-circuits the pipeline with ``Err(ValidationFailed)``
    and the handler is never reached.  Request kinds without validators
    pass straight through.
    """

    def __init__(self, validators: Mapping[Enum, Sequence[Validator]]) -> None:
        self._validators = validators

    def __call__(
        self, request: Any, next_stage: NextStage, cancellation: CancellationToken
    ) -> Result:
        errors: List[str] = []
        for validator in self._validators.get(request.kind, ()):
            errors.extend(validator(request))

        if errors:
            logger.warning(
                "mediator.validation_failed",
                kind=str(request.kind),
                errors=errors,
            )
            return Err(ValidationFailed(tuple(errors)))

        return next_stage(request, cancellation)
