"""Unit tests for ValidationBehavior."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar
from unittest.mock import MagicMock

import pytest

from shared.domain.cancellation import CancellationToken
from shared.domain.errors import ValidationFailed
from shared.domain.results import Err, Ok
from shared.infrastructure.behaviors import ValidationBehavior

pytestmark = pytest.mark.unit


class Kind(Enum):
    GUARDED = "guarded"
    OPEN = "open"


@dataclass(frozen=True)
class Guarded:
    value: int
    kind: ClassVar[Kind] = Kind.GUARDED


@dataclass(frozen=True)
class Open:
    kind: ClassVar[Kind] = Kind.OPEN


def must_be_positive(request):
    return [] if request.value > 0 else ["value must be positive"]


def must_be_even(request):
    return [] if request.value % 2 == 0 else ["value must be even"]


@pytest.fixture()
def next_stage():
    return MagicMock(return_value=Ok("handled"))


@pytest.fixture()
def behavior():
    return ValidationBehavior({Kind.GUARDED: [must_be_positive, must_be_even]})


class TestValidationBehavior:
    def test_valid_request_reaches_next_stage(self, behavior, next_stage):
        token = CancellationToken()
        request = Guarded(value=4)

        result = behavior(request, next_stage, token)

        assert result == Ok("handled")
        next_stage.assert_called_once_with(request, token)

    def test_collects_every_message_in_order(self, behavior, next_stage):
        result = behavior(Guarded(value=-3), next_stage, CancellationToken())

        assert result == Err(
            ValidationFailed(("value must be positive", "value must be even"))
        )
        next_stage.assert_not_called()

    def test_single_violation(self, behavior, next_stage):
        result = behavior(Guarded(value=3), next_stage, CancellationToken())

        assert result.is_err
        assert result.error.errors == ("value must be even",)
        next_stage.assert_not_called()

    def test_kind_without_validators_passes_through(self, behavior, next_stage):
        result = behavior(Open(), next_stage, CancellationToken())

        assert result == Ok("handled")
        next_stage.assert_called_once()

    def test_validation_failed_str_joins_messages(self):
        error = ValidationFailed(("a", "b"))
        assert str(error) == "a; b"
