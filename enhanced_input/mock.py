"""Mocking actions: reporting a state and value without physical input."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Optional, Union

from .action import TriggerState
from .relationship import Actions
from .value import ActionValue

_MAX_UPDATES = 2**32 - 1


class MockSpanKind(Enum):
    """How the length of a mock is measured."""

    UPDATES = "updates"
    DURATION = "duration"
    MANUAL = "manual"


@dataclass(frozen=True)
class MockSpan:
    """How long an :class:`ActionMock` stays active.

    ``limit`` is the number of context evaluations for ``UPDATES``, seconds of
    real time for ``DURATION`` and None for ``MANUAL``.
    """

    kind: MockSpanKind
    limit: Optional[Union[int, float]] = None

    def __post_init__(self) -> None:
        if self.kind is MockSpanKind.MANUAL:
            if self.limit is not None:
                raise ValueError("a manual span takes no limit")
        elif self.kind is MockSpanKind.UPDATES:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise TypeError(f"update count must be an int, got {self.limit!r}")
            if not 0 <= self.limit <= _MAX_UPDATES:
                raise ValueError(f"update count out of range: {self.limit}")
        else:
            if isinstance(self.limit, bool) or not isinstance(self.limit, (int, float)):
                raise TypeError(f"duration must be a number of seconds, got {self.limit!r}")
            if self.limit < 0:
                raise ValueError(f"duration can't be negative: {self.limit}")
            object.__setattr__(self, "limit", float(self.limit))

    @classmethod
    def once(cls) -> MockSpan:
        """Active for a single context evaluation."""
        return cls.updates(1)

    @classmethod
    def updates(cls, count: int) -> MockSpan:
        """Active for a fixed number of context evaluations."""
        return cls(MockSpanKind.UPDATES, count)

    @classmethod
    def duration(cls, seconds: Union[float, timedelta]) -> MockSpan:
        """Active for a span of real time."""
        if isinstance(seconds, timedelta):
            seconds = seconds.total_seconds()
        return cls(MockSpanKind.DURATION, seconds)

    @classmethod
    def manual(cls) -> MockSpan:
        """Active until the mock is disabled by hand."""
        return cls(MockSpanKind.MANUAL)


def _to_span(span: Any) -> MockSpan:
    if isinstance(span, MockSpan):
        return span
    if isinstance(span, timedelta):
        return MockSpan.duration(span)
    raise TypeError(f"{span!r} can't be converted into a mock span")


@dataclass
class ActionMock:
    """Overrides an action's state and value for a span.

    While enabled, input reading, conditions and modifiers are skipped and the
    action reports ``state`` and ``value``. When the span expires ``enabled``
    is set to False so the mock can be reused.
    """

    state: TriggerState
    value: Any
    span: Any = field(default_factory=MockSpan.manual)
    enabled: bool = True

    def __post_init__(self) -> None:
        self.state = TriggerState(self.state)
        self.value = ActionValue.of(self.value)
        self.span = _to_span(self.span)

    @classmethod
    def once(cls, state: TriggerState, value: Any) -> ActionMock:
        """Mocks the action for a single update."""
        return cls(state, value, MockSpan.once())

    @classmethod
    def disabled(cls) -> ActionMock:
        """Returns an inactive mock holding placeholder values."""
        return cls(TriggerState.NONE, False, MockSpan.manual(), enabled=False)


def _name(target: Any) -> str:
    return target.__qualname__ if isinstance(target, type) else repr(target)


def mock(
    actions: Actions, action_type: type, state: TriggerState, value: Any, span: Any
) -> ActionMock:
    """Attaches an :class:`ActionMock` to the first action of ``action_type``.

    Raises LookupError if the context has no such action.
    """
    if not isinstance(actions, Actions):
        raise TypeError(f"expected Actions, got {actions!r}")
    action_mock = ActionMock(state, value, span)
    action = actions.find(action_type)
    if action is None:
        context = _name(actions.context)
        raise LookupError(
            f"context `{context}` has no `Action<{_name(action_type)}>` "
            f"in its `Actions<{context}>`"
        )
    actions.insert(action, action_mock)
    return action_mock


def mock_once(actions: Actions, action_type: type, state: TriggerState, value: Any) -> ActionMock:
    """Like :func:`mock`, but for a single update."""
    return mock(actions, action_type, state, value, MockSpan.once())