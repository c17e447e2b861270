"""Action events produced by trigger state transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag
from typing import Any, Hashable

from .action import TriggerState


class ActionEvents(Flag):
    """Set of events caused by a transition between two trigger states.

    | Last state | New state | Events           |
    | ---------- | --------- | ---------------- |
    | NONE       | NONE      | none             |
    | NONE       | ONGOING   | START + ONGOING  |
    | NONE       | FIRED     | START + FIRE     |
    | ONGOING    | NONE      | CANCEL           |
    | ONGOING    | ONGOING   | ONGOING          |
    | ONGOING    | FIRED     | FIRE             |
    | FIRED      | FIRED     | FIRE             |
    | FIRED      | ONGOING   | ONGOING          |
    | FIRED      | NONE      | COMPLETE         |
    """

    START = 0b00001
    ONGOING = 0b00010
    FIRE = 0b00100
    CANCEL = 0b01000
    COMPLETE = 0b10000

    @classmethod
    def from_transition(cls, previous: TriggerState, current: TriggerState) -> ActionEvents:
        """Returns the events for a transition from ``previous`` to ``current``."""
        return _TRANSITIONS[(TriggerState(previous), TriggerState(current))]

    def named(self) -> list:
        """Returns the single flags contained in this set, in declaration order."""
        return [flag for flag in type(self) if flag in self]


_TRANSITIONS = {
    (TriggerState.NONE, TriggerState.NONE): ActionEvents(0),
    (TriggerState.NONE, TriggerState.ONGOING): ActionEvents.START | ActionEvents.ONGOING,
    (TriggerState.NONE, TriggerState.FIRED): ActionEvents.START | ActionEvents.FIRE,
    (TriggerState.ONGOING, TriggerState.NONE): ActionEvents.CANCEL,
    (TriggerState.ONGOING, TriggerState.ONGOING): ActionEvents.ONGOING,
    (TriggerState.ONGOING, TriggerState.FIRED): ActionEvents.FIRE,
    (TriggerState.FIRED, TriggerState.NONE): ActionEvents.COMPLETE,
    (TriggerState.FIRED, TriggerState.ONGOING): ActionEvents.ONGOING,
    (TriggerState.FIRED, TriggerState.FIRED): ActionEvents.FIRE,
}


@dataclass(frozen=True)
class Start:
    """The action switched from no state to ongoing or fired."""

    action_type: type
    context: Hashable
    action: Hashable
    value: Any
    state: TriggerState


@dataclass(frozen=True)
class Ongoing:
    """The action is in the ongoing state this update."""

    action_type: type
    context: Hashable
    action: Hashable
    value: Any
    state: TriggerState
    elapsed_secs: float = 0.0


@dataclass(frozen=True)
class Fire:
    """The action is in the fired state this update."""

    action_type: type
    context: Hashable
    action: Hashable
    value: Any
    state: TriggerState
    fired_secs: float = 0.0
    elapsed_secs: float = 0.0


@dataclass(frozen=True)
class Cancel:
    """The action switched from ongoing to no state."""

    action_type: type
    context: Hashable
    action: Hashable
    value: Any
    state: TriggerState
    elapsed_secs: float = 0.0


@dataclass(frozen=True)
class Complete:
    """The action switched from fired to no state."""

    action_type: type
    context: Hashable
    action: Hashable
    value: Any
    state: TriggerState
    fired_secs: float = 0.0
    elapsed_secs: float = 0.0