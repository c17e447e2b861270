"""Input conditions decide when an action is triggered."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from .action import TriggerState
from .value import ActionValue

DEFAULT_ACTUATION = 0.5
"""Default actuation threshold for all conditions."""


class ConditionKind(Enum):
    """How a condition contributes to the final trigger state."""

    EXPLICIT = "explicit"
    """The most significant state of all explicit conditions wins."""
    IMPLICIT = "implicit"
    """Fired only if all implicit conditions fire; otherwise capped at ongoing."""
    BLOCKER = "blocker"
    """Returning no state overrides the result with no state."""


class InputCondition(ABC):
    """Analyzes input values and produces a trigger state.

    Can be attached both to bindings and actions.
    """

    @abstractmethod
    def evaluate(self, actions: Any, time: Any, value: ActionValue) -> TriggerState:
        """Returns the state for ``value``; ``actions`` are the context's other actions."""

    def kind(self) -> ConditionKind:
        """Returns how this condition is combined with others."""
        return ConditionKind.EXPLICIT