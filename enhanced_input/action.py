"""Actions: high-level user intents bound to inputs, with their state and timing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, ClassVar, Optional

from .value import ActionValue, ActionValueDim, Vec2, Vec3

logger = logging.getLogger(__name__)

_OUTPUT_DIMS = {
    bool: ActionValueDim.BOOL,
    float: ActionValueDim.AXIS1D,
    Vec2: ActionValueDim.AXIS2D,
    Vec3: ActionValueDim.AXIS3D,
}


def output_dim(output: Any) -> ActionValueDim:
    """Returns the value dimension for an action output type.

    Accepts ``bool``, ``float``, the ``Vec2``/``Vec3`` tuple aliases, or an
    :class:`ActionValueDim` member.
    """
    if isinstance(output, ActionValueDim):
        return output
    try:
        return _OUTPUT_DIMS[output]
    except (KeyError, TypeError):
        raise TypeError(f"unsupported action output type: {output!r}") from None


class InputAction:
    """Base for action types; subclasses declare what value they output.

    Declare the output with ``class Jump(InputAction, output=bool)`` or with the
    :func:`input_action` decorator.
    """

    output: ClassVar[Any] = None

    def __init_subclass__(cls, output: Any = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if output is not None:
            output_dim(output)
            cls.output = output


def input_action(output: Any) -> Callable[[type], type]:
    """Class decorator that makes a class an action with the given output type."""
    output_dim(output)

    def decorate(cls: type) -> type:
        if issubclass(cls, InputAction):
            cls.output = output
            return cls
        namespace = {
            "output": output,
            "__module__": cls.__module__,
            "__qualname__": cls.__qualname__,
            "__doc__": cls.__doc__,
        }
        return type(cls.__name__, (cls, InputAction), namespace)

    return decorate


class TriggerState(IntEnum):
    """State of an action, ordered by significance."""

    NONE = 0
    ONGOING = 1
    FIRED = 2


class Accumulation(Enum):
    """How values from several inputs with the same state are combined."""

    CUMULATIVE = "cumulative"
    MAX_ABS = "max_abs"


@dataclass
class ActionSettings:
    """Behavior configuration for an action."""

    accumulation: Accumulation = Accumulation.CUMULATIVE
    require_reset: bool = False
    consume_input: bool = False


@dataclass
class ActionTime:
    """Time spent in the ongoing/fired states and in the fired state alone."""

    elapsed_secs: float = 0.0
    fired_secs: float = 0.0

    def update(self, delta_secs: float, state: TriggerState) -> None:
        """Advances the timers by ``delta_secs`` according to ``state``."""
        if state is TriggerState.NONE:
            self.elapsed_secs = 0.0
            self.fired_secs = 0.0
        elif state is TriggerState.ONGOING:
            self.elapsed_secs += delta_secs
            self.fired_secs = 0.0
        else:
            self.elapsed_secs += delta_secs
            self.fired_secs += delta_secs


def _typed(value: ActionValue, dim: ActionValueDim) -> Any:
    if dim is ActionValueDim.BOOL:
        return value.as_bool()
    if dim is ActionValueDim.AXIS1D:
        return value.as_axis1d()
    if dim is ActionValueDim.AXIS2D:
        return value.as_axis2d()
    return value.as_axis3d()


@dataclass(eq=False)
class Action:
    """A user action of a given :class:`InputAction` type and its current data."""

    action_type: type
    value: Any = None
    settings: ActionSettings = field(default_factory=ActionSettings)
    state: TriggerState = TriggerState.NONE
    time: ActionTime = field(default_factory=ActionTime)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not (isinstance(self.action_type, type) and issubclass(self.action_type, InputAction)):
            raise TypeError(f"{self.action_type!r} is not an input action")
        if self.action_type.output is None:
            raise TypeError(f"action `{self.action_type.__qualname__}` has no output type")
        dim = self.dim
        if self.value is None:
            self.value = _typed(ActionValue.zero(dim), dim)
        else:
            self.value = _typed(ActionValue.of(self.value), dim)
        if self.name is None:
            self.name = self.action_type.__qualname__

    @property
    def dim(self) -> ActionValueDim:
        """Dimension of this action's output."""
        return output_dim(self.action_type.output)

    def output(self) -> Any:
        """Returns the current value in the action's output type."""
        return self.value

    def store_value(self, value: Any) -> None:
        """Stores a value, converting it to the output type and warning on mismatch."""
        action_value = ActionValue.of(value)
        got = action_value.dim()
        expected = self.dim
        if got is not expected:
            logger.warning(
                "action `%s` expects `%s`, but got `%s`",
                self.name,
                expected.name,
                got.name,
            )
        self.value = _typed(action_value, expected)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self.action_type is other.action_type and self.value == other.value

    __hash__ = None  # type: ignore[assignment]