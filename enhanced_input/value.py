"""Dynamically typed action values and their dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Tuple, Union

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
RawValue = Union[bool, float, Vec2, Vec3]


class ActionValueDim(IntEnum):
    """Dimension of an :class:`ActionValue`, ordered from smallest to largest."""

    BOOL = 0
    AXIS1D = 1
    AXIS2D = 2
    AXIS3D = 3


@dataclass(frozen=True, eq=False)
class ActionValue:
    """An action value: a bool, a 1D axis, or a 2D/3D vector given as a tuple."""

    value: RawValue

    def __post_init__(self) -> None:
        raw = self.value
        if isinstance(raw, bool):
            return
        if isinstance(raw, (int, float)):
            object.__setattr__(self, "value", float(raw))
            return
        if isinstance(raw, (tuple, list)) and len(raw) in (2, 3):
            object.__setattr__(self, "value", tuple(float(c) for c in raw))
            return
        raise TypeError(f"unsupported action value: {raw!r}")

    @classmethod
    def zero(cls, dim: ActionValueDim) -> ActionValue:
        """Returns a zero-initialized value of the given dimension."""
        if dim is ActionValueDim.BOOL:
            return cls(False)
        if dim is ActionValueDim.AXIS1D:
            return cls(0.0)
        if dim is ActionValueDim.AXIS2D:
            return cls((0.0, 0.0))
        return cls((0.0, 0.0, 0.0))

    @classmethod
    def of(cls, value: Any) -> ActionValue:
        """Wraps a bool, number or 2/3-tuple; an existing value is returned as is."""
        if isinstance(value, ActionValue):
            return value
        return cls(value)

    def dim(self) -> ActionValueDim:
        """Returns the dimension of this value."""
        raw = self.value
        if isinstance(raw, bool):
            return ActionValueDim.BOOL
        if isinstance(raw, float):
            return ActionValueDim.AXIS1D
        if len(raw) == 2:
            return ActionValueDim.AXIS2D
        return ActionValueDim.AXIS3D

    def convert(self, dim: ActionValueDim) -> ActionValue:
        """Converts to another dimension, zero-filling or discarding axes."""
        if dim is ActionValueDim.BOOL:
            return ActionValue(self.as_bool())
        if dim is ActionValueDim.AXIS1D:
            return ActionValue(self.as_axis1d())
        if dim is ActionValueDim.AXIS2D:
            return ActionValue(self.as_axis2d())
        return ActionValue(self.as_axis3d())

    def is_actuated(self, actuation: float) -> bool:
        """Returns True if the value's magnitude reaches ``actuation``."""
        length_squared = sum(c * c for c in self.as_axis3d())
        return length_squared >= actuation * actuation

    def as_bool(self) -> bool:
        """Returns the value as a bool: non-zero values are True."""
        raw = self.value
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, float):
            return raw != 0.0
        return any(c != 0.0 for c in raw)

    def as_axis1d(self) -> float:
        """Returns the value as a single axis, taking X for vectors."""
        raw = self.value
        if isinstance(raw, bool):
            return 1.0 if raw else 0.0
        if isinstance(raw, float):
            return raw
        return raw[0]

    def as_axis2d(self) -> Vec2:
        """Returns the value as a 2D vector."""
        raw = self.value
        if isinstance(raw, bool):
            return (1.0, 0.0) if raw else (0.0, 0.0)
        if isinstance(raw, float):
            return (raw, 0.0)
        return (raw[0], raw[1])

    def as_axis3d(self) -> Vec3:
        """Returns the value as a 3D vector."""
        raw = self.value
        if isinstance(raw, bool):
            return (1.0, 0.0, 0.0) if raw else (0.0, 0.0, 0.0)
        if isinstance(raw, float):
            return (raw, 0.0, 0.0)
        if len(raw) == 2:
            return (raw[0], raw[1], 0.0)
        return raw  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionValue):
            return NotImplemented
        return self.dim() is other.dim() and self.value == other.value

    def __hash__(self) -> int:
        raw = self.value
        if isinstance(raw, tuple) and any(math.isnan(c) for c in raw):
            return hash((self.dim(), len(raw)))
        return hash((self.dim(), raw))