"""Input bindings: the physical inputs that map to an action."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from .mod_keys import KeyCode, ModKeys

logger = logging.getLogger(__name__)


class MouseButton(Enum):
    """Mouse buttons; the value is the button's display name."""

    LEFT = "Left"
    RIGHT = "Right"
    MIDDLE = "Middle"
    BACK = "Back"
    FORWARD = "Forward"

    def __str__(self) -> str:
        return self.value


class GamepadButton(Enum):
    """Gamepad buttons; the value is the button's display name."""

    SOUTH = "South"
    EAST = "East"
    NORTH = "North"
    WEST = "West"
    C = "C"
    Z = "Z"
    LEFT_TRIGGER = "LeftTrigger"
    LEFT_TRIGGER2 = "LeftTrigger2"
    RIGHT_TRIGGER = "RightTrigger"
    RIGHT_TRIGGER2 = "RightTrigger2"
    SELECT = "Select"
    START = "Start"
    MODE = "Mode"
    LEFT_THUMB = "LeftThumb"
    RIGHT_THUMB = "RightThumb"
    DPAD_UP = "DPadUp"
    DPAD_DOWN = "DPadDown"
    DPAD_LEFT = "DPadLeft"
    DPAD_RIGHT = "DPadRight"

    def __str__(self) -> str:
        return self.value


class GamepadAxis(Enum):
    """Gamepad stick axes; the value is the axis's display name."""

    LEFT_STICK_X = "LeftStickX"
    LEFT_STICK_Y = "LeftStickY"
    LEFT_Z = "LeftZ"
    RIGHT_STICK_X = "RightStickX"
    RIGHT_STICK_Y = "RightStickY"
    RIGHT_Z = "RightZ"

    def __str__(self) -> str:
        return self.value


class BindingKind(Enum):
    """The kind of input a :class:`Binding` refers to."""

    KEYBOARD = "keyboard"
    """Keyboard key, captured as a bool."""
    MOUSE_BUTTON = "mouse_button"
    """Mouse button, captured as a bool."""
    MOUSE_MOTION = "mouse_motion"
    """Mouse movement, captured as a 2D axis."""
    MOUSE_WHEEL = "mouse_wheel"
    """Mouse wheel, captured as a 2D axis; vertical scrolling is the Y axis."""
    GAMEPAD_BUTTON = "gamepad_button"
    """Gamepad button, captured as a 1D axis."""
    GAMEPAD_AXIS = "gamepad_axis"
    """Gamepad stick axis, captured as a 1D axis."""
    ANY_KEY = "any_key"
    """Any key, mouse button or gamepad button, captured as a bool."""
    NONE = "none"
    """No input; always captured as False."""


_INPUT_TYPES = {
    BindingKind.KEYBOARD: KeyCode,
    BindingKind.MOUSE_BUTTON: MouseButton,
    BindingKind.GAMEPAD_BUTTON: GamepadButton,
    BindingKind.GAMEPAD_AXIS: GamepadAxis,
}

_MOD_KEY_KINDS = frozenset(
    {
        BindingKind.KEYBOARD,
        BindingKind.MOUSE_BUTTON,
        BindingKind.MOUSE_MOTION,
        BindingKind.MOUSE_WHEEL,
    }
)

InputLike = Union["Binding", KeyCode, MouseButton, GamepadButton, GamepadAxis]


@dataclass(frozen=True)
class Binding:
    """An input bound to an action, with optional keyboard modifiers."""

    kind: BindingKind
    input: Optional[Enum] = None
    mod_keys: ModKeys = field(default_factory=lambda: ModKeys(0))

    def __post_init__(self) -> None:
        expected = _INPUT_TYPES.get(self.kind)
        if expected is None:
            if self.input is not None:
                raise ValueError(f"`{self.kind.name}` binding takes no input, got {self.input!r}")
        elif not isinstance(self.input, expected):
            raise TypeError(
                f"`{self.kind.name}` binding needs a {expected.__name__}, got {self.input!r}"
            )
        if not isinstance(self.mod_keys, ModKeys):
            raise TypeError(f"expected ModKeys, got {self.mod_keys!r}")
        if self.mod_keys and self.kind not in _MOD_KEY_KINDS:
            raise ValueError(f"`{self.kind.name}` binding can't have keyboard modifiers")

    @classmethod
    def keyboard(cls, key: KeyCode, mod_keys: ModKeys = ModKeys(0)) -> Binding:
        """Returns a keyboard key binding."""
        return cls(BindingKind.KEYBOARD, key, mod_keys)

    @classmethod
    def mouse_button(cls, button: MouseButton, mod_keys: ModKeys = ModKeys(0)) -> Binding:
        """Returns a mouse button binding."""
        return cls(BindingKind.MOUSE_BUTTON, button, mod_keys)

    @classmethod
    def mouse_motion(cls) -> Binding:
        """Returns a mouse motion binding without keyboard modifiers."""
        return cls(BindingKind.MOUSE_MOTION)

    @classmethod
    def mouse_wheel(cls) -> Binding:
        """Returns a mouse wheel binding without keyboard modifiers."""
        return cls(BindingKind.MOUSE_WHEEL)

    @classmethod
    def gamepad_button(cls, button: GamepadButton) -> Binding:
        """Returns a gamepad button binding."""
        return cls(BindingKind.GAMEPAD_BUTTON, button)

    @classmethod
    def gamepad_axis(cls, axis: GamepadAxis) -> Binding:
        """Returns a gamepad axis binding."""
        return cls(BindingKind.GAMEPAD_AXIS, axis)

    @classmethod
    def any_key(cls) -> Binding:
        """Returns a binding that reacts to any button."""
        return cls(BindingKind.ANY_KEY)

    @classmethod
    def none(cls) -> Binding:
        """Returns a binding that corresponds to no input."""
        return cls(BindingKind.NONE)

    @classmethod
    def from_input(cls, value: Any) -> Binding:
        """Converts a key, mouse button, gamepad button or axis into a binding."""
        if isinstance(value, Binding):
            return value
        if isinstance(value, KeyCode):
            return cls.keyboard(value)
        if isinstance(value, MouseButton):
            return cls.mouse_button(value)
        if isinstance(value, GamepadButton):
            return cls.gamepad_button(value)
        if isinstance(value, GamepadAxis):
            return cls.gamepad_axis(value)
        raise TypeError(f"{value!r} can't be converted into a binding")

    def mod_keys_count(self) -> int:
        """Returns the number of associated keyboard modifiers."""
        return sum(1 for _ in self.mod_keys.iter_keys())

    def without_mod_keys(self) -> Binding:
        """Returns this binding without keyboard modifiers."""
        return self.with_mod_keys(ModKeys(0))

    def with_mod_keys(self, mod_keys: ModKeys) -> Binding:
        """Returns this binding with the modifiers replaced.

        Logs an error and returns the binding unchanged for kinds that can't
        carry modifiers.
        """
        if self.kind not in _MOD_KEY_KINDS:
            logger.error("can't add `%r` to `%r`", mod_keys, self)
            return self
        return Binding(self.kind, self.input, mod_keys)

    def __str__(self) -> str:
        prefix = f"{self.mod_keys} + " if self.mod_keys else ""
        if self.kind is BindingKind.MOUSE_BUTTON:
            body = f"Mouse {self.input}"
        elif self.kind is BindingKind.MOUSE_MOTION:
            body = "Mouse Motion"
        elif self.kind is BindingKind.MOUSE_WHEEL:
            body = "Scroll Wheel"
        elif self.kind is BindingKind.ANY_KEY:
            body = "Any Key"
        elif self.kind is BindingKind.NONE:
            body = "None"
        else:
            body = str(self.input)
        return prefix + body


def with_mod_keys(value: InputLike, mod_keys: ModKeys) -> Binding:
    """Converts ``value`` into a binding and assigns keyboard modifiers to it."""
    return Binding.from_input(value).with_mod_keys(mod_keys)


def bindings(*args: Any) -> List[Tuple[Any, ...]]:
    """Builds binding bundles from inputs or tuples of an input and components.

    Each bundle is a tuple whose first element is a :class:`Binding`, followed
    by any extra components given alongside it.
    """
    bundles = []
    for arg in args:
        if isinstance(arg, tuple):
            if not arg:
                raise TypeError("a binding bundle needs at least a binding")
            first, *rest = arg
            bundles.append((Binding.from_input(first), *rest))
        else:
            bundles.append((Binding.from_input(arg),))
    return bundles