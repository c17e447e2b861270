"""Keyboard key codes and keyboard modifier flags."""

from __future__ import annotations

from enum import Enum, Flag
from typing import Iterable, Iterator, Tuple


class KeyCode(Enum):
    """Physical keyboard keys; the value is the key's display name."""

    BACKQUOTE = "Backquote"
    BACKSLASH = "Backslash"
    BRACKET_LEFT = "BracketLeft"
    BRACKET_RIGHT = "BracketRight"
    COMMA = "Comma"
    DIGIT0 = "Digit0"
    DIGIT1 = "Digit1"
    DIGIT2 = "Digit2"
    DIGIT3 = "Digit3"
    DIGIT4 = "Digit4"
    DIGIT5 = "Digit5"
    DIGIT6 = "Digit6"
    DIGIT7 = "Digit7"
    DIGIT8 = "Digit8"
    DIGIT9 = "Digit9"
    EQUAL = "Equal"
    KEY_A = "KeyA"
    KEY_B = "KeyB"
    KEY_C = "KeyC"
    KEY_D = "KeyD"
    KEY_E = "KeyE"
    KEY_F = "KeyF"
    KEY_G = "KeyG"
    KEY_H = "KeyH"
    KEY_I = "KeyI"
    KEY_J = "KeyJ"
    KEY_K = "KeyK"
    KEY_L = "KeyL"
    KEY_M = "KeyM"
    KEY_N = "KeyN"
    KEY_O = "KeyO"
    KEY_P = "KeyP"
    KEY_Q = "KeyQ"
    KEY_R = "KeyR"
    KEY_S = "KeyS"
    KEY_T = "KeyT"
    KEY_U = "KeyU"
    KEY_V = "KeyV"
    KEY_W = "KeyW"
    KEY_X = "KeyX"
    KEY_Y = "KeyY"
    KEY_Z = "KeyZ"
    MINUS = "Minus"
    PERIOD = "Period"
    QUOTE = "Quote"
    SEMICOLON = "Semicolon"
    SLASH = "Slash"
    ALT_LEFT = "AltLeft"
    ALT_RIGHT = "AltRight"
    BACKSPACE = "Backspace"
    CAPS_LOCK = "CapsLock"
    CONTEXT_MENU = "ContextMenu"
    CONTROL_LEFT = "ControlLeft"
    CONTROL_RIGHT = "ControlRight"
    ENTER = "Enter"
    SUPER_LEFT = "SuperLeft"
    SUPER_RIGHT = "SuperRight"
    SHIFT_LEFT = "ShiftLeft"
    SHIFT_RIGHT = "ShiftRight"
    SPACE = "Space"
    TAB = "Tab"
    DELETE = "Delete"
    END = "End"
    HOME = "Home"
    INSERT = "Insert"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    NUM_LOCK = "NumLock"
    NUMPAD0 = "Numpad0"
    NUMPAD1 = "Numpad1"
    NUMPAD2 = "Numpad2"
    NUMPAD3 = "Numpad3"
    NUMPAD4 = "Numpad4"
    NUMPAD5 = "Numpad5"
    NUMPAD6 = "Numpad6"
    NUMPAD7 = "Numpad7"
    NUMPAD8 = "Numpad8"
    NUMPAD9 = "Numpad9"
    NUMPAD_ADD = "NumpadAdd"
    NUMPAD_DECIMAL = "NumpadDecimal"
    NUMPAD_DIVIDE = "NumpadDivide"
    NUMPAD_ENTER = "NumpadEnter"
    NUMPAD_MULTIPLY = "NumpadMultiply"
    NUMPAD_SUBTRACT = "NumpadSubtract"
    ESCAPE = "Escape"
    PRINT_SCREEN = "PrintScreen"
    SCROLL_LOCK = "ScrollLock"
    PAUSE = "Pause"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"

    def __str__(self) -> str:
        return self.value


class ModKeys(Flag):
    """Keyboard modifiers, each covering both the left and right key."""

    CONTROL = 0b0001
    SHIFT = 0b0010
    ALT = 0b0100
    SUPER = 0b1000

    @classmethod
    def pressed(cls, keys: Iterable[KeyCode]) -> ModKeys:
        """Returns the modifiers active among the given pressed keys."""
        result = cls(0)
        for key in keys:
            result |= cls.from_key(key)
        return result

    @classmethod
    def from_key(cls, key: KeyCode) -> ModKeys:
        """Returns the modifier for a key, or an empty set if it is not one."""
        for flag, pair in _MOD_KEY_CODES.items():
            if key in pair:
                return flag
        return cls(0)

    def _named(self) -> Iterator[ModKeys]:
        for flag in _MOD_KEY_CODES:
            if flag in self:
                yield flag

    def iter_keys(self) -> Iterator[Tuple[KeyCode, KeyCode]]:
        """Yields (left, right) key codes for each set modifier."""
        for flag in self._named():
            yield _MOD_KEY_CODES[flag]

    def __str__(self) -> str:
        return " + ".join(_DISPLAY_NAMES[flag] for flag in self._named())


_MOD_KEY_CODES = {
    ModKeys.CONTROL: (KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT),
    ModKeys.SHIFT: (KeyCode.SHIFT_LEFT, KeyCode.SHIFT_RIGHT),
    ModKeys.ALT: (KeyCode.ALT_LEFT, KeyCode.ALT_RIGHT),
    ModKeys.SUPER: (KeyCode.SUPER_LEFT, KeyCode.SUPER_RIGHT),
}

_DISPLAY_NAMES = {
    ModKeys.CONTROL: "Ctrl",
    ModKeys.SHIFT: "Shift",
    ModKeys.ALT: "Alt",
    ModKeys.SUPER: "Super",
}