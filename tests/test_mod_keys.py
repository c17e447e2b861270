import pytest

from enhanced_input.mod_keys import KeyCode, ModKeys

ALL = ModKeys.CONTROL | ModKeys.SHIFT | ModKeys.ALT | ModKeys.SUPER


def test_pressed_mod_keys():
    keys = {KeyCode.CONTROL_LEFT, KeyCode.SHIFT_LEFT, KeyCode.KEY_C}
    assert ModKeys.pressed(keys) == ModKeys.CONTROL | ModKeys.SHIFT


def test_pressed_without_modifiers_is_empty():
    assert ModKeys.pressed([KeyCode.KEY_A, KeyCode.SPACE]) == ModKeys(0)


def test_pressed_right_keys():
    assert ModKeys.pressed([KeyCode.ALT_RIGHT, KeyCode.SUPER_RIGHT]) == (
        ModKeys.ALT | ModKeys.SUPER
    )


def test_mod_keys_display():
    assert str(ModKeys.CONTROL) == "Ctrl"
    assert str(ALL) == "Ctrl + Shift + Alt + Super"
    assert str(ModKeys(0)) == ""


@pytest.mark.parametrize(
    "key, expected",
    [
        (KeyCode.CONTROL_LEFT, ModKeys.CONTROL),
        (KeyCode.CONTROL_RIGHT, ModKeys.CONTROL),
        (KeyCode.SHIFT_RIGHT, ModKeys.SHIFT),
        (KeyCode.ALT_LEFT, ModKeys.ALT),
        (KeyCode.SUPER_LEFT, ModKeys.SUPER),
        (KeyCode.KEY_Q, ModKeys(0)),
    ],
)
def test_from_key(key, expected):
    assert ModKeys.from_key(key) == expected


def test_iter_keys_order():
    assert list((ModKeys.SUPER | ModKeys.CONTROL).iter_keys()) == [
        (KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT),
        (KeyCode.SUPER_LEFT, KeyCode.SUPER_RIGHT),
    ]
    assert list(ModKeys(0).iter_keys()) == []


def test_iter_keys_round_trip():
    for left, right in ALL.iter_keys():
        assert ModKeys.from_key(left) == ModKeys.from_key(right)
    assert ModKeys.pressed(left for left, _ in ALL.iter_keys()) == ALL


def test_key_code_display():
    assert str(KeyCode.KEY_A) == "KeyA"
    assert str(KeyCode.DIGIT1) == "Digit1"
    left, right = next(ModKeys.CONTROL.iter_keys())
    assert (str(left), str(right)) == ("ControlLeft", "ControlRight")