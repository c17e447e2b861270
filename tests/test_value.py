import pytest

from enhanced_input.value import ActionValue, ActionValueDim


def test_bool_conversion():
    value = ActionValue(True)
    assert value.convert(ActionValueDim.BOOL) == ActionValue.of(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue.of(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue.of((1.0, 0.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue.of((1.0, 0.0, 0.0))


def test_axis1d_conversion():
    value = ActionValue(1.0)
    assert value.convert(ActionValueDim.BOOL) == ActionValue.of(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue.of(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue.of((1.0, 0.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue.of((1.0, 0.0, 0.0))


def test_axis2d_conversion():
    value = ActionValue((1.0, 1.0))
    assert value.convert(ActionValueDim.BOOL) == ActionValue.of(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue.of(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue.of((1.0, 1.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue.of((1.0, 1.0, 0.0))


def test_axis3d_conversion():
    value = ActionValue((1.0, 1.0, 1.0))
    assert value.convert(ActionValueDim.BOOL) == ActionValue.of(True)
    assert value.convert(ActionValueDim.AXIS1D) == ActionValue.of(1.0)
    assert value.convert(ActionValueDim.AXIS2D) == ActionValue.of((1.0, 1.0))
    assert value.convert(ActionValueDim.AXIS3D) == ActionValue.of((1.0, 1.0, 1.0))


@pytest.mark.parametrize(
    "dim, expected",
    [
        (ActionValueDim.BOOL, False),
        (ActionValueDim.AXIS1D, 0.0),
        (ActionValueDim.AXIS2D, (0.0, 0.0)),
        (ActionValueDim.AXIS3D, (0.0, 0.0, 0.0)),
    ],
)
def test_zero(dim, expected):
    value = ActionValue.zero(dim)
    assert value.dim() is dim
    assert value.value == expected


def test_of_dimensions():
    assert ActionValue.of(True).dim() is ActionValueDim.BOOL
    assert ActionValue.of(2).dim() is ActionValueDim.AXIS1D
    assert ActionValue.of((1, 2)).dim() is ActionValueDim.AXIS2D
    assert ActionValue.of([1, 2, 3]).value == (1.0, 2.0, 3.0)


def test_of_returns_same_value():
    value = ActionValue(0.5)
    assert ActionValue.of(value) is value


def test_different_dims_are_not_equal():
    assert not ActionValue(True) == ActionValue(1.0)
    assert not ActionValue(1.0) == ActionValue((1.0, 0.0))


def test_invalid_value_raises():
    with pytest.raises(TypeError):
        ActionValue.of("jump")
    with pytest.raises(TypeError):
        ActionValue.of((1.0,))


def test_zero_axes_are_false():
    assert ActionValue((0.0, 0.0)).as_bool() is False
    assert ActionValue((0.0, -2.0, 0.0)).as_bool() is True
    assert ActionValue(0.0).as_bool() is False


def test_is_actuated():
    assert ActionValue((0.3, 0.4)).is_actuated(0.5)
    assert not ActionValue((0.3, 0.3)).is_actuated(0.5)
    assert ActionValue(False).is_actuated(0.0)
    assert not ActionValue(False).is_actuated(0.1)
    assert ActionValue(-1.0).is_actuated(0.5)


def test_narrowing_takes_x():
    assert ActionValue((3.0, 4.0, 5.0)).as_axis1d() == 3.0
    assert ActionValue((3.0, 4.0, 5.0)).as_axis2d() == (3.0, 4.0)
    assert ActionValue(False).as_axis1d() == 0.0


def test_hashable_and_consistent():
    assert len({ActionValue(1.0), ActionValue.of(1), ActionValue(True)}) == 2