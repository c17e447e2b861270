import logging

import pytest

from enhanced_input.action import (
    Accumulation,
    Action,
    ActionSettings,
    ActionTime,
    InputAction,
    TriggerState,
    input_action,
    output_dim,
)
from enhanced_input.value import ActionValue, ActionValueDim, Vec2, Vec3


class Jump(InputAction, output=bool):
    pass


class Zoom(InputAction, output=float):
    pass


class Movement(InputAction, output=Vec2):
    pass


class Fly(InputAction, output=Vec3):
    pass


@pytest.mark.parametrize(
    "output, dim",
    [
        (bool, ActionValueDim.BOOL),
        (float, ActionValueDim.AXIS1D),
        (Vec2, ActionValueDim.AXIS2D),
        (Vec3, ActionValueDim.AXIS3D),
        (ActionValueDim.AXIS2D, ActionValueDim.AXIS2D),
    ],
)
def test_output_dim(output, dim):
    assert output_dim(output) is dim


def test_output_dim_rejects_unknown_type():
    with pytest.raises(TypeError):
        output_dim(str)


def test_input_action_decorator_on_plain_class():
    decorate = input_action(Vec2)

    class Look:
        pass

    Look = decorate(Look)

    assert issubclass(Look, InputAction)
    assert Look.output is Vec2
    assert Look.__name__ == "Look"
    assert Action(Look).dim is ActionValueDim.AXIS2D


def test_input_action_decorator_on_subclass():
    @input_action(float)
    class Throttle(InputAction):
        pass

    assert Throttle.output is float
    assert Action(Throttle).dim is ActionValueDim.AXIS1D


def test_input_action_decorator_rejects_bad_output():
    with pytest.raises(TypeError):
        input_action(dict)


def test_action_without_output_is_rejected():
    class Nothing(InputAction):
        pass

    with pytest.raises(TypeError):
        Action(Nothing)


def test_action_requires_input_action_type():
    with pytest.raises(TypeError):
        Action(int)


@pytest.mark.parametrize("action_type", [Jump, Zoom, Movement, Fly])
def test_new_action_holds_zero(action_type):
    action = Action(action_type)
    dim = output_dim(action_type.output)
    assert ActionValue.of(action.output()) == ActionValue.zero(dim)
    assert action.state is TriggerState.NONE
    assert action.time == ActionTime()
    assert action.settings == ActionSettings()


def test_action_name_defaults_to_type_name():
    assert Action(Jump).name == Jump.__qualname__


def test_store_value_same_dim():
    action = Action(Movement)
    action.store_value((0.25, -0.75))
    assert action.output() == (0.25, -0.75)


def test_store_value_converts_and_warns(caplog):
    action = Action(Zoom)
    with caplog.at_level(logging.WARNING):
        action.store_value(ActionValue((0.75, 0.25)))
    assert action.output() == 0.75
    assert "expects" in caplog.text


def test_store_value_bool_from_axis():
    action = Action(Jump)
    action.store_value(0.25)
    assert action.output() is True


def test_actions_compare_by_type_and_value():
    first = Action(Jump)
    second = Action(Jump)
    assert first == second
    second.store_value(True)
    assert first != second
    assert Action(Jump) != Action(Zoom)


def test_settings_defaults():
    settings = ActionSettings()
    assert settings.accumulation is Accumulation.CUMULATIVE
    assert settings.require_reset is False
    assert settings.consume_input is False


def test_trigger_state_ordering():
    action = Action(Jump)
    assert action.state < TriggerState.ONGOING < TriggerState.FIRED
    assert max(TriggerState) is TriggerState.FIRED


def test_time_update_ongoing():
    time = ActionTime()
    time.update(0.25, TriggerState.ONGOING)
    assert time.elapsed_secs == pytest.approx(0.25)
    assert time.fired_secs == 0.0


def test_time_update_fired_accumulates():
    time = ActionTime()
    time.update(0.25, TriggerState.ONGOING)
    time.update(0.25, TriggerState.FIRED)
    assert time.fired_secs == pytest.approx(0.25)
    assert time.elapsed_secs > time.fired_secs


def test_time_update_ongoing_resets_fired():
    time = ActionTime()
    time.update(0.25, TriggerState.FIRED)
    time.update(0.25, TriggerState.ONGOING)
    assert time.fired_secs == 0.0
    assert time.elapsed_secs > 0.25


def test_time_update_none_resets():
    time = ActionTime(elapsed_secs=3.0, fired_secs=2.0)
    time.update(0.25, TriggerState.NONE)
    assert time == ActionTime()