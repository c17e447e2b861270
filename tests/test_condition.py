import pytest

from enhanced_input.action import TriggerState
from enhanced_input.condition import DEFAULT_ACTUATION, ConditionKind, InputCondition
from enhanced_input.value import ActionValue


class Threshold(InputCondition):
    def __init__(self, actuation=DEFAULT_ACTUATION):
        self.actuation = actuation

    def evaluate(self, actions, time, value):
        if value.is_actuated(self.actuation):
            return TriggerState.FIRED
        return TriggerState.NONE


class Gate(Threshold):
    def kind(self):
        return ConditionKind.BLOCKER


def test_condition_is_abstract():
    with pytest.raises(TypeError):
        InputCondition()


def test_default_kind_is_explicit():
    assert InputCondition.kind(Threshold()) is ConditionKind.EXPLICIT


def test_kind_can_be_overridden():
    gate = Gate()
    assert gate.kind() is ConditionKind.BLOCKER
    assert InputCondition.kind(gate) is ConditionKind.EXPLICIT


def test_evaluate_fires_at_default_actuation():
    condition = Threshold()
    assert condition.evaluate(None, None, ActionValue(DEFAULT_ACTUATION)) is TriggerState.FIRED
    assert condition.evaluate(None, None, ActionValue(True)) is TriggerState.FIRED


def test_evaluate_below_default_actuation():
    condition = Threshold()
    assert condition.evaluate(None, None, ActionValue(DEFAULT_ACTUATION / 2)) is TriggerState.NONE
    assert condition.evaluate(None, None, ActionValue(False)) is TriggerState.NONE


def test_condition_kinds_are_distinct():
    kinds = {InputCondition.kind(Threshold()), Gate().kind()}
    assert kinds == {ConditionKind.EXPLICIT, ConditionKind.BLOCKER}
    assert {kind.name for kind in ConditionKind} == {"EXPLICIT", "IMPLICIT", "BLOCKER"}