# enhanced_input

Action-based input mapping for games and interactive programs.

You do not handle raw "pressed" or "released" keys. You declare **actions** such as "Jump" or "Move", and each action has an output type: `bool`, `float`, or a 2D or 3D vector given as a tuple. Physical inputs are described as **bindings**. An action's **trigger state** (`NONE`, `ONGOING`, `FIRED`) changes over time, and each transition from one state to the next produces **events** (`Start`, `Ongoing`, `Fire`, `Cancel`, `Complete`). Those events are delivered to observer callbacks.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `enhanced_input.value`

- `ActionValueDim` is an ordered enum with the members `BOOL`, `AXIS1D`, `AXIS2D` and `AXIS3D`.
- `ActionValue` wraps a bool, a number, or a 2- or 3-tuple.
  - Numbers are stored as floats.
  - Other inputs raise `TypeError`.
  - Methods: `ActionValue.zero(dim)`, `ActionValue.of(value)`, `dim()`, `convert(dim)`, `is_actuated(actuation)`, `as_bool()`, `as_axis1d()`, `as_axis2d()` and `as_axis3d()`.
  - Converting to a larger dimension fills the new axes with zero. Converting to a smaller one drops axes.
  - A non-zero value counts as `True`.
- `Vec2` and `Vec3` are the tuple type aliases used as output types.

### `enhanced_input.mod_keys`

- `KeyCode` lists keyboard keys. `str()` gives the key's name, for example `"KeyA"`.
- `ModKeys` is a flag set with the members `CONTROL`, `SHIFT`, `ALT` and `SUPER`.
  - `ModKeys.pressed(keys)` returns the modifiers present in an iterable of held `KeyCode`s. The left and right keys both count.
  - `ModKeys.from_key(key)` maps a single key to its modifier, or to an empty set.
  - `iter_keys()` yields `(left, right)` key pairs.
  - `str()` gives `"Ctrl + Shift + Alt + Super"` style text, and an empty string for no modifiers.

### `enhanced_input.action`

- `InputAction` is the base class for action types. There are two ways to declare an action:
  - subclass it with an output type, as in `class Jump(InputAction, output=bool)`;
  - decorate a class with `@input_action(bool)`.
- `output_dim(output)` returns the `ActionValueDim` for `bool`, `float`, `Vec2`, `Vec3` or a dimension member. Any other type raises `TypeError`.
- `TriggerState` is an ordered enum: `NONE < ONGOING < FIRED`.
- `Accumulation` has the members `CUMULATIVE` and `MAX_ABS`.
- `ActionSettings` holds `accumulation`, `require_reset` and `consume_input`.
- `ActionTime` holds `elapsed_secs` and `fired_secs`. `update(delta_secs, state)` advances them:
  - `NONE` resets both;
  - `ONGOING` advances elapsed time and resets fired time;
  - `FIRED` advances both.
- `Action(action_type)` holds a typed `value` together with `settings`, `state`, `time` and `name`.
  - `output()` returns the value.
  - `store_value(value)` converts the value to the action's output type. If the dimensions differ it logs a warning.

### `enhanced_input.condition`

- `ConditionKind` has the members `EXPLICIT`, `IMPLICIT` and `BLOCKER`.
- `InputCondition` is an abstract base with `evaluate(actions, time, value)`. Its `kind()` defaults to `EXPLICIT`.
- `DEFAULT_ACTUATION` is `0.5`.

### `enhanced_input.events`

- `ActionEvents` is a flag set with the members `START`, `ONGOING`, `FIRE`, `CANCEL` and `COMPLETE`.
  - `ActionEvents.from_transition(previous, current)` returns the events for a state change.
  - `named()` lists the single flags in declaration order.
- `Start`, `Ongoing`, `Fire`, `Cancel` and `Complete` are frozen dataclasses. Each carries `action_type`, `context`, `action`, `value` and `state`, plus the timing fields that apply to it.

### `enhanced_input.fns`

- `Observers` is the callback registry.
  - `add_observer(event_type, action_type, callback)` registers a callback. An `action_type` of `None` observes every action type.
  - `trigger(event)` calls the matching callbacks and returns how many ran.
- `trigger_events(observers, action_type, context, action, state, events, value, time=None)` does three things:
  1. builds one event per flag in `events`, in flag order;
  2. dispatches each event to the observers;
  3. returns the events.

### `enhanced_input.binding`

- `MouseButton`, `GamepadButton` and `GamepadAxis` are input enums.
- `BindingKind` lists the binding kinds.
- `Binding` is a frozen binding value with these constructors: `keyboard`, `mouse_button`, `mouse_motion`, `mouse_wheel`, `gamepad_button`, `gamepad_axis`, `any_key`, `none` and `from_input`.
  - `mod_keys_count()`, `without_mod_keys()` and `with_mod_keys(mod_keys)` work with keyboard modifiers.
  - Gamepad, any-key and none bindings cannot carry modifiers. For those, `with_mod_keys` logs an error and returns the binding unchanged.
  - `str()` gives text such as `"Ctrl + KeyA"`, `"Mouse Left"` or `"Scroll Wheel"`.
- `with_mod_keys(value, mod_keys)` converts an input and assigns modifiers to it.
- `bindings(*args)` returns a list of tuples. The first element of each tuple is a `Binding` and the rest are any extra components passed with it.

### `enhanced_input.relationship`

- `Actions(context)` is an ordered collection of `Action`s. Membership is by identity.
  - `add(action)` accepts an `Action` or an action type.
  - `remove(action)` raises `ValueError` if the action is absent.
  - `find(action_type)` looks up an action.
  - `insert(action, component)` and `get(action, component_type, default=None)` attach and read per-action components. An `ActionSettings` component replaces the action's `settings`.
  - The collection supports `len()`, iteration and `in`.
- `actions(context, *args)` builds the collection. Each argument is an action, an action type, or a tuple of an action followed by its components.

### `enhanced_input.mock`

- `MockSpan` sets how long a mock lasts. Constructors:
  - `MockSpan.once()`
  - `MockSpan.updates(count)`
  - `MockSpan.duration(seconds)`, which also accepts a `timedelta`
  - `MockSpan.manual()`

  `MockSpanKind` names the three kinds.
- `ActionMock(state, value, span)` holds a forced state and value with an `enabled` flag. `ActionMock.once(state, value)` mocks for one update, and `ActionMock.disabled()` returns an inactive placeholder.
- `mock(actions, action_type, state, value, span)` attaches an `ActionMock` to the first action of that type and returns the mock. `mock_once(actions, action_type, state, value)` does the same for one update. Both raise `LookupError` when the type is missing.

## Example

```python
from enhanced_input.action import Action, TriggerState, input_action
from enhanced_input.binding import bindings, with_mod_keys
from enhanced_input.events import ActionEvents, Fire, Start
from enhanced_input.fns import Observers, trigger_events
from enhanced_input.mock import ActionMock, mock_once
from enhanced_input.mod_keys import KeyCode, ModKeys
from enhanced_input.relationship import actions


@input_action(bool)
class Jump:
    pass


print(with_mod_keys(KeyCode.KEY_C, ModKeys.CONTROL))  # Ctrl + KeyC

player = actions("player", (Action(Jump), *bindings(KeyCode.SPACE)))
jump = player.find(Jump)

observers = Observers()
observers.add_observer(Start, Jump, lambda event: print("started", event.value))
observers.add_observer(Fire, Jump, lambda event: print("fired", event.value))

events = ActionEvents.from_transition(TriggerState.NONE, TriggerState.FIRED)
trigger_events(observers, Jump, "player", jump, TriggerState.FIRED, events, True)
# started True
# fired True

mock_once(player, Jump, TriggerState.FIRED, True)
print(player.get(jump, ActionMock).span)  # MockSpan(kind=<MockSpanKind.UPDATES: 'updates'>, limit=1)
```

## What the package does not do

The package provides the data model and event dispatch. It does not include any of the following:

- It has no update loop. Nothing reads keyboards, mice or gamepads, evaluates bindings against held inputs, or advances trigger states over time.
- It does not apply `ActionMock`s during evaluation or expire them.
- It has no concrete input conditions such as hold, tap or pulse. `InputCondition` is only the base to build them on.
- It has no value modifiers, binding presets, or context priority and activation.

Your program drives all of these. Compute the trigger state, call `ActionTime.update`, derive events with `ActionEvents.from_transition`, and deliver them with `trigger_events`.