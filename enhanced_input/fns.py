"""Dispatching action events to registered observers."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from .action import ActionTime, InputAction, TriggerState, output_dim
from .events import ActionEvents, Cancel, Complete, Fire, Ongoing, Start
from .value import ActionValue, ActionValueDim

logger = logging.getLogger(__name__)

Callback = Callable[[Any], None]


class Observers:
    """Registry of callbacks keyed by event type and action type."""

    def __init__(self) -> None:
        self._callbacks: Dict[Tuple[type, Optional[type]], List[Callback]] = defaultdict(list)

    def add_observer(
        self, event_type: type, action_type: Optional[type], callback: Callback
    ) -> None:
        """Registers ``callback`` for events of ``event_type`` for ``action_type``.

        An ``action_type`` of ``None`` observes that event for every action type.
        """
        self._callbacks[(event_type, action_type)].append(callback)

    def trigger(self, event: Any) -> int:
        """Calls every matching callback with ``event``; returns how many ran."""
        event_type = type(event)
        matching = self._callbacks.get((event_type, event.action_type), []) + self._callbacks.get(
            (event_type, None), []
        )
        for callback in matching:
            callback(event)
        return len(matching)


def _typed(value: ActionValue, dim: ActionValueDim) -> Any:
    if dim is ActionValueDim.BOOL:
        return value.as_bool()
    if dim is ActionValueDim.AXIS1D:
        return value.as_axis1d()
    if dim is ActionValueDim.AXIS2D:
        return value.as_axis2d()
    return value.as_axis3d()


def trigger_events(
    observers: Observers,
    action_type: type,
    context: Hashable,
    action: Hashable,
    state: TriggerState,
    events: ActionEvents,
    value: Any,
    time: Optional[ActionTime] = None,
) -> List[Any]:
    """Triggers an event for each flag in ``events``, in flag order.

    Returns the events that were triggered.
    """
    if not (isinstance(action_type, type) and issubclass(action_type, InputAction)):
        raise TypeError(f"{action_type!r} is not an input action")
    time = time if time is not None else ActionTime()
    typed = _typed(ActionValue.of(value), output_dim(action_type.output))
    name = action_type.__qualname__

    triggered = []
    for flag in events.named():
        logger.debug("triggering `%s` for `%s` (`%s`) for context `%s`", flag.name, name, action, context)
        if flag is ActionEvents.START:
            event: Any = Start(action_type, context, action, typed, state)
        elif flag is ActionEvents.ONGOING:
            event = Ongoing(action_type, context, action, typed, state, time.elapsed_secs)
        elif flag is ActionEvents.FIRE:
            event = Fire(action_type, context, action, typed, state, time.fired_secs, time.elapsed_secs)
        elif flag is ActionEvents.CANCEL:
            event = Cancel(action_type, context, action, typed, state, time.elapsed_secs)
        else:
            event = Complete(
                action_type, context, action, typed, state, time.fired_secs, time.elapsed_secs
            )
        observers.trigger(event)
        triggered.append(event)
    return triggered