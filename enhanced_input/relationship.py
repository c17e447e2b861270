"""Collections of actions that belong to an input context."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

from .action import Action, ActionSettings, InputAction


def _as_action(item: Any) -> Action:
    if isinstance(item, Action):
        return item
    if isinstance(item, type) and issubclass(item, InputAction):
        return Action(item)
    raise TypeError(f"{item!r} is neither an action nor an input action type")


def _context_name(context: Any) -> str:
    if isinstance(context, type):
        return context.__qualname__
    return repr(context)


class Actions:
    """Actions that belong to one context, kept in the order they were added.

    Each action may carry extra components, stored by their type.
    Membership is by identity: two actions of the same type are distinct entries.
    """

    def __init__(self, context: Any, actions: Iterable[Any] = ()) -> None:
        self.context = context
        self._actions: List[Action] = []
        self._components: Dict[int, Dict[type, Any]] = {}
        for action in actions:
            self.add(action)

    def add(self, action: Any) -> Action:
        """Adds an action (or a new action of the given type) and returns it.

        Adding an action that is already present does nothing.
        """
        action = _as_action(action)
        if action not in self:
            self._actions.append(action)
            self._components[id(action)] = {}
        return action

    def remove(self, action: Action) -> None:
        """Removes an action and its components; raises ValueError if absent."""
        if action not in self:
            raise ValueError(f"{action!r} is not in the actions of `{_context_name(self.context)}`")
        self._actions = [a for a in self._actions if a is not action]
        del self._components[id(action)]

    def find(self, action_type: type) -> Optional[Action]:
        """Returns the first action of ``action_type``, or None."""
        return next((a for a in self._actions if a.action_type is action_type), None)

    def _store(self, action: Action) -> Dict[type, Any]:
        if action not in self:
            raise ValueError(f"{action!r} is not in the actions of `{_context_name(self.context)}`")
        return self._components[id(action)]

    def insert(self, action: Action, component: Any) -> None:
        """Attaches a component to an action, replacing one of the same type."""
        store = self._store(action)
        if isinstance(component, ActionSettings):
            action.settings = component
        else:
            store[type(component)] = component

    def get(self, action: Action, component_type: type, default: Any = None) -> Any:
        """Returns the action's component of ``component_type``, or ``default``."""
        store = self._store(action)
        if component_type is ActionSettings:
            return action.settings
        return store.get(component_type, default)

    def __contains__(self, action: object) -> bool:
        return any(a is action for a in self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(list(self._actions))

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        names = ", ".join(a.name or "" for a in self._actions)
        return f"Actions<{_context_name(self.context)}>[{names}]"


def actions(context: Any, *args: Any) -> Actions:
    """Builds the actions of ``context``.

    Each argument is an action, an input action type, or a tuple whose first
    item is one of those and whose remaining items are components for it.
    """
    result = Actions(context)
    for arg in args:
        if isinstance(arg, tuple):
            if not arg:
                raise TypeError("an action bundle needs at least an action")
            first, *rest = arg
            action = result.add(first)
            for component in rest:
                result.insert(action, component)
        else:
            result.add(arg)
    return result