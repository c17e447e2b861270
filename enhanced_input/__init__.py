"""Action-based input mapping: action values, modifier keys, bindings, trigger states, action events and mocking."""

__version__ = "0.24.2"