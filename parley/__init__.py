"""Building blocks for branching dialogue: values, expressions, script graphs, variables and state."""

__version__ = "0.1.0"

__all__ = [
    "editor_settings",
    "expression",
    "names",
    "participant",
    "script",
    "state",
    "textformat",
    "value",
    "variables",
]