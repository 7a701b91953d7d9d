"""Helpers for dialogue variable names."""

GLOBAL_PREFIX = "global."


def is_global_variable(name: str) -> bool:
    """Whether the name refers to a global variable (case-insensitive prefix)."""
    return name.lower().startswith(GLOBAL_PREFIX)


def global_variable_name(name: str) -> str:
    """The name with any global prefix removed; unchanged if not global."""
    if is_global_variable(name):
        return name[len(GLOBAL_PREFIX):]
    return name