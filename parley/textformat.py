"""Named-argument text formatting with {Name} placeholders."""

from __future__ import annotations

import re
from typing import Any, Mapping

_ARG = re.compile(r"`.|\{([^{}]+)\}", re.DOTALL)


def format_argument_names(text: str) -> list[str]:
    """Names of the {arguments} in text, unique, in order of appearance."""
    names: list[str] = []
    for match in _ARG.finditer(text):
        name = match.group(1)
        if name is not None and name not in names:
            names.append(name)
    return names


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_text(text: str, args: Mapping[str, Any]) -> str:
    """Replace {Name} placeholders with args; unknown ones are left as they are."""

    def repl(match: re.Match) -> str:
        name = match.group(1)
        if name is None:
            return match.group(0)[1:]
        if name in args:
            return _to_text(args[name])
        return match.group(0)

    return _ARG.sub(repl, text)