"""Saved progress of a single dialogue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .value import Value


@dataclass
class DialogueState:
    """Current line, variables, choices already taken and the gosub return stack."""

    text_node_id: str = ""
    variables: dict[str, Value] = field(default_factory=dict)
    choices_taken: set[str] = field(default_factory=set)
    return_stack: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """A plain, serialisable representation of the state."""
        return {
            "text_node_id": self.text_node_id,
            "variables": {name: value.to_dict() for name, value in self.variables.items()},
            "choices_taken": sorted(self.choices_taken),
            "return_stack": list(self.return_stack),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DialogueState":
        """Rebuild a state from the output of to_dict."""
        return cls(
            text_node_id=data.get("text_node_id", ""),
            variables={
                name: Value.from_dict(value)
                for name, value in data.get("variables", {}).items()
            },
            choices_taken=set(data.get("choices_taken", ())),
            return_stack=list(data.get("return_stack", ())),
        )