"""A named store of dialogue variables with typed accessors."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .value import Gender, Value, ValueType

log = logging.getLogger(__name__)


class VariableStore:
    """Holds variables by name; typed getters raise TypeError on incompatible values."""

    def __init__(self, variables: Mapping[str, Any] | None = None) -> None:
        self.variables: dict[str, Value] = {
            name: Value(value) for name, value in (variables or {}).items()
        }

    def set_variable(self, name: str, value: Any) -> None:
        self.variables[name] = Value(value)

    def unset_variable(self, name: str) -> None:
        self.variables.pop(name, None)

    def _incompatible(self, name: str, kind: str) -> TypeError:
        return TypeError(f"Variable {name} is not a compatible {kind} type")

    def get_text(self, name: str) -> str:
        value = self.variables.get(name)
        if value is None:
            return ""
        if value.type is ValueType.TEXT:
            return value.data
        raise self._incompatible(name, "text")

    def set_int(self, name: str, value: int) -> None:
        self.set_variable(name, Value(int(value)))

    def get_int(self, name: str) -> int:
        value = self.variables.get(name)
        if value is None:
            return 0
        if value.type is ValueType.INT:
            return value.data
        if value.type is ValueType.FLOAT:
            log.warning("Casting variable %s to int, data loss may occur", name)
            return int(value.data)
        raise self._incompatible(name, "integer")

    def set_float(self, name: str, value: float) -> None:
        self.set_variable(name, Value(float(value)))

    def get_float(self, name: str) -> float:
        value = self.variables.get(name)
        if value is None:
            return 0.0
        if value.type in (ValueType.INT, ValueType.FLOAT):
            return float(value.data)
        raise self._incompatible(name, "float")

    def set_gender(self, name: str, value: Gender) -> None:
        self.set_variable(name, Value(Gender(value)))

    def get_gender(self, name: str) -> Gender:
        value = self.variables.get(name)
        if value is None:
            return Gender.NEUTER
        if value.type is ValueType.GENDER:
            return value.data
        raise self._incompatible(name, "gender")

    def set_boolean(self, name: str, value: bool) -> None:
        self.set_variable(name, Value(bool(value)))

    def get_boolean(self, name: str) -> bool:
        value = self.variables.get(name)
        if value is None:
            return False
        if value.type is ValueType.BOOLEAN:
            return value.data
        if value.type is ValueType.INT:
            return value.data != 0
        raise self._incompatible(name, "boolean")

    def set_name(self, name: str, value: str) -> None:
        self.set_variable(name, Value.name(value))

    def get_name(self, name: str) -> str | None:
        value = self.variables.get(name)
        if value is None:
            return None
        if value.type is ValueType.NAME:
            return value.data
        raise self._incompatible(name, "name")