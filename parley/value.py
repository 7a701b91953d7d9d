"""Dynamically typed values held by dialogue variables and expressions."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

RANDOM_ITEM_SELECT_VAR = "__RandomItemIdx"
"""Internal variable holding the index picked by a random select."""


class ValueType(Enum):
    """The kind of data a Value holds."""

    EMPTY = "Empty"
    TEXT = "Text"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    GENDER = "Gender"
    NAME = "Name"
    VARIABLE = "Variable"


class Gender(Enum):
    """Grammatical gender used for text formatting."""

    MASCULINE = "Masculine"
    FEMININE = "Feminine"
    NEUTER = "Neuter"

    def __str__(self) -> str:
        return self.value


_NUMERIC = (ValueType.INT, ValueType.FLOAT)


class Value:
    """A single typed value: text, number, boolean, gender, name or variable reference."""

    __slots__ = ("type", "data")

    def __init__(self, data: Any = None) -> None:
        if data is None:
            self.type, self.data = ValueType.EMPTY, None
        elif isinstance(data, Value):
            self.type, self.data = data.type, data.data
        elif isinstance(data, bool):
            self.type, self.data = ValueType.BOOLEAN, data
        elif isinstance(data, int):
            self.type, self.data = ValueType.INT, data
        elif isinstance(data, float):
            self.type, self.data = ValueType.FLOAT, data
        elif isinstance(data, Gender):
            self.type, self.data = ValueType.GENDER, data
        elif isinstance(data, str):
            self.type, self.data = ValueType.TEXT, data
        else:
            raise TypeError(f"Unsupported value type: {type(data).__name__}")

    @classmethod
    def variable(cls, name: str) -> "Value":
        """A reference to a variable, resolved at evaluation time."""
        value = cls()
        value.type, value.data = ValueType.VARIABLE, name
        return value

    @classmethod
    def name(cls, name: str) -> "Value":
        """A name (identifier) value, distinct from localisable text."""
        value = cls()
        value.type, value.data = ValueType.NAME, name
        return value

    def is_variable(self) -> bool:
        return self.type is ValueType.VARIABLE

    def is_empty(self) -> bool:
        return self.type is ValueType.EMPTY

    def as_bool(self) -> bool:
        """Truth of the value; unresolved variables and empty values are false."""
        if self.type in (ValueType.VARIABLE, ValueType.EMPTY):
            return False
        if self.type is ValueType.GENDER:
            return self.data is not Gender.MASCULINE
        return bool(self.data)

    def _number(self) -> int | float | None:
        if self.type in _NUMERIC:
            return self.data
        if self.type is ValueType.BOOLEAN:
            return int(self.data)
        if self.type is ValueType.VARIABLE:
            return 0
        return None

    def to_format_arg(self) -> Any:
        """The plain Python value to use as a text format argument."""
        if self.type is ValueType.EMPTY:
            return ""
        if self.type is ValueType.VARIABLE:
            return self.data
        return self.data

    def to_dict(self) -> dict:
        data = self.data
        if self.type is ValueType.GENDER:
            data = self.data.value
        return {"type": self.type.value, "value": data}

    @classmethod
    def from_dict(cls, data: dict) -> "Value":
        kind = ValueType(data["type"])
        raw = data.get("value")
        if kind is ValueType.EMPTY:
            return cls()
        if kind is ValueType.VARIABLE:
            return cls.variable(raw)
        if kind is ValueType.NAME:
            return cls.name(raw)
        if kind is ValueType.GENDER:
            return cls(Gender(raw))
        if kind is ValueType.INT:
            return cls(int(raw))
        if kind is ValueType.FLOAT:
            return cls(float(raw))
        if kind is ValueType.BOOLEAN:
            return cls(bool(raw))
        return cls(str(raw))

    def __str__(self) -> str:
        if self.type is ValueType.EMPTY:
            return "Empty"
        if self.type is ValueType.BOOLEAN:
            return "True" if self.data else "False"
        if self.type is ValueType.FLOAT:
            return repr(float(self.data))
        return str(self.data)

    def __repr__(self) -> str:
        return f"Value({self.type.name}, {self.data!r})"

    def _arith(self, other: Any, op) -> "Value":
        other = Value(other)
        a, b = self._number(), other._number()
        if a is None or b is None:
            if op is _add and self.type is ValueType.TEXT and other.type is ValueType.TEXT:
                return Value(self.data + other.data)
            return Value()
        result = op(a, b)
        return Value() if result is None else Value(result)

    def __add__(self, other: Any) -> "Value":
        return self._arith(other, _add)

    def __sub__(self, other: Any) -> "Value":
        return self._arith(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> "Value":
        return self._arith(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> "Value":
        return self._arith(other, _div)

    def __mod__(self, other: Any) -> "Value":
        return self._arith(other, _mod)

    def _compare(self, other: Any, op) -> bool:
        other = Value(other)
        a, b = self._number(), other._number()
        if a is not None and b is not None:
            return op(a, b)
        if self.type is other.type and self.type in (ValueType.TEXT, ValueType.NAME):
            return op(self.data, other.data)
        return False

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a >= b)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Value):
            try:
                other = Value(other)
            except TypeError:
                return NotImplemented
        if self.type in _NUMERIC and other.type in _NUMERIC:
            return self.data == other.data
        return self.type is other.type and self.data == other.data

    def __hash__(self) -> int:
        if self.type in _NUMERIC:
            return hash(self.data)
        return hash((self.type, self.data))

    def logical_and(self, other: Any) -> "Value":
        return Value(self.as_bool() and Value(other).as_bool())

    def logical_or(self, other: Any) -> "Value":
        return Value(self.as_bool() or Value(other).as_bool())

    def logical_not(self) -> "Value":
        return Value(not self.as_bool())


def _add(a, b):
    return a + b


def _div(a, b):
    if b == 0:
        return None
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def _mod(a, b):
    if b == 0:
        return None
    if isinstance(a, int) and isinstance(b, int):
        return a - b * _div(a, b)
    return math.fmod(a, b)