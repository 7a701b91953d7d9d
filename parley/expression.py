"""Parsing and evaluation of dialogue expressions (shunting-yard to postfix)."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Mapping, Union

from .names import global_variable_name, is_global_variable
from .value import RANDOM_ITEM_SELECT_VAR, Gender, Value, ValueType

log = logging.getLogger(__name__)


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


class Operator(Enum):
    """Expression operators; lower precedence number binds tighter."""

    NOT = "not"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    ADD = "+"
    SUBTRACT = "-"
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    EQUAL = "=="
    NOT_EQUAL = "!="
    AND = "and"
    OR = "or"
    LPAREN = "("
    RPAREN = ")"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def is_binary(self) -> bool:
        return self is not Operator.NOT


_PRECEDENCE = {
    Operator.NOT: 0,
    Operator.MULTIPLY: 1, Operator.DIVIDE: 1, Operator.MODULO: 1,
    Operator.ADD: 2, Operator.SUBTRACT: 2,
    Operator.LESS: 3, Operator.LESS_EQUAL: 3, Operator.GREATER: 3, Operator.GREATER_EQUAL: 3,
    Operator.EQUAL: 4, Operator.NOT_EQUAL: 4,
    Operator.AND: 5,
    Operator.OR: 6,
    Operator.LPAREN: 100, Operator.RPAREN: 100,
}

_OPERATOR_SYMBOLS = {
    "+": Operator.ADD, "-": Operator.SUBTRACT, "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE, "%": Operator.MODULO,
    "and": Operator.AND, "&&": Operator.AND,
    "or": Operator.OR, "||": Operator.OR,
    "not": Operator.NOT, "!": Operator.NOT,
    "==": Operator.EQUAL, "=": Operator.EQUAL,
    ">=": Operator.GREATER_EQUAL, ">": Operator.GREATER,
    "<=": Operator.LESS_EQUAL, "<": Operator.LESS,
    "<>": Operator.NOT_EQUAL, "!=": Operator.NOT_EQUAL,
    "(": Operator.LPAREN, ")": Operator.RPAREN,
}

_LEXEME = re.compile(
    r'(\{[\w\.]+\}|-?\d+(?:\.\d*)?|[-+*/%()]|and|&&|\|\||or|not|<>|!=|!|<=?|>=?|==?'
    r'|[mM]asculine|[fF]eminine|[nN]euter|[tT]rue|[fF]alse|"(?:[^"\\]|\\.)*"|`([^`]*)`)'
)
_QUOTED = re.compile(r'^"((?:[^"\\]|\\.)*)"$', re.DOTALL)
_NAME = re.compile(r"^`([^`]*)`$")
_VARIABLE = re.compile(r"^\{([^}]*)\}$")
_INT = re.compile(r"^\s*[-+]?\d+\s*$")

_LITERALS = {
    "true": True, "false": False,
    "masculine": Gender.MASCULINE, "feminine": Gender.FEMININE, "neuter": Gender.NEUTER,
}

Item = Union[Operator, Value]


def parse_operator(text: str) -> Operator | None:
    """The operator for a piece of text, or None if it is not one."""
    return _OPERATOR_SYMBOLS.get(text)


def parse_operand(text: str) -> Value | None:
    """The operand value for a piece of text, or None if it is not recognised."""
    literal = _LITERALS.get(text.lower())
    if literal is not None:
        return Value(literal)
    if match := _QUOTED.match(text):
        return Value(match.group(1).replace('\\"', '"'))
    if match := _NAME.match(text):
        return Value.name(match.group(1))
    if match := _VARIABLE.match(text):
        return Value.variable(match.group(1))
    if _INT.match(text):
        return Value(int(text))
    try:
        return Value(float(text))
    except ValueError:
        return None


def _apply(op: Operator, a: Value, b: Value) -> Value:
    if op is Operator.NOT:
        return a.logical_not()
    if op is Operator.MULTIPLY:
        return a * b
    if op is Operator.DIVIDE:
        return a / b
    if op is Operator.MODULO:
        return a % b
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.LESS:
        return Value(a < b)
    if op is Operator.LESS_EQUAL:
        return Value(a <= b)
    if op is Operator.GREATER:
        return Value(a > b)
    if op is Operator.GREATER_EQUAL:
        return Value(a >= b)
    if op is Operator.EQUAL:
        return Value(a == b)
    if op is Operator.NOT_EQUAL:
        return Value(a != b)
    if op is Operator.AND:
        return a.logical_and(b)
    if op is Operator.OR:
        return a.logical_or(b)
    return Value()


def _resolve(operand: Value, variables: Mapping[str, Value], global_variables: Mapping[str, Value]) -> Value:
    if operand.is_variable():
        name = operand.data
        if is_global_variable(name):
            found = global_variables.get(global_variable_name(name))
            if found is not None:
                return found
        found = variables.get(name)
        if found is not None:
            return found
    return operand


def _run(queue: list[Item], variables, global_variables) -> Value | None:
    stack: list[Value] = []
    for item in queue:
        if isinstance(item, Operator):
            b = Value()
            if item.is_binary:
                if not stack:
                    return None
                b = _resolve(stack.pop(), variables, global_variables)
            if not stack:
                return None
            a = _resolve(stack.pop(), variables, global_variables)
            stack.append(_apply(item, a, b))
        else:
            stack.append(item)
    if len(stack) != 1:
        return None
    return _resolve(stack[0], variables, global_variables)


class Expression:
    """A parsed expression held as a postfix queue; empty means true."""

    def __init__(self) -> None:
        self.queue: list[Item] = []
        self.variable_names: list[str] = []
        self.source_string = ""

    @classmethod
    def parse(cls, text: str) -> "Expression":
        """Parse text into an expression, raising ExpressionError if it is malformed."""
        expr = cls()
        expr.source_string = text
        queue: list[Item] = []
        ops: list[Operator] = []
        for match in _LEXEME.finditer(text):
            lexeme = match.group(1)
            op = parse_operator(lexeme)
            if op is Operator.LPAREN:
                ops.append(op)
            elif op is Operator.RPAREN:
                while ops and ops[-1] is not Operator.LPAREN:
                    queue.append(ops.pop())
                if not ops:
                    raise ExpressionError("Mismatched parentheses")
                ops.pop()
            elif op is not None:
                left = op is not Operator.NOT
                while ops and (
                    ops[-1].precedence < op.precedence
                    or (ops[-1].precedence <= op.precedence and left)
                ):
                    queue.append(ops.pop())
                ops.append(op)
            else:
                operand = parse_operand(lexeme)
                if operand is None:
                    raise ExpressionError(f"Unrecognised token {lexeme}")
                queue.append(operand)
        while ops:
            op = ops.pop()
            if op in (Operator.LPAREN, Operator.RPAREN):
                raise ExpressionError("Mismatched parentheses")
            queue.append(op)

        if (text and not queue) or (queue and _run(queue, {}, {}) is None):
            raise ExpressionError(f"Bad expression '{text}'")
        expr.queue = queue
        for item in queue:
            if isinstance(item, Value) and item.is_variable() and item.data not in expr.variable_names:
                expr.variable_names.append(item.data)
        return expr

    def evaluate(self, variables: Mapping[str, Value], global_variables: Mapping[str, Value]) -> Value:
        """Evaluate with the given local and global variables."""
        if not self.queue:
            return Value(True)
        result = _run(self.queue, variables, global_variables)
        if result is None:
            raise ExpressionError(f"Bad expression '{self.source_string}'")
        return result

    def evaluate_boolean(self, variables, global_variables, error_context: str = "") -> bool:
        """Evaluate as a condition; unresolved variables count as false."""
        result = self.evaluate(variables, global_variables)
        if result.type not in (ValueType.BOOLEAN, ValueType.VARIABLE):
            log.error("%s: Condition '%s' did not return a boolean result", error_context, self.source_string)
        return result.as_bool()

    def is_random_condition(self) -> bool:
        if self.queue and isinstance(self.queue[0], Value):
            first = self.queue[0]
            return first.is_variable() and first.data == RANDOM_ITEM_SELECT_VAR
        return False

    def is_literal(self) -> bool:
        return (
            len(self.queue) == 1
            and isinstance(self.queue[0], Value)
            and not self.queue[0].is_variable()
        )

    def is_text_literal(self) -> bool:
        return self.is_literal() and self.queue[0].type is ValueType.TEXT

    def text_literal_value(self) -> str:
        if not self.is_text_literal():
            raise ExpressionError("Expression is not a text literal")
        return self.queue[0].data