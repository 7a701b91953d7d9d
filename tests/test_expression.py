import pytest

from parley.expression import Expression, ExpressionError, Operator, parse_operand, parse_operator
from parley.value import RANDOM_ITEM_SELECT_VAR, Gender, Value, ValueType


def ev(text, variables=None, globals_=None):
    return Expression.parse(text).evaluate(variables or {}, globals_ or {})


def test_parse_operator():
    assert parse_operator("&&") is Operator.AND
    assert parse_operator("<>") is Operator.NOT_EQUAL
    assert parse_operator("x") is None


def test_parse_operand_kinds():
    assert parse_operand("TRUE") == Value(True)
    assert parse_operand("feminine") == Value(Gender.FEMININE)
    assert parse_operand('"say \\"hi\\""') == Value('say "hi"')
    assert parse_operand("`Bob`") == Value.name("Bob")
    assert parse_operand("{x}") == Value.variable("x")
    assert parse_operand("-5") == Value(-5)
    assert parse_operand("2.5").type is ValueType.FLOAT


def test_precedence():
    assert ev("2 + 3 * 4") == Value(14)
    assert ev("(2 + 3) * 4") == Value(20)
    assert ev("10 - 4 - 3") == Value(3)


def test_boolean_logic():
    assert ev("not false and true") == Value(True)
    assert ev("1 < 2 || false") == Value(True)


def test_variables_and_globals():
    assert ev("{x} + 1", {"x": Value(4)}) == Value(5)
    assert ev("{global.g} == 2", {}, {"g": Value(2)}) == Value(True)


def test_unset_variable_is_false():
    assert Expression.parse("{missing}").evaluate_boolean({}, {}) is False


def test_empty_expression_is_true():
    assert ev("") == Value(True)


def test_variable_names_unique():
    expr = Expression.parse("{a} + {b} * {a}")
    assert expr.variable_names == ["a", "b"]


@pytest.mark.parametrize("text", ["(1 + 2", "1 + 2)", "1 +", "gibberish", "3 -2"])
def test_bad_expressions(text):
    with pytest.raises(ExpressionError):
        Expression.parse(text)


def test_literals():
    expr = Expression.parse('"Hello"')
    assert expr.is_text_literal()
    assert expr.text_literal_value() == "Hello"
    assert not Expression.parse("{x}").is_literal()
    with pytest.raises(ExpressionError):
        Expression.parse("1").text_literal_value()


def test_random_condition():
    assert Expression.parse("{" + RANDOM_ITEM_SELECT_VAR + "} == 0").is_random_condition()
    assert not Expression.parse("{x} == 0").is_random_condition()