"""Tests for the arithmetic expression evaluator."""

import math

import pytest

from core.evaluator import (
    BinaryOp,
    ExpressionError,
    Negate,
    Number,
    evaluate,
    parse,
    tokenize,
)


# --- Agreement with Python's own arithmetic ---

@pytest.mark.parametrize("expression", [
    "2+3",
    "10-4",
    "3*7",
    "15/4",
    "2+3*4",
    "(2+3)*4",
    "10-4-3",
    "100/10/5",
    "2*(3+4)*5",
    "-2*3",
    "2*-3",
    "2--3",
    "-(2+3)*4",
    "1.5+.5",
    "0.1+0.2",
    "((1))",
    "7 / 2 - 1",
    "3-(4-(5-6))",
])
def test_matches_reference_arithmetic(expression):
    assert evaluate(expression) == pytest.approx(eval(expression))


def test_trailing_decimal_point():
    assert evaluate("5.") == 5.0


def test_result_is_float():
    assert isinstance(evaluate("4"), float)


# --- Tree shape ---

def test_precedence_builds_expected_tree():
    tree = parse("1+2*3")
    assert isinstance(tree, BinaryOp)
    assert tree.op == "+"
    assert isinstance(tree.left, Number)
    assert isinstance(tree.right, BinaryOp) and tree.right.op == "*"


def test_same_precedence_is_left_associative():
    tree = parse("8-4-2")
    assert tree.op == "-"
    assert isinstance(tree.left, BinaryOp) and tree.left.op == "-"
    assert tree.evaluate() == 2.0


def test_unary_minus_node():
    tree = parse("-5")
    assert isinstance(tree, Negate)
    assert tree.evaluate() == -5.0


def test_tokenize_positions():
    tokens = tokenize("12 + (3)")
    assert [t.type for t in tokens] == ["NUMBER", "OPERATOR", "LPAREN", "NUMBER", "RPAREN", "EOF"]
    assert [t.position for t in tokens] == [0, 3, 5, 6, 7, 8]


# --- Division by zero yields IEEE values, not exceptions ---

def test_division_by_zero_is_infinite():
    assert evaluate("1/0") == math.inf


def test_negative_division_by_zero():
    assert evaluate("-1/0") == -math.inf


def test_division_by_negative_zero():
    assert evaluate("1/-0") == -math.inf


def test_zero_over_zero_is_nan():
    assert math.isnan(evaluate("0/0"))


# --- Failures ---

@pytest.mark.parametrize("expression", [
    "",
    "   ",
    "2+",
    "2*",
    "(2+3",
    "2+3)",
    "()",
    "*2",
    "+5",
    "2**3",
    "2 3",
    "2a",
    "2^3",
    "1.2.3",
    ".",
])
def test_invalid_expressions_raise(expression):
    with pytest.raises(ExpressionError):
        evaluate(expression)


def test_error_is_a_value_error_with_message():
    with pytest.raises(ValueError) as excinfo:
        evaluate("")
    assert str(excinfo.value)


def test_invalid_character_reports_position():
    with pytest.raises(ExpressionError) as excinfo:
        evaluate("1+x")
    assert excinfo.value.position == 2
    assert "x" in str(excinfo.value)


def test_unmatched_open_paren_message():
    with pytest.raises(ExpressionError, match=r"Unmatched '\('"):
        evaluate("(1+2")


def test_unmatched_close_paren_message():
    with pytest.raises(ExpressionError, match=r"Unmatched '\)'"):
        evaluate("1+2)")


def test_deep_nesting_is_reported_not_crashing():
    expression = "(" * 5000 + "1" + ")" * 5000
    with pytest.raises(ExpressionError):
        evaluate(expression)


@pytest.mark.parametrize("expression", ["2²", "³", "1+¹", "٣"])
def test_non_ascii_digits_are_invalid_characters(expression):
    with pytest.raises(ExpressionError, match="Invalid character"):
        evaluate(expression)


def test_parse_reports_deep_nesting():
    expression = "(" * 5000 + "1" + ")" * 5000
    with pytest.raises(ExpressionError):
        parse(expression)
