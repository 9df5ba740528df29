import math
import warnings
from concurrent.futures import ThreadPoolExecutor

import pytest

from config.config import DEMO_EXPRESSIONS
from core import (
    IncompleteExpression, MismatchedParenthesis, UnrecognizedToken,
    evaluate, evaluate_tree, parse
)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("3 + 4 * 2", 11.0),
        ("(3 + 4) * 2", 14.0),
        ("2^3^2", 512.0),
        ("8 - 3 - 2", 3.0),
        ("8 / 4 / 2", 1.0),
        ("2 * 3 ^ 2", 18.0),
        ("7 % 4", 3.0),
        ("-7 % 3", -1.0),
        ("-4 + 5", 1.0),
        ("-2^2", 4.0),
        ("-sin(0)", 0.0),
        ("max(2,3)", 3.0),
        ("max(2,3)*2", 6.0),
        ("-max(-2, 3)", -3.0),
        ("sqrt(16) + 1", 5.0),
        ("cos(0)", 1.0),
        ("rc - 1", 1728.0),
        ("1e3 + 1", 1001.0),
        ("1E3", 1000.0),
        ("-pi * 2", -2 * math.pi),
        ("-e", -math.e),
    ],
)
def test_evaluate(expression, expected):
    assert evaluate(expression) == pytest.approx(expected)


@pytest.mark.parametrize(
    "expression",
    ["1 + 2 * 3 - 4 / 5", "(1 + 2) * (3 - 4) / 5", "10 % 4 * 3 + 2", "100 / 10 / 5 - 1 * 2"],
)
def test_matches_standard_precedence(expression):
    assert evaluate(expression) == pytest.approx(float(eval(expression)))


@pytest.mark.parametrize("pair", [("SIN(0)", "sin(0)"), ("Pi", "pi"), ("MAX(1, E)", "max(1, e)")])
def test_case_insensitive(pair):
    upper, lower = pair
    assert evaluate(upper) == evaluate(lower)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("   -123 + 12 * 3  ", -87.0),
        ("(2 * 3) + 1", 7.0),
        ("(-1 + 2) * 3", 3.0),
        (" 3 + 4 * 2/(1-5)^2^3", 3.0001220703125),
        ("5 * 3 + (4 + 2 % 2 * 8)", 19.0),
        ("-123 + 4 - 16 +(-3-4)-6", -148.0),
        ("-Pi + 3.2 - 4 + (-3 + 2)-E*3", -math.pi - 1.8 - 3 * math.e),
        ("2.398+14.23+3-e*3+(-3)", 16.628 - 3 * math.e),
        (",-123,,+cos(-3)", -123 + math.cos(-3)),
        ("-sin ( max ( 2, 3 ) / 3 * PI )", -math.sin(math.pi)),
        ("-sqrt(2)", -math.sqrt(2)),
    ],
)
def test_demo_expressions(expression, expected):
    assert expression in DEMO_EXPRESSIONS
    assert evaluate(expression) == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("expression", ["(1+2", "1+2)", "max(1,2"])
def test_mismatched_parenthesis_never_yields_a_number(expression):
    with pytest.raises(MismatchedParenthesis):
        evaluate(expression)


@pytest.mark.parametrize("expression", ["-(3)", "", "   ", "()", "1 +", "2 * -3", "max(2, -3)", "1 2"])
def test_incomplete_expressions(expression):
    with pytest.raises(IncompleteExpression):
        evaluate(expression)


def test_unrecognized_token_keeps_original_text():
    with pytest.raises(UnrecognizedToken) as excinfo:
        evaluate("2 + Foo")
    assert excinfo.value.token == "foo"
    assert excinfo.value.expression == "2 + Foo"
    assert "foo" in str(excinfo.value)


def test_ieee_results_are_values_not_errors():
    assert evaluate("1/0") == math.inf
    assert evaluate("-1/0") == -math.inf
    assert math.isnan(evaluate("0/0"))
    assert math.isnan(evaluate("sqrt(-1)"))
    assert math.isnan(evaluate("2 % 0"))


def test_repeated_evaluation_is_bit_identical():
    expression = "-sin ( max ( 2, 3 ) / 3 * PI ) + 2^0.5"
    first = evaluate(expression)
    second = evaluate(expression)
    assert first.hex() == second.hex()


def test_tree_can_be_evaluated_more_than_once():
    rpn, tree = parse("-sqrt(9) * (1 + 2)")
    assert [t.value for t in rpn] == ["9", "-sqrt", "1", "2", "+", "*"]
    assert evaluate_tree(tree) == evaluate_tree(tree) == -9.0


def test_concurrent_evaluation():
    expressions = ["1 + 2", "2^10", "-max(3, 4)", "sqrt(81)"] * 25
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(evaluate, expressions))
    assert results == [3.0, 1024.0, -4.0, 9.0] * 25


def test_double_minus_is_incomplete():
    with pytest.raises(IncompleteExpression):
        evaluate("--3")


@pytest.mark.parametrize("depth", [1500, 5000])
def test_deep_expressions_do_not_hit_recursion_limit(depth):
    assert evaluate("+".join(["1"] * depth)) == float(depth)
    assert evaluate("(" * depth + "2" + ")" * depth) == 2.0
    assert evaluate("sqrt(" * depth + "1" + ")" * depth) == 1.0


def test_deep_right_nested_power():
    # 2^1^1^...^1 向右嵌套
    assert evaluate("2" + "^1" * 3000) == 2.0


def test_warnings_are_suppressed():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert evaluate("1e308 + 1e308") == math.inf
        assert evaluate("-1e308 - 1e308") == -math.inf
        assert math.isnan(evaluate("sin(1e308 * 10)"))
        assert math.isnan(evaluate("cos(1e308 * 10) + 1"))
