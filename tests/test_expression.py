import math

import pytest

from dsakit.expression import (
    evaluate,
    evaluate_postfix,
    format_number,
    infix_to_postfix,
    main,
    precedence,
)

SOURCE_EXPRESSION = "12+13-5*(0.5+0.5)+1"


def test_precedence_ordering():
    assert precedence("^") > precedence("*") == precedence("/")
    assert precedence("/") > precedence("+") == precedence("-")
    assert precedence("-") > precedence("(")


def test_postfix_of_simple_expression():
    assert infix_to_postfix("1+2*3") == "1 2 3 * +"


def test_postfix_round_trip_is_stable():
    postfix = infix_to_postfix(SOURCE_EXPRESSION)
    assert evaluate_postfix(postfix) == evaluate(SOURCE_EXPRESSION)


def test_source_expression():
    assert evaluate(SOURCE_EXPRESSION) == 12 + 13 - 5 * (0.5 + 0.5) + 1


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2+3*4", 2 + 3 * 4),
        ("(2+3)*4", (2 + 3) * 4),
        ("10-4-3", (10 - 4) - 3),
        ("2^3^2", (2**3) ** 2),
        ("8/2/2", (8 / 2) / 2),
    ],
)
def test_precedence_and_left_associativity(expression, expected):
    assert evaluate(expression) == expected


def test_intermediate_values_keep_six_digits():
    assert evaluate("1/3*3") < 1


def test_format_number_uses_six_significant_digits():
    assert format_number(1234567.0) == "1.23457e+06"
    assert format_number(float(3)) == str(3)


def test_division_by_zero_gives_infinity():
    positive = evaluate("1/0")
    assert positive == math.inf
    undefined = evaluate("0/0")
    assert math.isnan(undefined) is True


@pytest.mark.parametrize("expression", ["(1+2", "1+2)", "+", "1+"])
def test_malformed_expressions_raise(expression):
    with pytest.raises(ValueError):
        evaluate(expression)


def test_postfix_with_letters_raises():
    with pytest.raises(ValueError):
        evaluate_postfix("a 1 +")


def test_main_prints_answer(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Answer is: {format_number(evaluate(SOURCE_EXPRESSION))}" in out