"""Tests for the button calculator interpreter."""

import math

import pytest

from core.calculator import (
    Calculator,
    apply_operator,
    format_number,
    parse_number,
    NO_OPERATOR,
)


@pytest.fixture
def calc():
    return Calculator()


def press_all(calc, keys):
    for key in keys:
        calc.press(key)
    return calc.get_display()


# --- apply_operator ---

@pytest.mark.parametrize("a, b, op, expected", [
    (2.0, 3.0, "+", 5.0),
    (10.0, 4.0, "-", 6.0),
    (3.0, 7.0, "*", 21.0),
    (15.0, 4.0, "/", 3.75),
    (-2.5, 0.5, "*", -1.25),
])
def test_apply_matches_arithmetic(a, b, op, expected):
    assert apply_operator(a, b, op) == pytest.approx(expected)


def test_apply_division_by_zero_is_nan():
    assert math.isnan(apply_operator(7.0, 0.0, "/"))
    assert math.isnan(apply_operator(0.0, 0.0, "/"))


def test_apply_without_operator_returns_right_operand():
    assert apply_operator(9.0, 4.0, NO_OPERATOR) == 4.0
    assert apply_operator(9.0, 4.0, "%") == 4.0


# --- format_number ---

def test_format_number():
    assert format_number(5.0) == "5.0"
    assert format_number(0.25) == "0.25"
    assert format_number(-0.0) == "-0.0"
    assert format_number(math.nan) == "NaN"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


@pytest.mark.parametrize("value, expected", [
    (9999999.0, "9999999.0"),
    (1e7, "1.0E7"),
    (1e16, "1.0E16"),
    (-123456789.0, "-1.23456789E8"),
    (0.001, "0.001"),
    (0.0009, "9.0E-4"),
    (1.5e-10, "1.5E-10"),
])
def test_format_number_scientific_range(value, expected):
    assert format_number(value) == expected


# --- parse_number ---

@pytest.mark.parametrize("text, expected", [
    ("42", 42.0),
    (" 3.5 ", 3.5),
    ("-2", -2.0),
    ("1e3", 1000.0),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_nan():
    assert math.isnan(parse_number("NaN"))


@pytest.mark.parametrize("text", ["", "abc", "1_000", "nan", "inf", "infinity", "Error5", "+-5"])
def test_parse_number_rejects(text):
    with pytest.raises(ValueError):
        parse_number(text)


# --- Button sequences ---

def test_initial_state(calc):
    assert calc.display == ""
    assert calc.accumulator == 0.0
    assert calc.pending_operator == NO_OPERATOR


def test_digits_are_appended(calc):
    assert press_all(calc, "1203") == "1203"


def test_long_numbers_are_accepted(calc):
    digits = "9" * 40
    assert press_all(calc, digits) == digits


def test_two_plus_three(calc):
    assert press_all(calc, ["2", "+", "3", "="]) == "5.0"


def test_operator_clears_display_and_stores_operand(calc):
    press_all(calc, ["1", "2", "*"])
    assert calc.display == ""
    assert calc.accumulator == 12.0
    assert calc.pending_operator == "*"


def test_divide_by_zero_shows_nan(calc):
    assert press_all(calc, ["8", "/", "0", "="]) == "NaN"


def test_operator_on_empty_display_is_error(calc):
    assert calc.on_operator("+") == "Error"
    assert calc.pending_operator == NO_OPERATOR
    assert calc.accumulator == 0.0


def test_failed_operator_keeps_previous_operand(calc):
    press_all(calc, ["4", "-"])
    assert calc.on_operator("*") == "Error"
    assert calc.accumulator == 4.0
    assert calc.pending_operator == "-"


def test_equals_on_empty_display_is_error(calc):
    press_all(calc, ["4", "-"])
    assert calc.on_equals() == "Error"


def test_digit_after_error_stays_error(calc):
    calc.on_operator("+")
    calc.press("5")
    assert calc.display == "Error5"
    assert calc.on_equals() == "Error"


def test_equals_without_operator_shows_operand(calc):
    assert press_all(calc, ["4", "2", "="]) == "42.0"


def test_consecutive_operators_keep_last_entry(calc):
    # 2 + 3 * 4 = → el acumulador es 3 y el operador "*"
    assert press_all(calc, ["2", "+", "3", "*", "4", "="]) == "12.0"


def test_repeated_equals_reapplies_pending_operator(calc):
    press_all(calc, ["2", "+", "3", "="])
    assert calc.on_equals() == "7.0"


def test_result_can_be_used_as_operand(calc):
    assert press_all(calc, ["6", "*", "2", "=", "/", "4", "="]) == "3.0"


def test_unknown_key_is_ignored(calc):
    press_all(calc, ["1", "x", "%", "2"])
    assert calc.display == "12"


# --- Clear ---

@pytest.mark.parametrize("keys", [
    [],
    ["5"],
    ["5", "+"],
    ["5", "+", "6", "="],
    ["+"],
])
def test_clear_restores_initial_state(calc, keys):
    press_all(calc, keys)
    calc.on_clear()
    calc.on_clear()
    assert (calc.display, calc.accumulator, calc.pending_operator) == ("", 0.0, NO_OPERATOR)


def test_error_followed_by_digits_is_still_error(calc):
    calc.on_operator("+")
    assert calc.is_error()
    calc.press("5")
    assert calc.is_error()
    calc.on_clear()
    assert not calc.is_error()
