import io
import sys

import pytest

from dailykit.calculator import CalculatorError, evaluate, main


def test_worked_example():
    assert evaluate("4 + 5") == 9.0


def test_prompt_example():
    assert evaluate("5 + 3") == 8.0


def test_underscore_subtracts():
    assert evaluate("7 _ 2") == 5.0


@pytest.mark.parametrize("a,b", [("2", "3"), ("1.5", "-4"), ("0", "9")])
def test_addition_and_multiplication_commute(a, b):
    assert evaluate(f"{a} + {b}") == evaluate(f"{b} + {a}")
    assert evaluate(f"{a} * {b}") == evaluate(f"{b} * {a}")


@pytest.mark.parametrize("a,b", [(10.0, 4.0), (-3.0, 0.5), (7.25, 2.0)])
def test_division_inverts_multiplication(a, b):
    assert evaluate(f"{a} / {b}") * b == pytest.approx(a)


def test_extra_whitespace_is_ignored():
    assert evaluate("   6    *   7  ") == evaluate("6 * 7")


def test_divide_by_zero():
    with pytest.raises(CalculatorError, match="Cannot divide by zero"):
        evaluate("1 / 0")


def test_minus_sign_is_not_an_operator():
    with pytest.raises(CalculatorError, match="Invalid operator"):
        evaluate("4 - 5")


@pytest.mark.parametrize("expression", ["", "4 +", "4 + 5 + 6", "4+5"])
def test_wrong_token_count(expression):
    with pytest.raises(CalculatorError, match="follow the format"):
        evaluate(expression)


def test_invalid_first_number():
    with pytest.raises(CalculatorError, match="Invalid first number"):
        evaluate("x + 5")


def test_invalid_second_number_checked_before_operator():
    with pytest.raises(CalculatorError, match="Invalid second number"):
        evaluate("4 ? y")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate("a b c")


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4 + 5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "🧮 Simple Rust Calculator" in out
    assert "✅ Result:" in out


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("8 / 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "❌ Undefined operation. Cannot divide by zero" in out
    assert "✅ Result:" not in out