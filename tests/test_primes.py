import io
import sys

import pytest

from dailykit.primes import is_prime, main, primes_up_to


@pytest.mark.parametrize("number", [0, 1])
def test_small_numbers_are_not_prime(number):
    assert is_prime(number) is False


def test_two_is_prime():
    assert is_prime(2) is True


@pytest.mark.parametrize("p, q", [(2, 2), (3, 3), (5, 5), (7, 7), (3, 11), (13, 17)])
def test_products_are_composite(p, q):
    assert is_prime(p * q) is False


def test_primes_up_to_ten():
    assert primes_up_to(10) == [2, 3, 5, 7]


def test_primes_up_to_below_two_is_empty():
    assert primes_up_to(1) == []


def test_primes_up_to_invariants():
    primes = primes_up_to(200)
    assert primes == sorted(set(primes))
    assert all(is_prime(p) for p in primes)
    missing = [n for n in range(2, 201) if n not in primes]
    assert not any(is_prime(n) for n in missing)
    for n in missing:
        assert any(n % p == 0 for p in primes if p < n)


def test_primes_up_to_is_prefix_of_larger_limit():
    small = primes_up_to(50)
    assert primes_up_to(100)[: len(small)] == small


def _run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_prime(monkeypatch, capsys):
    assert _run(monkeypatch, "7\n") == 0
    out = capsys.readouterr().out
    assert "✅ 7 is a prime number." in out
    assert "🔢 Prime numbers up to 7:" in out


def test_main_composite(monkeypatch, capsys):
    _run(monkeypatch, "9\n")
    assert "❌ 9 is not a prime number." in capsys.readouterr().out


def test_main_rejects_one(monkeypatch, capsys):
    _run(monkeypatch, "1\n")
    assert "❌ The number must be greater than 1." in capsys.readouterr().out


@pytest.mark.parametrize("text", ["x\n", "-3\n", "\n"])
def test_main_rejects_invalid(monkeypatch, capsys, text):
    _run(monkeypatch, text)
    assert "❌ Please enter a valid positive integer." in capsys.readouterr().out