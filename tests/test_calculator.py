"""Tests for the Calculator arithmetic utility."""

import pytest

from calcdemo.calculator import Calculator

PAIRS = [(0, 0), (8, 7), (7, 8), (-3, 5), (2**31 - 1, 1), (-(2**40), 2**40 + 3)]


# --- Exact literals ---

def test_add_literal():
    assert Calculator.add(8, 7) == 15


def test_mult_literal():
    assert Calculator.mult(8, 7) == 56


def test_sub_literal():
    assert Calculator.sub(8, 7) == 1


# --- Native arithmetic ---

@pytest.mark.parametrize("a,b", PAIRS)
def test_matches_native_arithmetic(a, b):
    assert Calculator.add(a, b) == a + b
    assert Calculator.mult(a, b) == a * b
    assert Calculator.sub(a, b) == a - b


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_and_mult_commute(a, b):
    assert Calculator.add(a, b) == Calculator.add(b, a)
    assert Calculator.mult(a, b) == Calculator.mult(b, a)


@pytest.mark.parametrize("a,b", PAIRS)
def test_sub_antisymmetric(a, b):
    assert Calculator.sub(a, b) == -Calculator.sub(b, a)


def test_large_values_do_not_wrap():
    """Python ints are the native integers here: no 32-bit wraparound."""
    assert Calculator.add(2**31 - 1, 1) == 2**31

