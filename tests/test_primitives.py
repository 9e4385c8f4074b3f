import math

import pytest

from frogs.primitives import (
    absolute,
    cube,
    format_real,
    one,
    sqr,
    sqrt,
    to_str,
    zero,
)


class _Unitful:
    def __init__(self, amount):
        self.amount = amount

    def one(self):
        return _Unitful(1.0)

    def zero(self):
        return _Unitful(0.0)

    def sqrt(self):
        return _Unitful(math.sqrt(self.amount))

    def __str__(self):
        return f"{self.amount} things"


@pytest.mark.parametrize("value", [20.0, 2.5, 100.0, 0.125, -7.75, 12345.5])
def test_format_real_round_trips_and_has_no_trailing_zero(value):
    text = format_real(value)
    assert float(text) == value
    assert not text.endswith(".")
    if "." in text:
        assert not text.endswith("0")


def test_format_real_zero():
    assert format_real(0.0) == "0"


def test_format_real_keeps_six_decimals():
    assert format_real(1 / 3) == "0.333333"


def test_format_real_whole_number_has_no_dot():
    assert format_real(20.0) == "20"
    assert format_real(-2.5) == "-2.5"


def test_to_str_integer_and_real():
    assert to_str(7) == "7"
    assert to_str(2.0) == "2"
    assert to_str(True) == "1"


def test_to_str_uses_object_str():
    assert to_str(_Unitful(3)) == "3 things"


def test_one_and_zero_of_numbers():
    assert one(3) == 1 and isinstance(one(3), int)
    assert zero(3) == 0 and isinstance(zero(3), int)
    assert one(2.5) == 1.0 and isinstance(one(2.5), float)
    assert zero(2.5) == 0.0 and isinstance(zero(2.5), float)


def test_one_and_zero_delegate_to_object():
    assert one(_Unitful(5.0)).amount == 1.0
    assert zero(_Unitful(5.0)).amount == 0.0


def test_one_zero_reject_unknown():
    with pytest.raises(TypeError):
        one("x")
    with pytest.raises(TypeError):
        zero("x")


@pytest.mark.parametrize("value", [0.0, 2.0, 9.0, 1e6])
def test_sqrt_inverts_sqr(value):
    assert sqrt(sqr(value)) == pytest.approx(value)


def test_sqrt_of_negative_is_nan():
    result = sqrt(-1.0)
    assert str(result) == "nan"


def test_sqrt_delegates_to_object():
    assert sqrt(_Unitful(16.0)).amount == pytest.approx(4.0)


def test_sqrt_rejects_unknown():
    with pytest.raises(TypeError):
        sqrt("x")


@pytest.mark.parametrize("value", [-3, 3, -2.5, 0.0])
def test_absolute_is_non_negative(value):
    result = absolute(value)
    assert result >= 0
    assert result in (value, -value)


@pytest.mark.parametrize("value", [2, -3, 1.5])
def test_cube_over_value_is_square(value):
    assert cube(value) / value == pytest.approx(sqr(value))