from __future__ import annotations

import math

import pytest

from smufl.staff_spaces import StaffSpaces


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (1, 1.0),
        (-3, -3.0),
        (0.25, 0.25),
    ],
)
def test_staff_spaces_accepts_real_numbers(raw: float, expected: float) -> None:
    spaces = StaffSpaces(raw)

    assert spaces.value == expected
    assert isinstance(spaces.value, float)


@pytest.mark.parametrize("raw", [True, "1.0", None, math.inf, math.nan])
def test_staff_spaces_rejects_non_numbers(raw: object) -> None:
    with pytest.raises(ValueError):
        StaffSpaces(raw)  # type: ignore[arg-type]


def test_staff_spaces_arithmetic_returns_new_values() -> None:
    a = StaffSpaces(1.5)
    b = StaffSpaces(0.5)

    assert a + b == StaffSpaces(2.0)
    assert a - b == StaffSpaces(1.0)
    assert a * b == StaffSpaces(0.75)
    assert a * 2 == StaffSpaces(3.0)
    assert 2 * a == StaffSpaces(3.0)
    assert a / b == StaffSpaces(3.0)
    assert a / 3 == StaffSpaces(0.5)
    assert -a == StaffSpaces(-1.5)
    assert abs(StaffSpaces(-2)) == StaffSpaces(2)
    assert a == StaffSpaces(1.5)


def test_staff_spaces_sum_and_ordering() -> None:
    values = [StaffSpaces(0.5), StaffSpaces(1.0), StaffSpaces(0.25)]

    assert sum(values) == StaffSpaces(1.75)
    assert sorted(values) == [StaffSpaces(0.25), StaffSpaces(0.5), StaffSpaces(1.0)]
    assert max(values) == StaffSpaces(1.0)
    assert StaffSpaces(1).max(StaffSpaces(2)) == StaffSpaces(2)
    assert StaffSpaces(1).min(StaffSpaces(2)) == StaffSpaces(1)
    assert StaffSpaces.zero() == StaffSpaces(0)


def test_staff_spaces_is_hashable_and_converts_to_float() -> None:
    assert {StaffSpaces(1): "a"}[StaffSpaces(1.0)] == "a"
    assert float(StaffSpaces(0.13)) == 0.13


def test_staff_spaces_does_not_add_plain_numbers() -> None:
    with pytest.raises(TypeError):
        StaffSpaces(1) + 1  # type: ignore[operator]
