from __future__ import annotations

import pytest

from text_stat.errors import EmptyValuesError
from text_stat.stats import Selector, average, reduce_values, str_length, to_lower_case


def test_reduce_values_min_max_average() -> None:
    values = [3, 1, 4, 1, 5]
    assert reduce_values(Selector.MIN, values) == 1
    assert reduce_values(Selector.MAX, values) == 5
    assert reduce_values(Selector.AVERAGE, values) == pytest.approx(2.8)


def test_reduce_values_returns_python_numbers() -> None:
    assert type(reduce_values("max", [2, 7])) is int
    assert type(reduce_values("average", [2, 7])) is float


def test_selector_coerce_accepts_names_and_rejects_unknown() -> None:
    assert Selector.coerce("MIN") is Selector.MIN
    assert Selector.coerce(Selector.AVERAGE) is Selector.AVERAGE
    with pytest.raises(ValueError, match="Unknown selector 'median'"):
        Selector.coerce("median")


def test_average_ignores_zero_values() -> None:
    assert average([0, 2, 4]) == 3.0


def test_average_of_empty_or_zero_values_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        average([])
    with pytest.raises(ZeroDivisionError):
        average([0, 0])


def test_min_max_of_empty_values_raise() -> None:
    with pytest.raises(EmptyValuesError):
        reduce_values(Selector.MIN, [])
    with pytest.raises(EmptyValuesError):
        reduce_values(Selector.MAX, [])


def test_str_length_counts_codepoints() -> None:
    assert str_length("naïve") == 5
    assert str_length("日本語") == 3


def test_to_lower_case_modes() -> None:
    assert to_lower_case("ÄBC", unicode_case_folding=True) == "äbc"
    assert to_lower_case("ÄBC", unicode_case_folding=False) == "Äbc"
