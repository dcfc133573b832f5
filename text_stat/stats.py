"""Reducers and string helpers shared by the analyzer and section statistics."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

import numpy as np

from text_stat.errors import EmptyValuesError

Number = Union[int, float]

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


class Selector(str, Enum):
    """Reducer applied to a set of lengths or counts."""

    MIN = "min"
    MAX = "max"
    AVERAGE = "average"

    @classmethod
    def coerce(cls, value: Union["Selector", str]) -> "Selector":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            expected = ", ".join(f"'{member.value}'" for member in cls)
            raise ValueError(f"Unknown selector '{value}'. Expected one of {expected}.") from None


def average(values: Iterable[Number]) -> float:
    """Mean of the non-zero values.

    Zero values are dropped before dividing, so an empty word (length 0)
    does not pull the average down.
    """

    array = np.asarray(list(values), dtype=np.float64)
    nonzero = array[array != 0]
    if nonzero.size == 0:
        raise ZeroDivisionError("Cannot average an empty set of values")
    return float(nonzero.sum() / nonzero.size)


def reduce_values(selector: Union[Selector, str], values: Iterable[Number]) -> Number:
    selector = Selector.coerce(selector)
    collected = list(values)

    if selector is Selector.AVERAGE:
        return average(collected)
    if not collected:
        raise EmptyValuesError(f"Cannot take the {selector.value} of an empty set of values")

    array = np.asarray(collected)
    extreme = array.min() if selector is Selector.MIN else array.max()
    return extreme.item()


def str_length(value: str) -> int:
    """Length in Unicode codepoints, not encoded bytes."""
    return len(value)


def to_lower_case(value: str, unicode_case_folding: bool = True) -> str:
    if unicode_case_folding:
        return value.lower()
    return value.translate(_ASCII_LOWER)
