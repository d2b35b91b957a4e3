# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Conversion of raw input into the keys the value types are interned under.
Construction and cross-type comparison both go through these functions, so a
raw value compares equal to an instance exactly when it would construct it.
"""

from typing import Any, Iterable
from collections.abc import Iterator, Sequence, Mapping, Set
from types import NoneType
from dataclasses import dataclass
import operator

from .backend import is_array, array_digit_values
from .errors import InvalidValueError, InvalidDigitError, InvalidDigitSequenceError

#: Key of a digit sequence: the digit values and the display width.
SequenceKey = tuple[tuple[int, ...], int]

_DIGIT_CHARS = "0123456789"

@dataclass(frozen=True)
class Ok[K]:
    key: K

@dataclass(frozen=True)
class Err:
    error: InvalidValueError

type Normalized[K] = Ok[K] | Err

def unwrap[K](result: Normalized[K]) -> K:
    """Return the key of a successful normalization or raise the carried error."""
    if isinstance(result, Err):
        raise result.error
    return result.key

def normalize_digit(raw: Any) -> Ok[int] | Err:
    """
    Normalize a digit-like value (an integer-like in [0, 9] or a single digit
    character) to its integer value.
    """
    if isinstance(raw, str):
        if len(raw) == 1 and raw in _DIGIT_CHARS:
            return Ok(_DIGIT_CHARS.index(raw))
        return Err(InvalidDigitError(raw))
    if isinstance(raw, bool):
        return Err(InvalidDigitError(raw))
    try:
        value = operator.index(raw)
    except TypeError:
        return Err(InvalidDigitError(raw))
    if value < 0 or value > 9:
        return Err(InvalidDigitError(raw))
    return Ok(value)

def _normalize_elements(elements: Iterable[Any]) -> Ok[SequenceKey] | Err:
    values = []
    for element in elements:
        result = normalize_digit(element)
        if isinstance(result, Err):
            return result
        values.append(result.key)
    return Ok((tuple(values), len(values)))

def _decimal_digits(number: int) -> list[int]:
    digits = [number % 10]
    number //= 10
    while number > 0:
        number, digit = divmod(number, 10)
        digits.append(digit)
    return digits[::-1]

def normalize_sequence(raw: Any) -> Ok[SequenceKey] | Err:
    """
    Normalize raw input to ``(digit values, width)``. Integers give their base-10
    digits, strings and sequences one digit per element, so leading zeros are
    kept only by strings and sequences.
    """
    if isinstance(raw, (NoneType, bool, bytes, bytearray, Mapping, Set)):
        return Err(InvalidDigitSequenceError(raw))
    if isinstance(raw, str):
        return _normalize_elements(raw)
    if isinstance(raw, (Sequence, Iterator)):
        return _normalize_elements(raw)
    try:
        number = operator.index(raw)
    except TypeError:
        number = None
    if number is not None:
        if number < 0:
            return Err(InvalidDigitSequenceError(raw))
        return _normalize_elements(_decimal_digits(number))
    if is_array(raw):
        values = array_digit_values(raw)
        if values is None:
            return Err(InvalidDigitSequenceError(raw))
        return _normalize_elements(values)
    return Err(InvalidDigitSequenceError(raw))
