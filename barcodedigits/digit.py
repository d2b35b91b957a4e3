# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Self
from dataclasses import dataclass
import operator

from .interncache import InternCache
from .normalize import Err, normalize_digit, unwrap

@dataclass(frozen=True, init=False)
class Digit:
    """
    A single decimal digit. There is exactly one instance per value, so
    ``Digit(4) is Digit("4")``. Digits compare equal to the raw values they are
    built from and behave like small integers in arithmetic.

    The hash is the hash of the integer value, so digits and plain integers
    share dict and set entries. Digit characters compare equal but hash
    differently: ``"4" in {Digit(4)}`` is False.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The value of the digit, between 0 and 9.
    value: int

    #----------------------------------------------------------------------
    #constructor

    def __new__(cls, value: Any) -> Digit:
        if isinstance(value, Digit):
            return value
        key = unwrap(normalize_digit(value))
        return _cache.get_or_build(key, lambda: cls._build(key))

    @classmethod
    def _build(cls, value: int) -> Self:
        digit = object.__new__(cls)
        object.__setattr__(digit, "value", value)
        return digit

    #----------------------------------------------------------------------
    #comparison

    def _other_value(self, other: Any) -> int | None:
        result = normalize_digit(other)
        if isinstance(result, Err):
            return None
        return result.key

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value == value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Any) -> bool:
        value = self._other_value(other)
        return NotImplemented if value is None else self.value < value

    def __le__(self, other: Any) -> bool:
        value = self._other_value(other)
        return NotImplemented if value is None else self.value <= value

    def __gt__(self, other: Any) -> bool:
        value = self._other_value(other)
        return NotImplemented if value is None else self.value > value

    def __ge__(self, other: Any) -> bool:
        value = self._other_value(other)
        return NotImplemented if value is None else self.value >= value

    #----------------------------------------------------------------------
    #integer behaviour

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Any) -> int:
        if isinstance(other, (Digit, int)) and not isinstance(other, bool):
            return self.value + operator.index(other)
        return NotImplemented

    __radd__ = __add__

    def __mul__(self, other: Any) -> int:
        if isinstance(other, (Digit, int)) and not isinstance(other, bool):
            return self.value * operator.index(other)
        return NotImplemented

    __rmul__ = __mul__

    #----------------------------------------------------------------------
    #identity preserving copies

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict) -> Self:
        return self

    def __reduce__(self):
        return (Digit, (self.value,))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Digit({self.value})"

_cache: InternCache[int, Digit] = InternCache("Digit")
