# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, SupportsIndex, Self, overload
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from functools import reduce
import builtins
import operator

from .backend import ArrayLike, get_namespace, get_index_dtype, is_array
from .digit import Digit
from .interncache import InternCache
from .normalize import Err, SequenceKey, normalize_digit, normalize_sequence, unwrap
from .sequenceof import SequenceOf

@dataclass(frozen=True, init=False)
class DigitSequence(SequenceOf[Digit]):
    """
    An immutable sequence of digits with a display width. The sequence can be
    built from a non-negative integer, a string of digits, a sequence of
    digit-likes or a one dimensional integer array. Equivalent input always
    yields the same instance::

        DigitSequence(123) is DigitSequence("123") is DigitSequence([1, 2, 3])

    Strings and sequences keep leading zeros, so ``DigitSequence("0123")`` is a
    different value than ``DigitSequence(123)``.

    Equality against raw input is not mirrored by the hash, which is the hash
    of ``(digit values, width)``: ``DigitSequence(12) == 12`` holds while
    ``12 in {DigitSequence(12)}`` does not. Convert raw keys with
    ``DigitSequence(raw)`` before using them in dicts and sets.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: Number of display positions.
    width: int

    _key: SequenceKey

    @property
    def digits(self) -> tuple[Digit, ...]:
        return self._seq_data

    #-------------------------------------------------------------------------
    #constructor

    def __new__(cls, value: Any) -> DigitSequence:
        if isinstance(value, DigitSequence):
            return value
        return cls._intern(unwrap(normalize_sequence(value)))

    @classmethod
    def _intern(cls, key: SequenceKey) -> DigitSequence:
        return _cache.get_or_build(key, lambda: cls._build(key))

    @classmethod
    def _build(cls, key: SequenceKey) -> Self:
        values, width = key
        sequence = object.__new__(cls)
        sequence._assign([Digit(v) for v in values])
        object.__setattr__(sequence, "width", width)
        object.__setattr__(sequence, "_key", key)
        return sequence

    @classmethod
    def _from_values(cls, values: tuple[int, ...]) -> DigitSequence:
        return cls._intern((values, len(values)))

    #-------------------------------------------------------------------------
    #methods

    def values(self) -> tuple[int, ...]:
        """The digits as plain integers."""
        return self._key[0]

    def first(self) -> Digit:
        if len(self) == 0:
            raise IndexError("first() of an empty DigitSequence")
        return self._seq_data[0]

    def last(self) -> Digit:
        if len(self) == 0:
            raise IndexError("last() of an empty DigitSequence")
        return self._seq_data[-1]

    @overload
    def __getitem__(self, idx: SupportsIndex) -> Digit: ...
    @overload
    def __getitem__(self, idx: builtins.slice) -> DigitSequence: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | builtins.slice) -> Digit | DigitSequence:
        if isinstance(idx, builtins.slice):
            return self._from_values(self.values()[idx])
        idx = operator.index(idx)
        if idx < -len(self) or idx >= len(self):
            raise IndexError(f"Index {idx} out of range for a DigitSequence of length {len(self)}")
        return self._seq_data[idx]

    @overload
    def slice(self, index: SupportsIndex, /) -> Digit: ...
    @overload
    def slice(self, start: SupportsIndex, length: SupportsIndex, /) -> DigitSequence: ...
    @overload
    def slice(self, span: range, /) -> DigitSequence: ...
    #implementation
    def slice(self, start: SupportsIndex | range, length: SupportsIndex | None = None, /) -> Digit | DigitSequence:
        """
        Extract a single digit or a sub-sequence.

        * ``slice(index)`` returns the digit at ``index``; negative indices count from the end.
        * ``slice(start, length)`` returns up to ``length`` digits beginning at ``start``.
        * ``slice(range(a, b))`` returns the digits at positions ``a`` to ``b - 1``.

        Sub-sequences are self-contained: their width is the number of extracted digits.
        """
        if isinstance(start, range):
            if length is not None:
                raise TypeError("slice() takes no length together with a range")
            return self[builtins.slice(start.start, start.stop, start.step)]
        if length is None:
            return self[start]

        start = operator.index(start)
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"Length must be non-negative, but got {length}")
        if start < -len(self) or start > len(self):
            raise IndexError(f"Start {start} out of range for a DigitSequence of length {len(self)}")
        if start < 0:
            start += len(self)
        return self._from_values(self.values()[start:start + length])

    def to_array(self, xp: Any) -> ArrayLike:
        """
        Return the digits as a one dimensional integer array of the namespace ``xp``
        (an array namespace or an array of that namespace).
        """
        xp = get_namespace(xp)
        return xp.asarray(list(self.values()), dtype=get_index_dtype(xp))

    #-------------------------------------------------------------------------
    #arithmetic

    def _addend_values(self, other: Any) -> tuple[int, ...] | None:
        if isinstance(other, DigitSequence):
            return other.values()
        if isinstance(other, Digit):
            return (other.value,)
        if isinstance(other, (bytes, bytearray)):
            return None
        if isinstance(other, (str, Sequence, Iterator)) or is_array(other):
            values, _ = unwrap(normalize_sequence(other))
            return values
        return None

    def __add__(self, other: Any) -> DigitSequence:
        appended = self._addend_values(other)
        if appended is None:
            return NotImplemented
        values, width = self._key
        return self._intern((values + appended, width + len(appended)))

    def __radd__(self, other: Any) -> DigitSequence:
        prepended = self._addend_values(other)
        if prepended is None:
            return NotImplemented
        values, width = self._key
        return self._intern((prepended + values, len(prepended) + width))

    def __mul__(self, times: Any) -> DigitSequence:
        if isinstance(times, bool):
            return NotImplemented
        try:
            times = operator.index(times)
        except TypeError:
            return NotImplemented
        if times < 0:
            raise ValueError(f"Repetition count must be non-negative, but got {times}")
        values, width = self._key
        return self._intern((values * times, width * times))

    __rmul__ = __mul__

    #-------------------------------------------------------------------------
    #some magic

    def __contains__(self, item: Any) -> bool:
        result = normalize_digit(item)
        return not isinstance(result, Err) and result.key in self.values()

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if isinstance(other, DigitSequence):
            return self._key == other._key
        result = normalize_sequence(other)
        if isinstance(result, Err):
            return NotImplemented
        return self._key == result.key

    def __hash__(self) -> int:
        return hash(self._key)

    def __int__(self) -> int:
        return reduce(lambda acc, d: acc * 10 + d, self.values(), 0)

    def __str__(self) -> str:
        return "".join(str(d) for d in self).zfill(self.width)

    def __repr__(self) -> str:
        return f"DigitSequence({str(self)!r})"

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict) -> Self:
        return self

    def __reduce__(self):
        return (DigitSequence, (list(self.values()),))

_cache: InternCache[SequenceKey, DigitSequence] = InternCache("DigitSequence")
