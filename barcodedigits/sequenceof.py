# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import sys
from typing import Iterator, Sequence, SupportsIndex, Any
from dataclasses import dataclass

@dataclass(frozen=True, init=False, eq=False)
class SequenceOf[T](Sequence):
    """
    Immutable sequence over a tuple of items. Subclasses set ``_seq_data``
    once, when the instance is built, and provide ``__getitem__``.
    """

    _seq_data: tuple[T, ...]

    def _assign(self, data: Sequence[T]) -> None:
        object.__setattr__(self, "_seq_data", tuple(data))

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self._seq_data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._seq_data)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._seq_data)

    def index(self, value: Any, start: SupportsIndex = 0, stop: SupportsIndex = sys.maxsize) -> int:
        return self._seq_data.index(value, start, stop)

    def count(self, value: Any) -> int:
        return self._seq_data.count(value)
