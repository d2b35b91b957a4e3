# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Hashable, MutableMapping
from enum import Enum
import logging
import threading
import weakref

logger = logging.getLogger(__name__)

class Retention(Enum):
    #: Instances live as long as the process.
    STRONG = 0
    #: Instances are dropped from the cache once nothing else references them.
    WEAK = 1

class InternCache[K: Hashable, V]:
    """
    Maps normalized keys to the single live instance built for that key.
    Two lookups with equal keys always return the same object while it is alive.
    """

    #-------------------------------------------------------------------------
    #members

    #: Name used in log records.
    name: str

    #: How long cached instances are kept.
    retention: Retention

    _instances: MutableMapping[K, V]

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, name: str, *, retention: Retention = Retention.STRONG) -> None:
        self.name = name
        self.retention = retention
        if retention == Retention.WEAK:
            self._instances = weakref.WeakValueDictionary()
        else:
            self._instances = {}
        self._lock = threading.RLock()

    #-------------------------------------------------------------------------
    #methods

    def get_or_build(self, key: K, build: Callable[[], V]) -> V:
        """
        Return the instance stored for ``key``. On a miss ``build`` is called once,
        its result is stored and returned. If ``build`` raises, nothing is stored.
        """
        instance = self._instances.get(key)
        if instance is not None:
            return instance
        with self._lock:
            instance = self._instances.get(key)
            if instance is None:
                instance = build()
                self._instances[key] = instance
                logger.debug("%s cache: interned %r (%d entries)", self.name, key, len(self._instances))
        return instance

    def values(self) -> list[V]:
        with self._lock:
            return list(self._instances.values())

    def __contains__(self, key: K) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __str__(self) -> str:
        return f"InternCache(name={self.name},retention={self.retention.name},size={len(self)})"
