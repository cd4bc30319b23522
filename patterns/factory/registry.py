"""
Key based object registry.

Variants register a zero-argument creator under a key; clients ask for an
object by key and never need to know the concrete class.  Adding a variant
means registering one more creator, not editing a dispatch function.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

LOG = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

Creator = Callable[[], T]


class UnknownKey(KeyError):
    """Raised by :meth:`ObjectRegistry.require` for keys with no creator."""


class ObjectRegistry(Generic[K, T]):
    """
    Mapping from a key to the creator that builds the matching product.

    At most one creator is stored per key and the first registration wins.
    The mapping is guarded by a lock; creators are invoked outside of it.
    """

    def __init__(self, kind: str = "object") -> None:
        self.kind = kind
        self._lock = threading.RLock()
        self._creators: Dict[K, Creator[T]] = {}

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._creators

    def __len__(self) -> int:
        with self._lock:
            return len(self._creators)

    def keys(self) -> List[K]:
        with self._lock:
            return list(self._creators)

    def register(self, key: K, creator: Creator[T]) -> bool:
        """
        Store ``creator`` under ``key`` unless the key is already taken.

        Returns ``True`` when the creator was stored.  A duplicate registration
        leaves the existing creator in place and returns ``False``.
        """

        if not callable(creator):
            raise TypeError("creator must be callable")
        with self._lock:
            if key in self._creators:
                LOG.debug("Ignoring duplicate %s registration for %r", self.kind, key)
                return False
            self._creators[key] = creator
        return True

    def register_creator(self, key: K) -> Callable[[Creator[T]], Creator[T]]:
        """Decorator form of :meth:`register`."""

        def decorator(creator: Creator[T]) -> Creator[T]:
            self.register(key, creator)
            return creator

        return decorator

    def unregister(self, key: K) -> bool:
        with self._lock:
            return self._creators.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._creators.clear()

    def create(self, key: K) -> Optional[T]:
        """
        Build a fresh product for ``key``.

        Unknown keys are logged and yield ``None``; callers must check the
        result before using it.
        """

        with self._lock:
            creator = self._creators.get(key)
        if creator is None:
            LOG.warning("Unknown %s type %r", self.kind, key)
            return None
        return creator()

    def require(self, key: K) -> T:
        with self._lock:
            creator = self._creators.get(key)
        if creator is None:
            raise UnknownKey(f"{self.kind} type {key!r} is not registered")
        return creator()


_DEFAULT: Optional[ObjectRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def default_registry() -> ObjectRegistry:
    """
    Return the process-wide vehicle registry, creating it on first use.

    It starts empty; see :func:`patterns.factory.register_default_vehicles`.
    """

    global _DEFAULT
    if _DEFAULT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                _DEFAULT = ObjectRegistry(kind="vehicle")
    return _DEFAULT
