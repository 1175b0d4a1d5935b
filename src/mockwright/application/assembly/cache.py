"""Process-wide cache of generated mock classes."""

from __future__ import annotations

import logging
import secrets
import threading
from typing import TYPE_CHECKING

from mockwright.infrastructure.reflection.extractor import qualified_name

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from mockwright.domain.model.target import TargetDescriptor

logger = logging.getLogger(__name__)


def generate_class_name(targets: Sequence[TargetDescriptor]) -> str:
    """<Target>_Mock<14 hex>, joined by '__' for several targets."""
    return "__".join(f"{t.short_name}_Mock{secrets.token_hex(7)}" for t in targets)


def _cache_key(targets: Sequence[TargetDescriptor]) -> tuple[type, ...]:
    # Classes, not names: local classes may share a qualified name
    types_ = {t.type_ for t in targets}
    return tuple(sorted(types_, key=lambda t: (qualified_name(t), id(t))))


class MockClassCache:
    """Assembles each target set at most once.

    The key ignores target order, so mock(A, B) and mock(B, A) share a class.
    Lookups and assembly are serialized by one lock.
    """

    def __init__(self) -> None:
        self._classes: dict[tuple[type, ...], type] = {}
        self._lock = threading.Lock()

    def get_or_create(
        self,
        targets: Sequence[TargetDescriptor],
        factory: Callable[[], type],
    ) -> type:
        """Cached class for the target set, assembled by ``factory`` on a miss."""
        key = _cache_key(targets)
        with self._lock:
            cls = self._classes.get(key)
            if cls is not None:
                logger.debug("cache hit for %s", cls.__name__)
                return cls
            cls = factory()
            self._classes[key] = cls
            return cls

    def __contains__(self, targets: Sequence[TargetDescriptor]) -> bool:
        with self._lock:
            return _cache_key(targets) in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def clear(self) -> None:
        with self._lock:
            self._classes.clear()
