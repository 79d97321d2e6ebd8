"""Common interface of the broad-phase spatial indexes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from .transform import BB
from .vector import Vector

BBFunc = Callable[[Any], BB]
QueryFunc = Callable[[Any, Any], None]
SegmentQueryFunc = Callable[[Any, Any], float]


class SpatialIndex(ABC):
    """A container of objects that can be searched by bounding box.

    ``bbfunc`` gives the bounding box of a stored object. An index built with
    a ``static_index`` becomes that index's dynamic partner, and
    :meth:`reindex_query` also reports pairs against the static objects.
    """

    def __init__(self, bbfunc: BBFunc, static_index: SpatialIndex | None = None) -> None:
        self.bbfunc = bbfunc
        self.static_index = static_index
        self.dynamic_index: SpatialIndex | None = None
        if static_index is not None:
            static_index.dynamic_index = self

    @abstractmethod
    def __len__(self) -> int:
        """Number of objects in the index."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate over the stored objects."""

    @abstractmethod
    def contains(self, obj: Any, hash_id: int) -> bool:
        """Whether ``obj`` is stored under ``hash_id``."""

    @abstractmethod
    def insert(self, obj: Any, hash_id: int) -> None:
        """Add ``obj`` under ``hash_id``."""

    @abstractmethod
    def remove(self, obj: Any, hash_id: int) -> None:
        """Drop ``obj``; does nothing if it is not stored."""

    @abstractmethod
    def reindex(self) -> None:
        """Refresh the position of every object."""

    @abstractmethod
    def reindex_object(self, obj: Any, hash_id: int) -> None:
        """Refresh the position of one object."""

    @abstractmethod
    def reindex_query(self, func: QueryFunc) -> None:
        """Refresh every object and call ``func`` for each overlapping pair."""

    @abstractmethod
    def query(self, obj: Any, bb: BB, func: QueryFunc) -> None:
        """Call ``func(obj, other)`` for every object that may overlap ``bb``."""

    @abstractmethod
    def segment_query(
        self, obj: Any, a: Vector, b: Vector, t_exit: float, func: SegmentQueryFunc
    ) -> None:
        """Call ``func(obj, other)`` for objects along the segment ``a -> b``.

        ``func`` returns the fraction of the segment at which the search may
        stop; the search ends once it passes ``t_exit``.
        """

    def collide_static(self, static_index: SpatialIndex | None, func: QueryFunc) -> None:
        """Query ``static_index`` with every object of this index."""
        if static_index is not None and len(static_index) > 0:
            for obj in list(self):
                static_index.query(obj, self.bbfunc(obj), func)