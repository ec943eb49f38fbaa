# -*- coding: utf-8 -*-
"""Work lists of a decomposition pass.

Stations move between three lists (unprocessed, fixed-pending, sealed)
during a pass.  The lists are doubly-linked through per-station
``prev``/``next`` index arrays, so moving a station is O(1) and keeps the
relative order of the other members.  The lists own membership only;
the stations themselves stay in the graph arena.
"""

from __future__ import annotations

from typing import Iterator

from cavenet.constants import NIL
from cavenet.enums import ListKind


class StationLists:
    """Three intrusive lists over the station indices ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        self._kind: list[ListKind | None] = [None] * size
        self._prev: list[int] = [NIL] * size
        self._next: list[int] = [NIL] * size
        self._head: dict[ListKind, int] = dict.fromkeys(ListKind, NIL)
        self._tail: dict[ListKind, int] = dict.fromkeys(ListKind, NIL)
        self._count: dict[ListKind, int] = dict.fromkeys(ListKind, 0)

    def kind_of(self, index: int) -> ListKind | None:
        """List the station is on, ``None`` if on none."""
        return self._kind[index]

    def head(self, kind: ListKind) -> int | None:
        head = self._head[kind]
        return None if head == NIL else head

    def count(self, kind: ListKind) -> int:
        return self._count[kind]

    def is_empty(self, kind: ListKind) -> bool:
        return self._count[kind] == 0

    def members(self, kind: ListKind) -> Iterator[int]:
        """Iterate a list from head to tail."""
        index = self._head[kind]
        while index != NIL:
            yield index
            index = self._next[index]

    # -------------------------------------------------------------------------
    # Splicing
    # -------------------------------------------------------------------------

    def append(self, index: int, kind: ListKind) -> None:
        """Add a station that is on no list to the tail of *kind*."""
        self._check_free(index)
        tail = self._tail[kind]
        self._prev[index] = tail
        self._next[index] = NIL
        if tail == NIL:
            self._head[kind] = index
        else:
            self._next[tail] = index
        self._tail[kind] = index
        self._kind[index] = kind
        self._count[kind] += 1

    def push_front(self, index: int, kind: ListKind) -> None:
        """Add a station that is on no list to the head of *kind*."""
        self._check_free(index)
        head = self._head[kind]
        self._prev[index] = NIL
        self._next[index] = head
        if head == NIL:
            self._tail[kind] = index
        else:
            self._prev[head] = index
        self._head[kind] = index
        self._kind[index] = kind
        self._count[kind] += 1

    def remove(self, index: int) -> ListKind:
        """Unlink a station from its list and return that list.

        Raises:
            ValueError: If the station is on no list.
        """
        kind = self._kind[index]
        if kind is None:
            raise ValueError(f"Station {index} is on no list")
        prev, nxt = self._prev[index], self._next[index]
        if prev == NIL:
            self._head[kind] = nxt
        else:
            self._next[prev] = nxt
        if nxt == NIL:
            self._tail[kind] = prev
        else:
            self._prev[nxt] = prev
        self._prev[index] = self._next[index] = NIL
        self._kind[index] = None
        self._count[kind] -= 1
        return kind

    def move(self, index: int, kind: ListKind, *, front: bool = False) -> None:
        """Move a station onto *kind* (tail, or head with ``front=True``)."""
        if self._kind[index] is not None:
            self.remove(index)
        if front:
            self.push_front(index, kind)
        else:
            self.append(index, kind)

    def _check_free(self, index: int) -> None:
        if self._kind[index] is not None:
            raise ValueError(
                f"Station {index} is already on the {self._kind[index].value} list"
            )
