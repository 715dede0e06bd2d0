"""Collections addressed by opaque positions.

The reordering algorithms never assume that a position is an integer. They
only ever ask a collection for:

- its first position (`start`) and its past-the-end position (`end`)
- the successor / predecessor of a position
- offset-by-n and the distance between two positions
- element access and swapping two positions

`ArrayCollection` wraps a Python list (positions are ints), `LinkedCollection`
is a doubly linked list (positions are nodes), and `Slice` is a `[lower, upper)`
view over either one that shares the positions of its base.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional


class Collection:
    """Mutable, finite collection addressed by positions.

    Subclasses provide `start`, `end`, `index_after`, `index_before`,
    `__getitem__` and `__setitem__`. Everything else has a default expressed
    in terms of those.
    """

    can_truncate = False

    @property
    def start(self) -> Any:
        raise NotImplementedError

    @property
    def end(self) -> Any:
        raise NotImplementedError

    def index_after(self, p: Any) -> Any:
        raise NotImplementedError

    def index_before(self, p: Any) -> Any:
        raise NotImplementedError

    def __getitem__(self, p: Any) -> Any:
        raise NotImplementedError

    def __setitem__(self, p: Any, value: Any) -> None:
        raise NotImplementedError

    def index_offset(self, p: Any, n: int) -> Any:
        if n < 0:
            raise ValueError(f"offset must be non-negative, got {n}")
        i = 0
        while i < n:
            p = self.index_after(p)
            i += 1
        return p

    def distance(self, p: Any, q: Any) -> int:
        """Number of successor steps from `p` to `q` (q must be reachable)."""
        n = 0
        while p != q:
            p = self.index_after(p)
            n += 1
        return n

    @property
    def count(self) -> int:
        return self.distance(self.start, self.end)

    def is_empty(self) -> bool:
        return self.start == self.end

    def swap_at(self, p: Any, q: Any) -> None:
        if p == q:
            return
        self[p], self[q] = self[q], self[p]

    def positions(self) -> Iterator[Any]:
        p = self.start
        end = self.end
        while p != end:
            yield p
            p = self.index_after(p)

    def positions_reversed(self) -> Iterator[Any]:
        p = self.end
        start = self.start
        while p != start:
            p = self.index_before(p)
            yield p

    def slice(self, lower: Any, upper: Any) -> "Slice":
        return Slice(self, lower, upper)

    def check_position(self, p: Any, allow_end: bool = True) -> None:
        """Raise IndexError unless `p` is a position of this collection."""
        if p == self.end:
            if allow_end:
                return
            raise IndexError("past-the-end position is not a valid element position")
        for q in self.positions():
            if q == p:
                return
        raise IndexError(f"position {p!r} is outside the collection")

    def truncate(self, p: Any) -> None:
        """Remove the elements in `[p, end)`."""
        raise TypeError(f"{type(self).__name__} does not support removing elements")

    def to_list(self) -> List[Any]:
        return [self[p] for p in self.positions()]

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class ArrayCollection(Collection):
    """List-backed collection. Wraps `items` in place, no copy is taken."""

    can_truncate = True

    def __init__(self, items: Optional[List[Any]] = None):
        self.items = items if items is not None else []

    @property
    def start(self) -> int:
        return 0

    @property
    def end(self) -> int:
        return len(self.items)

    def index_after(self, p: int) -> int:
        if p < 0 or p >= len(self.items):
            raise IndexError("cannot advance past the end position")
        return p + 1

    def index_before(self, p: int) -> int:
        if p <= 0:
            raise IndexError("cannot move before the start position")
        return p - 1

    def index_offset(self, p: int, n: int) -> int:
        if n < 0:
            raise ValueError(f"offset must be non-negative, got {n}")
        if p + n > len(self.items):
            raise IndexError(f"offset {n} from {p} runs past the end")
        return p + n

    def distance(self, p: int, q: int) -> int:
        return q - p

    @property
    def count(self) -> int:
        return len(self.items)

    def _element(self, p: int) -> int:
        # Negative ints would silently index from the back of the list.
        if p < 0 or p >= len(self.items):
            raise IndexError(f"position {p} holds no element (size {len(self.items)})")
        return p

    def __getitem__(self, p: int) -> Any:
        return self.items[self._element(p)]

    def __setitem__(self, p: int, value: Any) -> None:
        self.items[self._element(p)] = value

    def swap_at(self, p: int, q: int) -> None:
        a = self.items
        p, q = self._element(p), self._element(q)
        a[p], a[q] = a[q], a[p]

    def check_position(self, p: Any, allow_end: bool = True) -> None:
        if not isinstance(p, int) or isinstance(p, bool):
            raise IndexError(f"position must be an int, got {p!r}")
        upper = len(self.items) if allow_end else len(self.items) - 1
        if p < 0 or p > upper:
            raise IndexError(f"position {p} out of range [0, {upper}]")

    def truncate(self, p: int) -> None:
        del self.items[p:]

    def to_list(self) -> List[Any]:
        return list(self.items)


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None):
        self.value = value
        self.prev: "_Node" = self
        self.next: "_Node" = self

    def __repr__(self) -> str:
        return f"<node {self.value!r}>"


class LinkedCollection(Collection):
    """Doubly linked list. Positions are nodes; `end` is a sentinel node.

    Swapping exchanges the values held by two nodes, so positions stay valid
    for the whole lifetime of an algorithm.
    """

    can_truncate = True

    def __init__(self, values: Iterable[Any] = ()):
        self._sentinel = _Node()
        self._size = 0
        for v in values:
            self.append(v)

    def append(self, value: Any) -> _Node:
        node = _Node(value)
        last = self._sentinel.prev
        node.prev = last
        node.next = self._sentinel
        last.next = node
        self._sentinel.prev = node
        self._size += 1
        return node

    @property
    def start(self) -> _Node:
        return self._sentinel.next

    @property
    def end(self) -> _Node:
        return self._sentinel

    def index_after(self, p: _Node) -> _Node:
        if p is self._sentinel:
            raise IndexError("cannot advance past the end position")
        return p.next

    def index_before(self, p: _Node) -> _Node:
        if p is self._sentinel.next:
            raise IndexError("cannot move before the start position")
        return p.prev

    @property
    def count(self) -> int:
        return self._size

    def __getitem__(self, p: _Node) -> Any:
        if p is self._sentinel:
            raise IndexError("the end position holds no element")
        return p.value

    def __setitem__(self, p: _Node, value: Any) -> None:
        if p is self._sentinel:
            raise IndexError("the end position holds no element")
        p.value = value

    def swap_at(self, p: _Node, q: _Node) -> None:
        if p is self._sentinel or q is self._sentinel:
            raise IndexError("the end position holds no element")
        p.value, q.value = q.value, p.value

    def truncate(self, p: _Node) -> None:
        if p is self._sentinel:
            return
        removed = self.distance(p, self._sentinel)
        keep = p.prev
        keep.next = self._sentinel
        self._sentinel.prev = keep
        self._size -= removed

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next


class Slice(Collection):
    """`[lower, upper)` view over a base collection, sharing its positions."""

    def __init__(self, base: Collection, lower: Any, upper: Any):
        if isinstance(base, Slice):
            base = base.base
        self.base = base
        self.lower = lower
        self.upper = upper

    @property
    def start(self) -> Any:
        return self.lower

    @property
    def end(self) -> Any:
        return self.upper

    def index_after(self, p: Any) -> Any:
        if p == self.upper:
            raise IndexError("cannot advance past the end of the slice")
        return self.base.index_after(p)

    def index_before(self, p: Any) -> Any:
        if p == self.lower:
            raise IndexError("cannot move before the start of the slice")
        return self.base.index_before(p)

    def index_offset(self, p: Any, n: int) -> Any:
        return self.base.index_offset(p, n)

    def distance(self, p: Any, q: Any) -> int:
        return self.base.distance(p, q)

    def __getitem__(self, p: Any) -> Any:
        return self.base[p]

    def __setitem__(self, p: Any, value: Any) -> None:
        self.base[p] = value

    def swap_at(self, p: Any, q: Any) -> None:
        self.base.swap_at(p, q)


def as_collection(obj: Any) -> Collection:
    """Accept either a Collection or a plain list (wrapped in place)."""
    if isinstance(obj, Collection):
        return obj
    if isinstance(obj, list):
        return ArrayCollection(obj)
    raise TypeError(f"expected a Collection or a list, got {type(obj).__name__}")
