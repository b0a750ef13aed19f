"""Sets of integers in a finite field.

Membership is decided by the normalized integer value, so elements built
from bytes, decimal strings or arithmetic results compare as the same
member whenever their values agree.  A set has no modulus until the first
element (or a bound source set) is added to it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Set, Union

from zpset.errors import FieldMismatchError
from zpset.field.zp import Zp

logger = logging.getLogger(__name__)

Elements = Union["ZSet", Iterable[Zp]]


class ZSet:
    """A set of integers in a finite field."""

    def __init__(self, *elements: Zp, p: Optional[int] = None) -> None:
        self._s: Set[int] = set()
        self._p: Optional[int] = None
        if p is not None:
            self._bind(Zp(p).p)
        for v in elements:
            self.add(v)

    @classmethod
    def from_iterable(cls, elements: Iterable[Zp]) -> ZSet:
        zs = cls()
        zs.add_all(elements)
        return zs

    @property
    def p(self) -> Optional[int]:
        return self._p

    def _bind(self, p: Optional[int]) -> None:
        if p is None:
            return
        if self._p is None:
            self._p = p
        elif self._p != p:
            logger.debug("finite field mismatch: set in Z(%s), got Z(%s)", self._p, p)
            raise FieldMismatchError(self._p, p)

    def _check(self, v: Zp) -> None:
        if v.p is None:
            raise FieldMismatchError(self._p, None)
        if self._p is not None and v.p != self._p:
            logger.debug("finite field mismatch: set in Z(%s), got Z(%s)", self._p, v.p)
            raise FieldMismatchError(self._p, v.p)

    # ------ single elements ------

    def add(self, v: Zp) -> None:
        """Add *v*; a no-op if an equal value is already present."""
        self._check(v)
        self._bind(v.p)
        self._s.add(v.value)

    def remove(self, v: Zp) -> None:
        """Remove *v* if present."""
        self._check(v)
        self._s.discard(v.value)

    def contains(self, v: Zp) -> bool:
        self._check(v)
        return v.value in self._s

    def __contains__(self, v: object) -> bool:
        if not isinstance(v, Zp):
            return False
        return self.contains(v)

    # ------ bulk ------

    def add_all(self, other: Elements) -> None:
        """Add every element of another set or iterable."""
        if isinstance(other, ZSet):
            self._bind(other._p)
            self._s |= other._s
            return
        for v in other:
            self.add(v)

    def remove_all(self, other: Elements) -> None:
        """Remove every element of another set or iterable."""
        if isinstance(other, ZSet):
            self._bind(other._p)
            self._s -= other._s
            return
        for v in other:
            self.remove(v)

    def union(self, other: Elements) -> ZSet:
        result = self.copy()
        result.add_all(other)
        return result

    def difference(self, other: ZSet) -> ZSet:
        return zset_diff(self, other)

    __or__ = union
    __sub__ = difference

    # ------ queries ------

    def items(self) -> List[Zp]:
        """Return a snapshot of the members in no particular order."""
        return [Zp(self._p, v) for v in self._s]

    def __iter__(self) -> Iterator[Zp]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._s)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZSet):
            return NotImplemented
        return len(self._s) == len(other._s) and self._s == other._s

    # mutable
    __hash__ = None

    def copy(self) -> ZSet:
        zs = ZSet()
        zs._p = self._p
        zs._s = set(self._s)
        return zs

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self._s) + "}"

    def __repr__(self) -> str:
        return f"ZSet({self}, p={self._p})"


def zset_diff(a: ZSet, b: ZSet) -> ZSet:
    """Return the set of all elements of *a* that are not in *b*.

    The result takes the modulus of *a*, or of *b* if *a* is unbound.
    """
    result = ZSet()
    result._bind(a._p)
    result._bind(b._p)
    result._s = a._s - b._s
    return result


def zset_union(a: ZSet, b: ZSet) -> ZSet:
    """Return a new set holding the elements of both *a* and *b*."""
    return a.union(b)


def zset_len(zs: Optional[ZSet]) -> int:
    """Return the size of *zs*, treating ``None`` as the empty set."""
    if zs is None:
        return 0
    return len(zs)


def zset_items(zs: Optional[ZSet]) -> List[Zp]:
    if zs is None:
        return []
    return zs.items()


def zp_slice_str(elements: Iterable[Zp]) -> str:
    """Render a sequence of elements as ``{a, b, ...}``."""
    return "{" + ", ".join(str(v) for v in elements) + "}"
