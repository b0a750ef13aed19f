"""Serialization models for handing elements and sets to a transport.

Numbers travel as base-10 strings so that 512-bit values survive JSON
encoders that only handle 64-bit integers.  Plain ints are accepted on
input.
"""

from __future__ import annotations

import hashlib
import json
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from zpset.errors import MalformedInputError
from zpset.field.zp import Zp, parse_decimal
from zpset.field.zset import ZSet


def _to_int(v: Union[str, int]) -> int:
    if isinstance(v, int):
        return v
    return parse_decimal(v)


class ZpPayload(BaseModel):
    """A single field element."""

    p: Union[str, int]
    value: Union[str, int]

    @classmethod
    def from_zp(cls, x: Zp) -> ZpPayload:
        return cls(p=str(x.p), value=str(x))

    def to_zp(self) -> Zp:
        return Zp.from_int(_to_int(self.p), _to_int(self.value))


class ZSetPayload(BaseModel):
    """A set of field elements; ``p`` is absent for an unbound empty set."""

    p: Optional[Union[str, int]] = None
    items: List[Union[str, int]] = Field(default_factory=list)

    @classmethod
    def from_zset(cls, zs: ZSet) -> ZSetPayload:
        values = sorted(v.value for v in zs.items())
        return cls(
            p=None if zs.p is None else str(zs.p),
            items=[str(v) for v in values],
        )

    def to_zset(self) -> ZSet:
        if self.p is None:
            if self.items:
                raise MalformedInputError("set members given without a modulus")
            return ZSet()
        p = _to_int(self.p)
        return ZSet(*(Zp.from_int(p, _to_int(v)) for v in self.items), p=p)


def set_digest(zs: ZSet) -> str:
    """Return the SHA-256 hex digest of the canonical JSON form of *zs*."""
    canonical = json.dumps(
        ZSetPayload.from_zset(zs).model_dump(),
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(canonical.encode()).hexdigest()
