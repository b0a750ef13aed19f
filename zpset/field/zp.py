"""Integers in a finite field Z(p).

A ``Zp`` holds a value normalized into [0, p) together with the modulus it
is bound to.  Two families of operations are offered:

- compute-into methods (``add``, ``mul``, ``inv`` ...) write the result into
  the receiver and return it.  The receiver may alias an operand.
- operators (``+``, ``*``, ``/`` ...) return a new element and leave their
  operands untouched.

Every operation checks that its operands share one modulus and raises
``FieldMismatchError`` otherwise.
"""

from __future__ import annotations

import logging
import operator
import re
from typing import List, Optional, Union

from zpset.errors import DivisionUndefinedError, FieldMismatchError, MalformedInputError
from zpset.field.rand import randint

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?[0-9]+")

# stays under the interpreter limit on int-from-str conversion
_CHUNK = 1000

Operand = Union["Zp", int]


def parse_decimal(s: str, p: Optional[int] = None) -> int:
    """Parse a base-10 integer literal, rejecting anything else.

    Literals of any length are accepted.  When *p* is given the result is
    reduced mod *p* as the digits are consumed.
    """
    if not isinstance(s, str) or _DECIMAL.fullmatch(s) is None:
        raise MalformedInputError(f"invalid integer {s!r}")
    sign = -1 if s[0] == "-" else 1
    digits = s.lstrip("+-")
    head = len(digits) % _CHUNK or _CHUNK
    n = int(digits[:head])
    scale = 10**_CHUNK
    for i in range(head, len(digits), _CHUNK):
        n = n * scale + int(digits[i : i + _CHUNK])
        if p is not None:
            n %= p
    return sign * n


def _check_modulus(p: int) -> int:
    p = operator.index(p)
    if p < 2:
        raise ValueError(f"Modulus must be at least 2, got {p}")
    return p


def _inverse(n: int, p: int) -> int:
    try:
        return pow(n, -1, p)
    except ValueError:
        logger.debug("no multiplicative inverse of %d in Z(%d)", n, p)
        raise DivisionUndefinedError(f"{n} is not invertible in Z({p})") from None


def _field(x: Zp, *others: Zp) -> int:
    """Return the modulus shared by all operands."""
    if x._p is None:
        raise FieldMismatchError(None, None)
    for y in others:
        x._assert_p(y._p)
    return x._p


class Zp:
    """An integer in the finite field Z(p)."""

    __slots__ = ("_value", "_p")

    def __init__(self, p: Optional[int] = None, value: int = 0) -> None:
        value = operator.index(value)
        if p is None:
            if value != 0:
                raise ValueError("An unbound element can only hold zero")
            self._p: Optional[int] = None
            self._value = 0
        else:
            self._p = _check_modulus(p)
            self._value = value % self._p

    # ------ constructors ------

    @classmethod
    def zero(cls, p: int) -> Zp:
        return cls(p)

    @classmethod
    def from_element(cls, x: Zp) -> Zp:
        """Return a copy of *x* in the same field."""
        return cls(x._p, x._value)

    @classmethod
    def from_int(cls, p: int, n: int) -> Zp:
        """Return *n* mod *p*; negative *n* is normalized into range."""
        return cls(p, n)

    @classmethod
    def from_bytes(cls, p: int, data: bytes) -> Zp:
        """Decode the canonical byte encoding produced by ``to_bytes``."""
        return cls(p).set_bytes(data)

    @classmethod
    def from_str(cls, p: int, s: str) -> Zp:
        """Parse a base-10 literal; raises ``MalformedInputError`` if invalid."""
        p = _check_modulus(p)
        return cls(p, parse_decimal(s, p))

    @classmethod
    def random(cls, p: int) -> Zp:
        """Return an element drawn uniformly from Z(*p*)."""
        p = _check_modulus(p)
        return cls(p, randint(p))

    # ------ accessors ------

    @property
    def p(self) -> Optional[int]:
        """The modulus, or ``None`` if the element is not yet bound."""
        return self._p

    @property
    def value(self) -> int:
        return self._value

    def copy(self) -> Zp:
        return Zp.from_element(self)

    def is_zero(self) -> bool:
        return self._value == 0

    def to_bytes(self) -> bytes:
        """Return the canonical byte encoding.

        This is the minimal big-endian representation reversed into
        little-endian order, so its length varies with the magnitude of the
        value.  Zero encodes as ``b""``.
        """
        return self._value.to_bytes((self._value.bit_length() + 7) // 8, "little")

    def full_key_hash(self) -> str:
        """Return the canonical encoding as a hex string."""
        return self.to_bytes().hex()

    # ------ binding ------

    def bind(self, p: int) -> Zp:
        """Bind an unbound element to Z(*p*), otherwise assert it is in Z(*p*)."""
        if self._p is None:
            self._p = _check_modulus(p)
        else:
            self._assert_p(p)
        return self

    def _assert_p(self, p: Optional[int]) -> None:
        if self._p != p:
            logger.debug("finite field mismatch: Z(%s) vs Z(%s)", self._p, p)
            raise FieldMismatchError(self._p, p)

    # ------ compute into the receiver ------

    def assign(self, x: Zp) -> Zp:
        """Set the receiver to the value of *x*."""
        p = _field(x)
        self.bind(p)
        self._value = x._value
        return self

    def set_bytes(self, data: bytes) -> Zp:
        """Set the value from its canonical byte encoding."""
        p = _field(self)
        self._value = int.from_bytes(data, "little") % p
        return self

    def norm(self) -> Zp:
        """Normalize the value into [0, p)."""
        self._value %= _field(self)
        return self

    def add(self, x: Zp, y: Zp) -> Zp:
        """Set the receiver to x + y."""
        p = _field(x, y)
        self.bind(p)
        self._value = (x._value + y._value) % p
        return self

    def sub(self, x: Zp, y: Zp) -> Zp:
        """Set the receiver to x - y."""
        p = _field(x, y)
        self.bind(p)
        self._value = (x._value - y._value) % p
        return self

    def mul(self, x: Zp, y: Zp) -> Zp:
        """Set the receiver to x * y."""
        p = _field(x, y)
        self.bind(p)
        self._value = (x._value * y._value) % p
        return self

    def div(self, x: Zp, y: Zp) -> Zp:
        """Set the receiver to x / y.

        Raises ``DivisionUndefinedError`` if *y* has no inverse; the receiver
        is left unchanged in that case.
        """
        p = _field(x, y)
        y_inv = _inverse(y._value, p)
        self.bind(p)
        self._value = (x._value * y_inv) % p
        return self

    def exp(self, x: Zp, y: Zp) -> Zp:
        """Set the receiver to x ** y.

        The exponent is the value of *y* as it stands in [0, p); it is not
        reduced mod p - 1.
        """
        p = _field(x, y)
        self.bind(p)
        self._value = pow(x._value, y._value, p)
        return self

    def inv(self) -> Zp:
        """Replace the value with its multiplicative inverse."""
        self._value = _inverse(self._value, _field(self))
        return self

    def neg(self) -> Zp:
        """Replace the value with its additive inverse."""
        p = _field(self)
        self._value = (p - self._value) % p
        return self

    # ------ value-returning arithmetic ------

    def _coerce(self, other: object):
        if isinstance(other, Zp):
            return other
        if isinstance(other, int):
            return Zp(_field(self), other)
        return NotImplemented

    def __add__(self, other: Operand) -> Zp:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Zp().add(self, other)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> Zp:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Zp().sub(self, other)

    def __rsub__(self, other: int) -> Zp:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Zp().sub(other, self)

    def __mul__(self, other: Operand) -> Zp:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Zp().mul(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> Zp:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Zp().div(self, other)

    def __rtruediv__(self, other: int) -> Zp:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Zp().div(other, self)

    def __pow__(self, other: Operand) -> Zp:
        if isinstance(other, Zp):
            return Zp().exp(self, other)
        if not isinstance(other, int):
            return NotImplemented
        # int exponents are used as given, negative ones through the inverse
        p = _field(self)
        if other < 0:
            return Zp(p, pow(_inverse(self._value, p), -other, p))
        return Zp(p, pow(self._value, other, p))

    def __neg__(self) -> Zp:
        return self.copy().neg()

    def inverse(self) -> Zp:
        return self.copy().inv()

    # ------ comparison ------

    def cmp(self, x: Zp) -> int:
        """Return -1, 0 or 1 as the receiver is less than, equal to or greater than *x*."""
        _field(self, x)
        return (self._value > x._value) - (self._value < x._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zp):
            return NotImplemented
        return self._p == other._p and self._value == other._value

    # mutable
    __hash__ = None

    def __lt__(self, other: Zp) -> bool:
        if not isinstance(other, Zp):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: Zp) -> bool:
        if not isinstance(other, Zp):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: Zp) -> bool:
        if not isinstance(other, Zp):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: Zp) -> bool:
        if not isinstance(other, Zp):
            return NotImplemented
        return self.cmp(other) >= 0

    # ------ conversions ------

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Zp({self._value}, p={self._p})"


z = Zp.zero
zzp = Zp.from_element
zi = Zp.from_int
zb = Zp.from_bytes
zs = Zp.from_str
zrand = Zp.random


def zarray(p: int, n: int, v: Zp) -> List[Zp]:
    """Return *n* independent copies of *v*, all in Z(*p*)."""
    return [Zp(p).assign(v) for _ in range(n)]
