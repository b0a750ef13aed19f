"""Tests for finite-field integers."""

import random

import pytest

from zpset.config import P_512, P_SKS
from zpset.errors import DivisionUndefinedError, FieldMismatchError, MalformedInputError
from zpset.field.zp import Zp, zarray, zb, zi, zs

P = 11


def test_add_wrap():
    assert zi(P, 7).add(zi(P, 7), zi(P, 5)).value == 1


def test_mul_wrap():
    assert (zi(P, 7) * zi(P, 5)).value == 2


def test_inv():
    assert zi(P, 5).inv().value == 9


def test_div():
    assert (zi(P, 7) / zi(P, 5)).value == 8


def test_sub_underflow():
    assert (zi(P, 0) - zi(P, 1)).value == P - 1


def test_neg():
    x = zi(P, 7)
    assert (-x).value == 4
    assert (x + -x).is_zero()
    assert zi(P, 0).neg().value == 0


def test_exp():
    assert (zi(P, 7) ** zi(P, 5)).value == 10


def test_exp_uses_exponent_as_stored():
    # 12 is held as 1 in Z(11); reducing mod p - 1 would give 2 ** 2 instead
    assert zi(P, 2).exp(zi(P, 2), zi(P, 12)).value == 2


def test_from_int_negative():
    assert zi(P, -1).value == 10
    assert zi(P, -23).value == 10


def test_operands_untouched_by_operators():
    x, y = zi(P, 7), zi(P, 5)
    x + y
    x / y
    -x
    assert (x.value, y.value) == (7, 5)


def test_int_operands_promoted():
    x = zi(P, 7)
    assert (x + 4).value == 0
    assert (4 + x).value == 0
    assert (3 - x).value == 7
    assert (2 * x).value == 3
    assert (1 / zi(P, 5)).value == 9
    assert (x ** 2).value == 5


def test_compute_into_aliased_receiver():
    x = zi(P, 7)
    x.add(x, x)
    assert x.value == 3
    x.div(x, x)
    assert x.value == 1


def test_divide_into_divisor():
    x, y = zi(P, 7), zi(P, 5)
    y.div(x, y)
    assert y.value == 8


def test_unbound_receiver_binds():
    r = Zp()
    assert r.p is None
    r.mul(zi(P, 3), zi(P, 4))
    assert r.p == P
    assert r.value == 1


def test_bind_is_permanent():
    r = Zp().bind(P)
    assert r.bind(P) is r
    with pytest.raises(FieldMismatchError):
        r.bind(13)


def test_bound_receiver_rejects_other_field():
    r = Zp(13)
    with pytest.raises(FieldMismatchError):
        r.add(zi(P, 1), zi(P, 2))


def test_field_mismatch():
    with pytest.raises(FieldMismatchError):
        zi(P, 1) + zi(13, 1)
    with pytest.raises(AssertionError):
        zi(P, 1).mul(zi(P, 1), zi(13, 1))


def test_unbound_operand():
    with pytest.raises(FieldMismatchError):
        zi(P, 1) + Zp()
    with pytest.raises(FieldMismatchError):
        Zp().inv()


def test_invert_zero():
    with pytest.raises(DivisionUndefinedError):
        zi(P, 0).inv()
    with pytest.raises(ZeroDivisionError):
        zi(P, 3) / zi(P, 0)


def test_failed_division_leaves_receiver():
    r = zi(P, 4)
    with pytest.raises(DivisionUndefinedError):
        r.div(zi(P, 7), zi(P, 0))
    assert r.value == 4


def test_composite_modulus_non_unit():
    with pytest.raises(DivisionUndefinedError):
        zi(12, 4).inv()
    assert zi(12, 5).inverse().value == 5


def test_bad_modulus():
    with pytest.raises(ValueError):
        Zp(1)
    with pytest.raises(ValueError):
        Zp(None, 5)


def test_cmp():
    assert zi(P, 3).cmp(zi(P, 5)) == -1
    assert zi(P, 5).cmp(zi(P, 16)) == 0
    assert zi(P, 5).cmp(zi(P, 3)) == 1
    assert zi(P, 3) < zi(P, 5) <= zi(P, 5)
    assert zi(P, 9) > zi(P, 5) >= zi(P, 5)
    with pytest.raises(FieldMismatchError):
        zi(P, 3) < zi(13, 5)


def test_equality():
    assert zi(P, 3) == zi(P, 14)
    assert zi(P, 3) != zi(13, 3)
    assert zi(P, 3) != 3


def test_unhashable():
    with pytest.raises(TypeError):
        hash(zi(P, 1))


def test_is_zero():
    assert Zp.zero(P).is_zero()
    assert zi(P, 11).is_zero()
    assert not zi(P, 1)


def test_bytes_little_endian_minimal():
    x = zi(P_SKS, 258)
    assert x.to_bytes() == b"\x02\x01"
    assert x.full_key_hash() == "0201"
    assert zi(P_SKS, 0).to_bytes() == b""
    assert zi(P_SKS, 255).to_bytes() == b"\xff"


def test_bytes_length_varies():
    assert len(zi(P_SKS, 1).to_bytes()) == 1
    assert len(zi(P_SKS, P_SKS - 1).to_bytes()) == 17


def test_from_bytes():
    assert zb(P_SKS, b"\x02\x01").value == 258
    assert zb(P_SKS, b"").value == 0
    assert zb(P_SKS, b"\x00").value == 0
    assert zb(P, b"\x0c").value == 1


def test_from_bytes_fixed_width_identifier():
    fingerprint = bytes(range(1, 21))
    x = zb(P_512, fingerprint)
    assert x.value == int.from_bytes(fingerprint[::-1], "big")
    assert x.to_bytes() == fingerprint


def test_bytes_roundtrip():
    for _ in range(50):
        x = Zp.random(P_512)
        assert zb(P_512, x.to_bytes()) == x


def test_from_str():
    assert zs(P, "12").value == 1
    assert zs(P, "-1").value == 10
    assert zs(P, "+5").value == 5
    assert zs(P_SKS, str(P_SKS + 7)).value == 7


@pytest.mark.parametrize("bad", ["", "12a", " 5", "5 ", "1_0", "0x10", "-", "1.5"])
def test_from_str_malformed(bad):
    with pytest.raises(MalformedInputError):
        zs(P, bad)


def test_malformed_is_value_error():
    with pytest.raises(ValueError):
        zs(P, "nope")


def test_decimal_roundtrip():
    for _ in range(50):
        x = Zp.random(P_512)
        assert zs(P_512, str(x)) == x


def test_str_repr():
    assert str(zi(P, 0)) == "0"
    assert str(zi(P, 10)) == "10"
    assert repr(zi(P, 10)) == "Zp(10, p=11)"
    assert int(zi(P, 10)) == 10


def test_random_in_range():
    for _ in range(200):
        x = Zp.random(P)
        assert 0 <= x.value < P
        assert x.p == P


def test_field_laws():
    rng = random.Random(1234)
    for _ in range(100):
        x = zi(P_SKS, rng.randrange(P_SKS))
        y = zi(P_SKS, rng.randrange(1, P_SKS))
        for r in (x + y, x - y, x * y):
            assert 0 <= r.value < P_SKS
        assert (x + -x).is_zero()
        assert (y * y.inverse()).value == 1
        assert (x / y) * y == x


def test_copy_is_independent():
    x = zi(P, 3)
    y = x.copy()
    y.neg()
    assert x.value == 3
    assert Zp.from_element(x) == x


def test_zarray():
    arr = zarray(P, 3, zi(P, 4))
    assert [a.value for a in arr] == [4, 4, 4]
    arr[0].add(arr[0], zi(P, 1))
    assert [a.value for a in arr] == [5, 4, 4]
    with pytest.raises(FieldMismatchError):
        zarray(13, 2, zi(P, 4))


def test_from_str_longer_than_conversion_limit():
    repunit = (10**5000 - 1) // 9
    assert zs(P_SKS, "1" * 5000).value == repunit % P_SKS
    assert zs(P_SKS, "-" + "1" * 5000).value == -repunit % P_SKS
    assert zs(P, "0" * 4999 + "12").value == 1


def test_int_exponent_not_reduced():
    x = zi(P, 5)
    assert (x ** -1).value == 9
    assert (x ** -2).value == 4
    assert (x ** P).value == 5
    assert (x ** 0).value == 1
    assert x.value == 5


def test_negative_int_exponent_of_zero():
    with pytest.raises(DivisionUndefinedError):
        zi(P, 0) ** -1


def test_failed_division_leaves_unbound_receiver():
    r = Zp()
    with pytest.raises(DivisionUndefinedError):
        r.div(zi(P, 7), zi(P, 0))
    assert r.p is None
