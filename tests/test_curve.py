import pytest

from ecprimitives.curve import CURVE_ORDER, FIELD_PRIME, Point, Scalar


def test_generator_compressed_encoding():
    encoded = Point.generator().to_bytes(compressed=True)
    assert encoded.hex() == "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


def test_scalar_reduces_modulo_order():
    assert Scalar(CURVE_ORDER).is_zero()
    assert Scalar(CURVE_ORDER + 5) == Scalar(5)
    assert Scalar(-1).to_int() == CURVE_ORDER - 1


def test_scalar_field_identities():
    a = Scalar.random()
    b = Scalar.random()
    assert (a - a).is_zero()
    assert (-a + a).is_zero()
    assert a * a.invert() == Scalar(1)
    assert a * (b + 1) == a * b + a
    assert sum([Scalar(1), Scalar(2), Scalar(4)], Scalar.zero()) == Scalar(7)
    assert 3 - Scalar(1) == Scalar(2)


def test_zero_scalar_has_no_inverse():
    with pytest.raises(ZeroDivisionError):
        Scalar.zero().invert()


def test_scalar_bytes_round_trip():
    a = Scalar.random()
    assert Scalar.from_bytes(a.to_bytes()) == a
    assert Scalar.from_bytes(bytes(32)).is_zero()


def test_scalar_from_bytes_rejects_out_of_range():
    with pytest.raises(ValueError):
        Scalar.from_bytes(CURVE_ORDER.to_bytes(32, "big"))
    with pytest.raises(ValueError):
        Scalar.from_bytes(b"\x01" * 31)


def test_random_scalars_are_non_zero_and_distinct():
    a = Scalar.random()
    b = Scalar.random()
    assert not a.is_zero()
    assert a != b


def test_generator_has_curve_order():
    assert (Point.generator() * CURVE_ORDER).is_zero()
    assert (Point.generator() * (CURVE_ORDER - 1)) == -Point.generator()


def test_point_scalar_multiplication_is_linear():
    g = Point.generator()
    a = Scalar.random()
    b = Scalar.random()
    assert g * (a + b) == g * a + g * b
    assert a * g == g * a
    assert g * 2 == g + g
    assert (g * a) * b == g * (a * b)


def test_point_addition_identities():
    g = Point.generator()
    p = g * Scalar.random()
    assert (p - p).is_zero()
    assert Point.zero() + p == p
    assert p + Point.zero() == p
    assert (Point.zero() * Scalar.random()).is_zero()
    assert (p * Scalar.zero()).is_zero()


@pytest.mark.parametrize("compressed", [True, False])
def test_point_bytes_round_trip(compressed):
    p = Point.generator() * Scalar.random()
    assert Point.from_bytes(p.to_bytes(compressed=compressed)) == p
    q = Point.base_point2()
    assert Point.from_bytes(q.to_bytes(compressed=compressed)) == q


def test_uncompressed_encoding_layout():
    g = Point.generator()
    encoded = g.to_bytes(compressed=False)
    assert len(encoded) == 65
    assert encoded[0] == 4
    assert encoded[1:33] == g.to_bytes(compressed=True)[1:]


def test_zero_point_round_trip():
    assert Point.from_bytes(Point.zero().to_bytes()).is_zero()


def test_malformed_points_rejected():
    g = Point.generator()
    tampered = g.to_bytes(compressed=False)[:-1] + bytes([g.to_bytes(compressed=False)[-1] ^ 1])
    with pytest.raises(ValueError):
        Point.from_bytes(tampered)
    with pytest.raises(ValueError):
        Point.from_bytes(b"\x05" + bytes(32))
    with pytest.raises(ValueError):
        Point(g.x, (g.y + 1) % FIELD_PRIME)


def test_base_point2_is_independent_group_element():
    h = Point.base_point2()
    assert not h.is_zero()
    assert h != Point.generator()
    assert (h * CURVE_ORDER).is_zero()
    assert Point.base_point2() == h


def test_points_are_hashable_by_value():
    g = Point.generator()
    assert len({g, g + Point.zero(), Point.generator()}) == 1