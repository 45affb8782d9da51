"""Arithmetic on the secp256k1 curve: scalars modulo the group order and points."""

from __future__ import annotations

import hashlib
import secrets
from typing import Optional, Union

FIELD_PRIME = 2**256 - 2**32 - 977
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
CURVE_B = 7
SCALAR_LENGTH = 32
COORDINATE_LENGTH = 32

_GENERATOR_X = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_GENERATOR_Y = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_Jacobian = tuple[int, int, int]
_JACOBIAN_INFINITY: _Jacobian = (1, 1, 0)


def _on_curve(x: int, y: int) -> bool:
    return (y * y - x * x * x - CURVE_B) % FIELD_PRIME == 0


def _sqrt_mod_p(value: int) -> Optional[int]:
    root = pow(value, (FIELD_PRIME + 1) // 4, FIELD_PRIME)
    return root if root * root % FIELD_PRIME == value % FIELD_PRIME else None


def _jacobian_double(point: _Jacobian) -> _Jacobian:
    x, y, z = point
    if z == 0 or y == 0:
        return _JACOBIAN_INFINITY
    p = FIELD_PRIME
    yy = y * y % p
    s = 4 * x * yy % p
    m = 3 * x * x % p
    nx = (m * m - 2 * s) % p
    ny = (m * (s - nx) - 8 * yy * yy) % p
    nz = 2 * y * z % p
    return nx, ny, nz


def _jacobian_add(a: _Jacobian, b: _Jacobian) -> _Jacobian:
    x1, y1, z1 = a
    x2, y2, z2 = b
    if z1 == 0:
        return b
    if z2 == 0:
        return a
    p = FIELD_PRIME
    z1z1 = z1 * z1 % p
    z2z2 = z2 * z2 % p
    u1 = x1 * z2z2 % p
    u2 = x2 * z1z1 % p
    s1 = y1 * z2 * z2z2 % p
    s2 = y2 * z1 * z1z1 % p
    if u1 == u2:
        if s1 != s2:
            return _JACOBIAN_INFINITY
        return _jacobian_double(a)
    h = (u2 - u1) % p
    r = (s2 - s1) % p
    hh = h * h % p
    hhh = h * hh % p
    v = u1 * hh % p
    x3 = (r * r - hhh - 2 * v) % p
    y3 = (r * (v - x3) - s1 * hhh) % p
    z3 = h * z1 * z2 % p
    return x3, y3, z3


class Scalar:
    """An element of the scalar field, i.e. an integer modulo the curve order."""

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, "Scalar"] = 0) -> None:
        if isinstance(value, Scalar):
            value = value._value
        if not isinstance(value, int):
            raise TypeError(f"cannot build a scalar from {type(value).__name__}")
        self._value = value % CURVE_ORDER

    @classmethod
    def random(cls) -> "Scalar":
        """Sample a uniformly random non-zero scalar."""
        return cls(secrets.randbelow(CURVE_ORDER - 1) + 1)

    @classmethod
    def zero(cls) -> "Scalar":
        return cls(0)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Scalar":
        """Decode a 32-byte big-endian scalar, rejecting values not below the order."""
        if len(data) != SCALAR_LENGTH:
            raise ValueError(f"scalar must be {SCALAR_LENGTH} bytes, got {len(data)}")
        value = int.from_bytes(data, "big")
        if value >= CURVE_ORDER:
            raise ValueError("scalar is not smaller than the curve order")
        return cls(value)

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(SCALAR_LENGTH, "big")

    def to_int(self) -> int:
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def invert(self) -> "Scalar":
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self._value == 0:
            raise ZeroDivisionError("zero scalar has no inverse")
        return Scalar(pow(self._value, -1, CURVE_ORDER))

    @staticmethod
    def _coerce(other: object) -> Optional[int]:
        if isinstance(other, Scalar):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other: object) -> "Scalar":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Scalar":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value - value)

    def __rsub__(self, other: object) -> "Scalar":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(value - self._value)

    def __mul__(self, other: object) -> "Scalar":
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value * value)

    __rmul__ = __mul__

    def __neg__(self) -> "Scalar":
        return Scalar(-self._value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Scalar", self._value))

    def __repr__(self) -> str:
        return f"Scalar(0x{self._value:064x})"


class Point:
    """A point of the secp256k1 group; the point at infinity has no coordinates."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int) -> None:
        if not (0 <= x < FIELD_PRIME and 0 <= y < FIELD_PRIME) or not _on_curve(x, y):
            raise ValueError("coordinates do not lie on the curve")
        self._x: Optional[int] = x
        self._y: Optional[int] = y

    @classmethod
    def _make(cls, x: Optional[int], y: Optional[int]) -> "Point":
        point = object.__new__(cls)
        point._x = x
        point._y = y
        return point

    @classmethod
    def generator(cls) -> "Point":
        return _GENERATOR

    @classmethod
    def base_point2(cls) -> "Point":
        """A second generator whose discrete log relative to the generator is unknown."""
        return _BASE_POINT2

    @classmethod
    def zero(cls) -> "Point":
        return _INFINITY

    @property
    def x(self) -> Optional[int]:
        return self._x

    @property
    def y(self) -> Optional[int]:
        return self._y

    def is_zero(self) -> bool:
        return self._x is None

    @classmethod
    def from_bytes(cls, data: bytes) -> "Point":
        """Decode a SEC1 point; a single zero byte stands for the point at infinity."""
        if data == b"\x00":
            return _INFINITY
        if len(data) == 1 + COORDINATE_LENGTH and data[0] in (2, 3):
            x = int.from_bytes(data[1:], "big")
            if x >= FIELD_PRIME:
                raise ValueError("x coordinate out of range")
            y = _sqrt_mod_p(x * x * x + CURVE_B)
            if y is None:
                raise ValueError("x coordinate is not on the curve")
            if y % 2 != data[0] % 2:
                y = FIELD_PRIME - y
            return cls(x, y)
        if len(data) == 1 + 2 * COORDINATE_LENGTH and data[0] == 4:
            x = int.from_bytes(data[1 : 1 + COORDINATE_LENGTH], "big")
            y = int.from_bytes(data[1 + COORDINATE_LENGTH :], "big")
            return cls(x, y)
        raise ValueError("malformed point encoding")

    def to_bytes(self, compressed: bool = True) -> bytes:
        if self._x is None or self._y is None:
            return b"\x00"
        x_bytes = self._x.to_bytes(COORDINATE_LENGTH, "big")
        if compressed:
            return bytes([2 + (self._y & 1)]) + x_bytes
        return b"\x04" + x_bytes + self._y.to_bytes(COORDINATE_LENGTH, "big")

    def _to_jacobian(self) -> _Jacobian:
        if self._x is None or self._y is None:
            return _JACOBIAN_INFINITY
        return self._x, self._y, 1

    @classmethod
    def _from_jacobian(cls, point: _Jacobian) -> "Point":
        x, y, z = point
        if z == 0:
            return _INFINITY
        z_inv = pow(z, -1, FIELD_PRIME)
        z_inv2 = z_inv * z_inv % FIELD_PRIME
        return cls._make(x * z_inv2 % FIELD_PRIME, y * z_inv2 * z_inv % FIELD_PRIME)

    def _multiply(self, k: int) -> "Point":
        k %= CURVE_ORDER
        if k == 0 or self.is_zero():
            return _INFINITY
        addend = self._to_jacobian()
        result = _JACOBIAN_INFINITY
        for bit in bin(k)[2:]:
            result = _jacobian_double(result)
            if bit == "1":
                result = _jacobian_add(result, addend)
        return self._from_jacobian(result)

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self._from_jacobian(_jacobian_add(self._to_jacobian(), other._to_jacobian()))

    def __neg__(self) -> "Point":
        if self._x is None or self._y is None:
            return _INFINITY
        return self._make(self._x, (FIELD_PRIME - self._y) % FIELD_PRIME)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> "Point":
        if isinstance(other, Scalar):
            return self._multiply(other.to_int())
        if isinstance(other, int):
            return self._multiply(other)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash(("Point", self._x, self._y))

    def __repr__(self) -> str:
        if self._x is None:
            return "Point.zero()"
        return f"Point(0x{self._x:064x}, 0x{self._y:064x})"


_INFINITY = Point._make(None, None)
_GENERATOR = Point(_GENERATOR_X, _GENERATOR_Y)


def _derive_base_point2() -> Point:
    """Hash the compressed generator to an x coordinate and increment until it lifts."""
    x = int.from_bytes(hashlib.sha256(_GENERATOR.to_bytes(compressed=True)).digest(), "big")
    while True:
        x %= FIELD_PRIME
        y = _sqrt_mod_p(x * x * x + CURVE_B)
        if y is not None:
            return Point(x, y if y % 2 == 0 else FIELD_PRIME - y)
        x += 1


_BASE_POINT2 = _derive_base_point2()