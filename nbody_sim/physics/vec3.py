"""Three-component vector/point type backed by a float64 array."""

from typing import Iterable
import numpy as np


class Vec3:
    """Immutable 3-vector with arithmetic operators.

    Every operation returns a new Vec3, so in-place operators such as ``+=``
    rebind the name instead of mutating shared state. No checks are made for
    NaN or Inf; they propagate through arithmetic as usual, and numpy
    floating-point warnings are suppressed.
    """

    __slots__ = ("_e",)

    ZERO: "Vec3"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._e = np.array((x, y, z), dtype=np.float64)

    @classmethod
    def from_array(cls, data) -> "Vec3":
        """Build a vector from any length-3 sequence or array."""
        values = np.asarray(data, dtype=np.float64).reshape(3)
        return cls._wrap(values.copy())

    @classmethod
    def _wrap(cls, values: np.ndarray) -> "Vec3":
        vec = cls.__new__(cls)
        vec._e = values
        return vec

    @property
    def x(self) -> float:
        return float(self._e[0])

    @property
    def y(self) -> float:
        return float(self._e[1])

    @property
    def z(self) -> float:
        return float(self._e[2])

    def to_array(self) -> np.ndarray:
        """Return a copy of the components as a (3,) array."""
        return self._e.copy()

    def length_squared(self) -> float:
        return dot(self, self)

    def length(self) -> float:
        """Euclidean norm."""
        return float(np.sqrt(self.length_squared()))

    @staticmethod
    def sum(vectors: Iterable["Vec3"]) -> "Vec3":
        """Sum vectors in iteration order, starting from zero."""
        total = Vec3.ZERO
        for vec in vectors:
            total = total + vec
        return total

    # Arithmetic

    def __neg__(self) -> "Vec3":
        return Vec3._wrap(-self._e)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vec3._wrap(self._e + other._e)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vec3._wrap(self._e - other._e)

    def __mul__(self, other) -> "Vec3":
        # Vec3 * Vec3 is component-wise
        if isinstance(other, Vec3):
            factor = other._e
        elif isinstance(other, (int, float, np.floating, np.integer)):
            factor = float(other)
        else:
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vec3._wrap(self._e * factor)

    def __rmul__(self, other) -> "Vec3":
        return self.__mul__(other)

    def __truediv__(self, other) -> "Vec3":
        if isinstance(other, (int, float, np.floating, np.integer)):
            # numpy semantics: division by zero yields inf/nan instead of raising
            with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
                return Vec3._wrap(self._e / np.float64(other))
        return NotImplemented

    # Comparison and rendering

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._e, other._e))

    def __hash__(self) -> int:
        return hash(tuple(self._e.tolist()))

    def __iter__(self):
        return iter(self._e.tolist())

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return " ".join(format(c, spec) for c in (self.x, self.y, self.z))


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)

# Points share the vector representation
Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    """Dot product of two vectors."""
    return float(np.dot(u._e, v._e))


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Cross product u x v."""
    with np.errstate(over="ignore", invalid="ignore"):
        return Vec3._wrap(np.cross(u._e, v._e))


def unit(v: Vec3) -> Vec3:
    """Unit vector along v. The zero vector yields NaN components."""
    return v / v.length()
