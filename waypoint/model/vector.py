"""Three-component float vector with tolerant structural equality.

``Vector`` is a small value type used for anchor positions along a path. All
binary operators return new instances; only the explicit setters (``set`` and
``set_from``) mutate in place. A vector built with two arguments is a 2-D
vector lying in the ``z == 0`` plane.

Equality does not use ``==`` on the raw components. Each component pair is
checked with `components_equal`, which matches NaN-ness, finiteness and sign
bit before allowing a difference of one unit in the last place. This keeps
``+0.0`` and ``-0.0`` apart while treating last-bit rounding noise as equal.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar, Iterator, Optional, Sequence, Tuple

import numpy as np

from waypoint.config import VECTOR_CONFIG
from waypoint.types.base import Number

if TYPE_CHECKING:
    import numpy.typing as npt


def _sign(value: float) -> float:
    # copysign reads the sign bit, so it separates -0.0 and negative NaN
    return math.copysign(1.0, value)


def components_equal(a: float, b: float) -> bool:
    """Return True if two vector components are equal under the tolerant rule.

    Both values must agree on NaN-ness, finiteness and sign bit. Finite values
    must then be within the configured ulp tolerance of either value. Two
    infinities of the same sign are equal; two NaNs with the same sign bit are
    equal.
    """
    if math.isnan(a) != math.isnan(b):
        return False
    if math.isfinite(a) != math.isfinite(b):
        return False
    if _sign(a) != _sign(b):
        return False
    if not math.isfinite(a):
        return True
    return abs(a - b) <= VECTOR_CONFIG.tolerance(a, b)


def vectors_equal(a: "Vector", b: "Vector") -> bool:
    """Compare two vectors component-wise with `components_equal`."""
    return (
        components_equal(a.x, b.x)
        and components_equal(a.y, b.y)
        and components_equal(a.z, b.z)
    )


def _hash_class(value: float) -> Tuple[bool, bool, float]:
    # Values one ulp apart may sit on either side of a power of two, so only
    # properties that equality requires to match can feed the hash.
    return (math.isnan(value), math.isinf(value), _sign(value))


def _square_in_range(value: float) -> bool:
    return sys.float_info.min <= value < math.inf


@dataclass(eq=False)
class Vector:
    """A two- or three-dimensional vector of floats.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component, 0.0 for 2-D use.
    """

    x: float
    y: float
    z: float = 0.0

    ZERO: ClassVar["Vector"]
    INF: ClassVar["Vector"]
    NAN: ClassVar["Vector"]

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @classmethod
    def of(cls, other: "Vector") -> "Vector":
        """Copy-construct a vector from ``other``."""
        return cls(other.x, other.y, other.z)

    @classmethod
    def from_angle(cls, angle: Number) -> "Vector":
        """Return the 2-D unit vector heading towards ``angle`` (radians)."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector":
        """Build a vector from a sequence or array of two or three numbers."""
        arr = np.asarray(values, dtype=float).ravel()
        if arr.size not in (2, 3):
            raise ValueError(
                f"Expected 2 or 3 components, got {arr.size}: {values!r}"
            )
        return cls(*arr.tolist())

    # Arithmetic

    def _combine(self, other: Any, op) -> "Vector":
        if isinstance(other, Vector):
            return Vector(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, Real):
            f = float(other)
            return Vector(op(self.x, f), op(self.y, f), op(self.z, f))
        return NotImplemented

    def __add__(self, other: Any) -> "Vector":
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> "Vector":
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other: Any) -> "Vector":
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> "Vector":
        return self._combine(other, lambda a, b: b - a)

    def __mul__(self, other: Any) -> "Vector":
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> "Vector":
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other: Any) -> "Vector":
        if isinstance(other, Vector):
            return _divide(self.to_array(), other.to_array())
        if isinstance(other, Real):
            return _divide(self.to_array(), float(other))
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "Vector":
        if isinstance(other, Real):
            return _divide(float(other), self.to_array())
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    # Metrics

    def magnitude(self) -> float:
        """Return the Euclidean length of this vector.

        Uses `math.hypot`, which scales internally so very large or very small
        components neither overflow nor underflow.
        """
        return math.hypot(self.x, self.y, self.z)

    def magnitude_squared(self) -> float:
        """Return the squared length; cheaper than `magnitude`."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> "Vector":
        """Return this vector scaled to length 1.

        A zero-length vector is returned as an unchanged copy.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return self.clone()
        return self / mag

    def set_magnitude(self, magnitude: Number) -> "Vector":
        """Return this vector's direction scaled to ``magnitude``."""
        return self.normalize() * magnitude

    def limit(self, limit: Number) -> "Vector":
        """Return a copy whose magnitude does not exceed ``limit``."""
        limit = float(limit)
        mag_sq = self.magnitude_squared()
        limit_sq = limit * limit
        if _square_in_range(mag_sq) and _square_in_range(limit_sq):
            within = mag_sq < limit_sq
        else:
            # A square overflowed or went subnormal; compare lengths instead
            within = self.magnitude() < limit
        if within:
            return self.clone()
        return self.normalize() * limit

    def lerp(self, other: "Vector", amount: Number) -> "Vector":
        """Linearly interpolate towards ``other``.

        ``amount`` is not clamped: values outside [0, 1] extrapolate along
        the line through both vectors.

        Args:
            other: Vector reached at ``amount == 1``.
            amount: Interpolation parameter.

        Returns:
            ``self + (other - self) * amount`` as a new vector.
        """
        return self + (other - self) * amount

    # In-place setters

    def set(
        self,
        x: Optional[Number] = None,
        y: Optional[Number] = None,
        z: Optional[Number] = None,
    ) -> "Vector":
        """Overwrite the given components in place and return ``self``.

        Components passed as None keep their current value.
        """
        if x is not None:
            self.x = float(x)
        if y is not None:
            self.y = float(y)
        if z is not None:
            self.z = float(z)
        return self

    def set_from(self, other: "Vector") -> "Vector":
        """Copy all components of ``other`` into this vector and return ``self``."""
        self.x = other.x
        self.y = other.y
        self.z = other.z
        return self

    # Copies and conversions

    def clone(self) -> "Vector":
        return Vector(self.x, self.y, self.z)

    __copy__ = clone

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # Equality and ordering

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        return vectors_equal(self, other)

    def __hash__(self) -> int:
        # Coarse on purpose: every finite vector of a given sign pattern shares
        # one of at most 27 hashes, so sets and dicts of vectors (all_points)
        # cost O(n^2) equality checks in the worst case.
        return hash((_hash_class(self.x), _hash_class(self.y), _hash_class(self.z)))

    def compare_to(self, other: "Vector") -> int:
        """Compare lexicographically by (x, y, z).

        NaN ranks above every number, including +inf, and two NaNs tie so the
        next component decides. Otherwise plain float comparison applies
        (``-0.0`` ties with ``0.0``).

        Returns:
            -1, 0 or 1.
        """
        for a, b in ((self.x, other.x), (self.y, other.y), (self.z, other.z)):
            a_nan, b_nan = math.isnan(a), math.isnan(b)
            if a_nan or b_nan:
                if a_nan and b_nan:
                    continue
                return 1 if a_nan else -1
            if a < b:
                return -1
            if a > b:
                return 1
        return 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare_to(other) >= 0


def _divide(numerator: Any, denominator: Any) -> Vector:
    # x/0 gives a signed infinity and 0/0 gives NaN, as in IEEE-754
    with np.errstate(divide="ignore", invalid="ignore"):
        return Vector.from_array(np.divide(numerator, denominator))


#: Origin (0, 0, 0).
Vector.ZERO = Vector(0.0, 0.0, 0.0)
#: All components positive infinity.
Vector.INF = Vector(math.inf, math.inf, math.inf)
#: All components NaN; marks "no position".
Vector.NAN = Vector(math.nan, math.nan, math.nan)
