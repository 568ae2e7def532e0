# vector3/vector.py
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float64


class DegenerateVectorError(ZeroDivisionError):
    """
    Raised when an operation needs a direction from a zero-length vector.
    """


def _require_vector(value, operation: str) -> None:
    if not isinstance(value, Vector3):
        logger.debug("%s requires Vector3 arguments, got %s", operation, type(value).__name__)
        raise TypeError(f"{operation}() requires Vector3 arguments, got {type(value).__name__}")


class Vector3:
    """
    A 3D vector/point.

    The named methods (set, copy, negate, add, subtract, multiply_scalar,
    normalize, rescale) change the vector in place and return it so calls
    can be chained. Operators (+, -, *, /) always build a new vector.
    """
    def __init__(self, x: float = 0, y: float = 0, z: float = 0):
        self.x = x
        self.y = y
        self.z = z

    # -------------------------------------------------------------------------
    # In-place operations
    # -------------------------------------------------------------------------
    def set(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    def copy(self, other: "Vector3") -> "Vector3":
        _require_vector(other, "copy")
        return self.set(other.x, other.y, other.z)

    def negate(self) -> "Vector3":
        return self.multiply_scalar(-1)

    def add(self, v: "Vector3") -> "Vector3":
        _require_vector(v, "add")
        self.x += v.x
        self.y += v.y
        self.z += v.z
        return self

    def subtract(self, v: "Vector3") -> "Vector3":
        _require_vector(v, "subtract")
        self.x -= v.x
        self.y -= v.y
        self.z -= v.z
        return self

    def multiply_scalar(self, scalar: float) -> "Vector3":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def normalize(self) -> "Vector3":
        """
        Scales this vector to unit length.
        Raises DegenerateVectorError for a zero vector, leaving it unchanged.
        """
        return self.rescale(1.0)

    def rescale(self, new_scale: float) -> "Vector3":
        """
        Changes this vector's length to new_scale, keeping its direction.
        A negative new_scale flips the direction.
        """
        length = self.length()
        if length == 0:
            logger.debug("Cannot rescale zero-length vector %r", self)
            raise DegenerateVectorError("cannot rescale a zero-length vector")
        # new_scale / length overflows for subnormal lengths, so divide first.
        return self.set(
            self.x / length * new_scale,
            self.y / length * new_scale,
            self.z / length * new_scale
        )

    # -------------------------------------------------------------------------
    # Read-only operations
    # -------------------------------------------------------------------------
    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def length_sqr(self) -> float:
        # Must not take a square root.
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: "Vector3") -> float:
        _require_vector(other, "dot")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        _require_vector(other, "cross")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @staticmethod
    def from_to(from_point: "Vector3", to_point: "Vector3") -> "Vector3":
        """
        Returns the vector that goes from from_point to to_point.
        """
        _require_vector(from_point, "from_to")
        _require_vector(to_point, "from_to")
        return to_point.clone().subtract(from_point)

    @staticmethod
    def angle(v1: "Vector3", v2: "Vector3") -> float:
        """
        Returns the angle between v1 and v2 in degrees, in [0, 180].
        NaN components give a NaN angle.
        """
        _require_vector(v1, "angle")
        _require_vector(v2, "angle")
        length1 = v1.length()
        length2 = v2.length()
        if length1 == 0 or length2 == 0:
            logger.debug("Angle undefined between %r and %r", v1, v2)
            raise DegenerateVectorError("angle is undefined for a zero-length vector")
        cosine = (v1 / length1).dot(v2 / length2)
        # Rounding can push the cosine of (anti)parallel vectors just past 1.
        if not math.isnan(cosine):
            cosine = max(-1.0, min(1.0, cosine))
        return math.degrees(math.acos(cosine))

    @staticmethod
    def project(vector_to_project: "Vector3", other_vector: "Vector3") -> "Vector3":
        """
        Returns a vector along other_vector whose length is the scalar
        projection of vector_to_project onto other_vector.

        The scalar projection is signed, so the result points against
        other_vector when the two are more than 90 degrees apart.
        Neither argument is modified.
        """
        _require_vector(vector_to_project, "project")
        _require_vector(other_vector, "project")
        other_length = other_vector.length()
        if other_length == 0:
            logger.debug("Cannot project %r onto zero-length vector", vector_to_project)
            raise DegenerateVectorError("cannot project onto a zero-length vector")
        direction = other_vector / other_length
        return direction.multiply_scalar(vector_to_project.dot(direction))

    def is_close(self, other: "Vector3", rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        _require_vector(other, "is_close")
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )

    # -------------------------------------------------------------------------
    # numpy interop
    # -------------------------------------------------------------------------
    def to_array(self, dtype=DEFAULT_DTYPE) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        arr = np.asarray(values, dtype=DEFAULT_DTYPE)
        if arr.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------
    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.clone().add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.clone().subtract(other)

    def __neg__(self) -> "Vector3":
        return self.clone().negate()

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self.clone().multiply_scalar(other)
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
