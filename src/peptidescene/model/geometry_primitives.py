"""
Geometric Primitives for chain layout and scene placement.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


UNIT_X = Vector(1.0, 0.0, 0.0)
UNIT_Y = Vector(0.0, 1.0, 0.0)
UNIT_Z = Vector(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in 3D space."""
    x: float
    y: float
    z: float = 0.0

    @staticmethod
    def origin() -> Point:
        return Point(0.0, 0.0, 0.0)

    @staticmethod
    def from_array(values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Point:
        if len(values) != 3:
            raise ValueError(f"Expected 3 coordinates, got {len(values)}.")
        return Point(float(values[0]), float(values[1]), float(values[2]))

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def with_x(self, x: float) -> Point:
        return Point(x, self.y, self.z)

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2, (self.z + other.z) / 2)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


class Transform:
    """
    Rigid 3D transform (rotation + translation) stored as a 4x4 matrix.

    Instances are immutable: every factory and composition allocates a fresh
    array, and `matrix` hands out a copy.
    """
    __slots__ = ("_matrix",)

    def __init__(self, matrix: npt.NDArray[np.float64]) -> None:
        arr = np.array(matrix, dtype=np.float64)
        if arr.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got {arr.shape}.")
        arr.setflags(write=False)
        self._matrix = arr

    @staticmethod
    def identity() -> Transform:
        return Transform(np.eye(4))

    @staticmethod
    def from_translation(point: Point) -> Transform:
        m = np.eye(4)
        m[:3, 3] = point.to_array()
        return Transform(m)

    @staticmethod
    def from_axis_angle(axis: Vector, angle_rad: float) -> Transform:
        """Rotation about a unit axis through the origin (right-handed)."""
        k = axis.normalize().to_array()
        if not k.any():
            raise ValueError("Rotation axis must be non-zero.")
        kx = np.array([
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ])
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        m = np.eye(4)
        m[:3, :3] = cos_a * np.eye(3) + sin_a * kx + (1.0 - cos_a) * np.outer(k, k)
        return Transform(m)

    @staticmethod
    def aligning(direction: Vector, axis: Vector = UNIT_Y) -> Transform:
        """
        Rotation that maps `axis` onto `direction`.
        A zero direction yields the identity.
        """
        d = direction.normalize()
        a = axis.normalize()
        if d.magnitude == 0.0:
            return Transform.identity()

        rot_axis = a.cross(d)
        cos_a = a.dot(d)
        if rot_axis.magnitude < 1e-12:
            if cos_a > 0.0:
                return Transform.identity()
            # Antiparallel: half turn about any axis perpendicular to `axis`
            helper = UNIT_X if abs(a.x) < 0.9 else UNIT_Z
            return Transform.from_axis_angle(a.cross(helper), math.pi)

        angle = math.atan2(rot_axis.magnitude, cos_a)
        return Transform.from_axis_angle(rot_axis, angle)

    def __matmul__(self, other: Transform) -> Transform:
        return Transform(self._matrix @ other._matrix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(self._matrix.tobytes())

    def __repr__(self) -> str:
        p = self.position
        return f"Transform(position=({p.x:.3f}, {p.y:.3f}, {p.z:.3f}))"

    @property
    def matrix(self) -> npt.NDArray[np.float64]:
        return self._matrix.copy()

    @property
    def position(self) -> Point:
        return Point.from_array(self._matrix[:3, 3])

    @property
    def rotation(self) -> npt.NDArray[np.float64]:
        return self._matrix[:3, :3].copy()

    def apply_to_vector(self, vector: Vector) -> Vector:
        """Rotate a direction vector (translation is ignored)."""
        x, y, z = self._matrix[:3, :3] @ vector.to_array()
        return Vector(float(x), float(y), float(z))

    def allclose(self, other: Transform, atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._matrix, other._matrix, atol=atol))

    def to_list(self) -> list[list[float]]:
        return self._matrix.tolist()
