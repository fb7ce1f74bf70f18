# core/matrix.py
import math
from numbers import Real
from typing import Optional, Sequence, Union

import numpy as np

from core.errors import HomogeneousTagError, SingularMatrixError
from core.fuzzy import EPSILON, f64_fuzzy_eq
from core.rotation import Rotation, as_radians
from core.vector import POINT_W, VECTOR_W, Point, ThreePart, Vector

__all__ = ["Matrix", "Matrix4", "SingularMatrixError", "HomogeneousTagError"]


def _wrap(data: np.ndarray) -> "Matrix":
    if data.shape == (4, 4):
        return Matrix4(data)
    return Matrix(data)


class Matrix:
    """
    A WIDTH x HEIGHT matrix of float64 backed by a read-only numpy array.
    Indexing is row-major: m[row][column] or m[row, column].
    """

    def __init__(self, rows: Union[Sequence[Sequence[float]], np.ndarray]):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError(f"Matrix needs 2D data, got shape {data.shape}")
        data.setflags(write=False)
        self.data = data

    @classmethod
    def zeros(cls, width: int, height: int) -> "Matrix":
        return _wrap(np.zeros((height, width)))

    @classmethod
    def identity(cls, size: int = 4) -> "Matrix":
        return _wrap(np.identity(size))

    @staticmethod
    def column(part: ThreePart) -> "Matrix":
        """Column-vector (4x1) representation of a point or vector."""
        return Matrix([[part.a], [part.b], [part.c], [part.w]])

    def to_three_part(self) -> ThreePart:
        if self.data.shape == (4, 1):
            return ThreePart(*self.data[:, 0])
        if self.data.shape == (1, 4):
            return ThreePart(*self.data[0, :])
        raise ValueError(f"Only 4x1 or 1x4 matrices convert to ThreePart, got {self.data.shape}")

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index):
        return self.data[index]

    def get_position(self, x: int, y: int) -> float:
        return float(self.data[y, x])

    def transpose(self) -> "Matrix":
        return _wrap(self.data.T)

    def sub_matrix(self, x: int, y: int, width: int, height: int) -> "Matrix":
        """Returns the width x height window whose top-left corner is at column x, row y."""
        return _wrap(self.data[y:y + height, x:x + width])

    def submatrix(self, row: int, column: int) -> "Matrix":
        """Returns a copy with the given row and column removed."""
        return _wrap(np.delete(np.delete(self.data, row, axis=0), column, axis=1))

    def _require_square(self) -> None:
        if self.width != self.height:
            raise ValueError(f"Operation needs a square matrix, got {self.width}x{self.height}")

    def determinant(self) -> float:
        self._require_square()
        if self.width == 1:
            return float(self.data[0, 0])
        if self.width == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])
        # Cofactor expansion along the first row
        return sum(self.cofactor(0, column) * float(self.data[0, column])
                   for column in range(self.width))

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return minor if (row + column) % 2 == 0 else -minor

    def is_invertible(self) -> bool:
        return not f64_fuzzy_eq(self.determinant(), 0.0)

    def inverse(self) -> Optional["Matrix"]:
        """
        Adjugate divided by the determinant.
        Returns None only when the determinant is exactly zero.
        """
        determinant = self.determinant()
        if determinant == 0.0:
            return None
        size = self.width
        out = np.empty((size, size))
        for row in range(size):
            for column in range(size):
                # Transposed placement turns the cofactor matrix into the adjugate
                out[column, row] = self.cofactor(row, column) / determinant
        return _wrap(out)

    def fuzzy_eq(self, other: "Matrix") -> bool:
        if self.data.shape != other.data.shape:
            return False
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.fuzzy_eq(other)

    __hash__ = None

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.width != other.height:
                raise ValueError(
                    f"Cannot multiply {self.width}x{self.height} by {other.width}x{other.height}")
            return _wrap(self.data @ other.data)
        if isinstance(other, Real):
            return _wrap(self.data * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return _wrap(self.data * other)
        return NotImplemented

    def __truediv__(self, other: float) -> "Matrix":
        if not isinstance(other, Real):
            return NotImplemented
        return _wrap(self.data / other)

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return _wrap(self.data + other.data)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return _wrap(self.data - other.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data.tolist()})"


class Matrix4(Matrix):
    """
    4x4 affine transform. Multiplying it with a Point, Vector or Ray applies
    the transform and checks that the homogeneous tag survived.
    """

    def __init__(self, rows):
        super().__init__(rows)
        if self.data.shape != (4, 4):
            raise ValueError(f"Matrix4 needs 4x4 data, got shape {self.data.shape}")

    @classmethod
    def identity(cls, size: int = 4) -> "Matrix4":
        return cls(np.identity(4))

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> "Matrix4":
        return cls([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def translate_vector(cls, offset: Vector) -> "Matrix4":
        return cls.translate(offset.x, offset.y, offset.z)

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> "Matrix4":
        return cls([
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def scale_uniform(cls, factor: float) -> "Matrix4":
        return cls.scale(factor, factor, factor)

    @classmethod
    def rotation(cls, axis: Vector, angle: Union[Rotation, float]) -> "Matrix4":
        """
        Right-handed rotation of `angle` about `axis` (Rodrigues' formula):
        R = cos(a) I + sin(a) [k]x + (1 - cos(a)) k k^T
        """
        k = axis.normalize()
        theta = as_radians(angle)
        c = math.cos(theta)
        s = math.sin(theta)
        t = 1.0 - c
        x, y, z = k.x, k.y, k.z
        return cls([
            [c + x * x * t, x * y * t - z * s, x * z * t + y * s, 0.0],
            [y * x * t + z * s, c + y * y * t, y * z * t - x * s, 0.0],
            [z * x * t - y * s, z * y * t + x * s, c + z * z * t, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_x(cls, angle: Union[Rotation, float]) -> "Matrix4":
        return cls.rotation(Vector(1.0, 0.0, 0.0), angle)

    @classmethod
    def rotation_y(cls, angle: Union[Rotation, float]) -> "Matrix4":
        return cls.rotation(Vector(0.0, 1.0, 0.0), angle)

    @classmethod
    def rotation_z(cls, angle: Union[Rotation, float]) -> "Matrix4":
        return cls.rotation(Vector(0.0, 0.0, 1.0), angle)

    @classmethod
    def shear(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix4":
        """Each argument moves the first axis in proportion to the second (xy: x by y)."""
        return cls([
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def fix_transform(self) -> "Matrix4":
        """Forces the homogeneous row to [0, 0, 0, 1]."""
        data = np.array(self.data)
        data[3, :] = (0.0, 0.0, 0.0, 1.0)
        return Matrix4(data)

    def _apply(self, part: ThreePart, expected_w: float) -> ThreePart:
        column = self.data @ np.array((part.a, part.b, part.c, part.w))
        if abs(column[3] - expected_w) >= EPSILON:
            raise HomogeneousTagError(
                f"Transform produced w={column[3]} where {expected_w} was expected")
        return ThreePart(column[0], column[1], column[2], expected_w)

    def __mul__(self, other):
        if isinstance(other, Point):
            return Point.from_part(self._apply(other.part, POINT_W))
        if isinstance(other, Vector):
            return Vector.from_part(self._apply(other.part, VECTOR_W))
        if hasattr(other, "transform"):
            # Rays (and anything else that knows how to transform itself)
            return other.transform(self)
        return super().__mul__(other)
