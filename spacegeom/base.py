from __future__ import annotations

from collections.abc import Iterator
from numbers import Real
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from typing_extensions import override

from spacegeom.exceptions import IncompatibleShapeError, LinearDependenceError
from spacegeom.ratio import Ratio, RatioKind
from spacegeom.utils import is_zero, isclose

if TYPE_CHECKING:
    from typing_extensions import Self

    from spacegeom.utils.typing import VectorLike


class Vector:
    """Immutable vector (or point) in three-dimensional euclidean space.

    The coordinates are stored in a read-only numpy array of 64-bit floats. Equality is exact component-wise equality;
    use :meth:`isclose` for comparisons that honour the configured tolerances.

    Args:
        *args: A single iterable object, numpy array or vector, or three separate coordinates.

    Attributes:
        array: The underlying numpy array of shape (3,).

    """

    array: npt.NDArray[np.float64]

    def __init__(self, *args: VectorLike | float) -> None:
        if len(args) == 1 and isinstance(args[0], Vector):
            self.array = args[0].array
            return

        if len(args) == 1:
            array = np.array(args[0], dtype=np.float64)
        else:
            array = np.array(args, dtype=np.float64)

        if array.shape != (3,):
            raise IncompatibleShapeError(f"Expected three coordinates, but got an array of shape {array.shape}.")

        array.flags.writeable = False
        self.array = array

    @classmethod
    def zero(cls) -> Self:
        return cls(0, 0, 0)

    @property
    def x(self) -> float:
        return float(self.array[0])

    @property
    def y(self) -> float:
        return float(self.array[1])

    @property
    def z(self) -> float:
        return float(self.array[2])

    def __getitem__(self, index: int) -> float:
        return float(self.array[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self.array.tolist())

    def __len__(self) -> int:
        return 3

    @override
    def __repr__(self) -> str:
        return f"Vector({', '.join(str(c) for c in self)})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.all(self.array == other.array))

    @override
    def __hash__(self) -> int:
        return hash(tuple(self))

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.array + other.array)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.array - other.array)

    def __neg__(self) -> Vector:
        return Vector(-self.array)

    def __mul__(self, other: float) -> Vector:
        if not isinstance(other, (Real, np.number)):
            return NotImplemented
        return Vector(self.array * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Vector:
        if not isinstance(other, (Real, np.number)):
            return NotImplemented
        return Vector(self.array / other)

    def dot(self, other: Vector) -> float:
        """The scalar product of two vectors."""
        return float(np.sum(self.array * other.array))

    def cross(self, other: Vector) -> Vector:
        """The vector product of two vectors.

        The result is orthogonal to both vectors and the three vectors form a right-handed system.

        Args:
            other: The second factor.

        Returns:
            The vector :math:`(u_2 v_3 - u_3 v_2, u_3 v_1 - u_1 v_3, u_1 v_2 - u_2 v_1)`.

        """
        return Vector(np.cross(self.array, other.array))

    @property
    def length(self) -> float:
        """The euclidean length of the vector."""
        return float(np.sqrt(self.dot(self)))

    @property
    def is_zero(self) -> bool:
        """True if all coordinates are zero."""
        return all(is_zero(c) for c in self)

    def isclose(self, other: Vector) -> bool:
        """Compares two vectors coordinate by coordinate using the configured tolerances."""
        return all(isclose(a, b) for a, b in zip(self, other))

    def ratios(self, other: Vector) -> tuple[Ratio, Ratio, Ratio]:
        """The coordinate-wise ratios of this vector and another vector."""
        r1, r2, r3 = (Ratio.compute(a, b) for a, b in zip(self, other))
        return r1, r2, r3

    def is_linearly_dependent(self, other: Vector) -> bool:
        """Tests whether two vectors are scalar multiples of each other.

        The vectors are dependent if the ratios of all three coordinate pairs are pairwise compatible. A coordinate pair
        with exactly one zero makes the vectors independent, a pair of zeros is compatible with any ratio.

        Args:
            other: The vector to test against.

        Returns:
            True if the vectors are linearly dependent.

        """
        r1, r2, r3 = self.ratios(other)
        return r1.is_compatible(r2) and r1.is_compatible(r3) and r2.is_compatible(r3)

    def scale_factor(self, other: Vector) -> float:
        """The scalar r with ``self == r * other`` for two linearly dependent vectors.

        Args:
            other: The vector to divide by.

        Returns:
            The ratio of the two vectors.

        Raises:
            LinearDependenceError: If the vectors are not linearly dependent or have no finite ratio.

        """
        if self.is_linearly_dependent(other):
            for ratio in self.ratios(other):
                if ratio.kind is RatioKind.REAL:
                    return ratio.value  # type: ignore[return-value]
        raise LinearDependenceError("The vectors are not non-zero multiples of each other.", self, other)

    def angle(self, other: Vector) -> float:
        r"""The angle between two vectors in radians, between :math:`0` and :math:`\pi`."""
        cos = self.dot(other) / (self.length * other.length)
        return float(np.arccos(np.clip(cos, -1.0, 1.0)))
