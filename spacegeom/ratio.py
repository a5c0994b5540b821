from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spacegeom.utils import is_zero, isclose


class RatioKind(Enum):
    INVALID = "invalid"
    ZEROS = "zeros"
    REAL = "real"


@dataclass(frozen=True)
class Ratio:
    """The quotient of two coordinates, classified for the linear dependence test of two vectors.

    A ratio is either invalid (exactly one operand is zero), a wildcard (both operands are zero) or a real quotient.

    Attributes:
        kind: The kind of the ratio.
        value: The quotient, only set for real ratios.

    """

    kind: RatioKind
    value: float | None = None

    @classmethod
    def compute(cls, x: float, y: float) -> Ratio:
        """Computes the ratio x / y.

        Args:
            x, y: The two operands.

        Returns:
            The classified ratio.

        """
        x_zero, y_zero = is_zero(x), is_zero(y)
        if x_zero and y_zero:
            return cls(RatioKind.ZEROS)
        if x_zero or y_zero:
            return cls(RatioKind.INVALID)
        return cls(RatioKind.REAL, x / y)

    @property
    def is_valid(self) -> bool:
        return self.kind is not RatioKind.INVALID

    def is_compatible(self, other: Ratio) -> bool:
        """Tests whether two ratios agree for the purpose of the linear dependence test.

        An invalid ratio is compatible with nothing, not even with itself. A ratio of two zeros is compatible with every
        valid ratio. Two real ratios are compatible if their values are equal.

        Args:
            other: The ratio to compare with.

        Returns:
            True if the ratios are compatible.

        """
        if self.kind is RatioKind.INVALID or other.kind is RatioKind.INVALID:
            return False
        if self.kind is RatioKind.ZEROS or other.kind is RatioKind.ZEROS:
            return True
        return isclose(self.value, other.value)  # type: ignore[arg-type]
