from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from spacegeom.utils import is_zero, isclose

if TYPE_CHECKING:
    from spacegeom.utils.typing import LinearEquation2D


class SolutionKind(Enum):
    NONE = "none"
    UNDEFINED = "undefined"
    REAL = "real"


@dataclass(frozen=True)
class EquationSolution:
    """The solution of a linear equation in a single variable.

    Attributes:
        kind: NONE if no value solves the equation, UNDEFINED if every value does, REAL for a unique solution.
        value: The unique solution, only set for real solutions.

    """

    kind: SolutionKind
    value: float | None = None

    @classmethod
    def none(cls) -> EquationSolution:
        return cls(SolutionKind.NONE)

    @classmethod
    def undefined(cls) -> EquationSolution:
        return cls(SolutionKind.UNDEFINED)

    @classmethod
    def real(cls, value: float) -> EquationSolution:
        return cls(SolutionKind.REAL, value)

    @property
    def is_real(self) -> bool:
        return self.kind is SolutionKind.REAL

    def is_compatible(self, other: EquationSolution) -> bool:
        """Tests whether two independently computed solutions can hold at the same time.

        A missing solution is compatible with nothing, an undefined solution is compatible with every other solution
        and two real solutions are compatible if their values are equal.

        Args:
            other: The solution to compare with.

        Returns:
            True if the solutions are compatible.

        """
        if self.kind is SolutionKind.NONE or other.kind is SolutionKind.NONE:
            return False
        if self.kind is SolutionKind.UNDEFINED or other.kind is SolutionKind.UNDEFINED:
            return True
        return isclose(self.value, other.value)  # type: ignore[arg-type]


def solve_linear(a: float, b: float) -> EquationSolution:
    """Solves the equation ``a*x + b = 0``.

    Args:
        a: The coefficient of x.
        b: The constant term.

    Returns:
        The solution of the equation.

    """
    if is_zero(a):
        return EquationSolution.undefined() if is_zero(b) else EquationSolution.none()
    return EquationSolution.real(-b / a)


def solve_system_2x2(eq1: LinearEquation2D, eq2: LinearEquation2D) -> tuple[float, float] | None:
    """Solves the system ``a*x + b*y + c = 0``, ``m*x + n*y + k = 0``.

    If one of the equations does not depend on x, y is read from that equation directly. Otherwise x is eliminated by
    subtracting the second equation scaled by a/m from the first. The value of y is then substituted into the other
    equation to solve for x.

    Args:
        eq1: The coefficients (a, b, c) of the first equation.
        eq2: The coefficients (m, n, k) of the second equation.

    Returns:
        The unique solution (x, y) or None if the system has no or infinitely many solutions.

    """
    a, b, c = eq1
    m, n, k = eq2

    if is_zero(a):
        y_coefficient, constant = b, c
        remaining = eq2
    elif is_zero(m):
        y_coefficient, constant = n, k
        remaining = eq1
    else:
        multiplier = a / m
        y_coefficient = b - n * multiplier
        constant = c - k * multiplier
        remaining = eq1

    y = solve_linear(y_coefficient, constant)
    if not y.is_real:
        return None

    x = solve_linear(remaining[0], remaining[1] * y.value + remaining[2])  # type: ignore[operator]
    if not x.is_real:
        return None

    return x.value, y.value  # type: ignore[return-value]
