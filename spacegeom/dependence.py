"""Affine dependencies between coordinates, used to intersect two planes without inverting a matrix.

A plane equation ``a*x + b*y + c*z + d = 0`` with at least one zero coefficient can be rewritten so that one coordinate
is an affine function of another one (or a constant). Two independent dependencies describe a line: assigning a value
to the remaining free coordinate yields a point on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from spacegeom.base import Vector
from spacegeom.exceptions import DegenerateEquation, IncompatibleDependencies, LinearDependenceError
from spacegeom.utils import is_zero

if TYPE_CHECKING:
    from spacegeom.utils.typing import LinearEquation3D

logger = logging.getLogger(__name__)


class Dimension(Enum):
    """A coordinate axis. NONE stands for no axis, i.e. a constant."""

    X = 0
    Y = 1
    Z = 2
    NONE = 3

    @property
    def is_axis(self) -> bool:
        return self is not Dimension.NONE


AXES = (Dimension.X, Dimension.Y, Dimension.Z)


def _remaining_axis(*dimensions: Dimension) -> Dimension:
    return next(axis for axis in AXES if axis not in dimensions)


@dataclass(frozen=True)
class SingleScalarDependence:
    """Represents the relation ``target = source_scalar * source + constant``.

    The relation ``y = x + 3`` is represented as ``SingleScalarDependence(Y, X, 1.0, 3.0)`` and the relation ``z = 4``
    as ``SingleScalarDependence(Z, NONE, 0.0, 4.0)``.

    Instances should be obtained from :meth:`compute`, :meth:`compute_from` or :meth:`substitute_in`.

    Attributes:
        target: The axis expressed by the relation, never NONE.
        source: The axis the target depends on, or NONE if the target is a constant.
        source_scalar: The factor of the source.
        constant: The constant term.

    """

    target: Dimension
    source: Dimension
    source_scalar: float
    constant: float

    @classmethod
    def _scalar_only(cls, target: Dimension, coefficient: float, constant: float) -> SingleScalarDependence:
        # a*x + d = 0  =>  x = -d/a
        return cls(target, Dimension.NONE, 0.0, -constant / coefficient)

    @classmethod
    def _from_coefficients(
        cls,
        target: Dimension,
        source: Dimension,
        target_coefficient: float,
        source_coefficient: float,
        constant: float,
    ) -> SingleScalarDependence:
        # b*y + c*z + d = 0  =>  z = -b/c*y - d/c
        return cls(target, source, -source_coefficient / target_coefficient, -constant / target_coefficient)

    @classmethod
    def compute(
        cls, x_coefficient: float, y_coefficient: float, z_coefficient: float, constant: float
    ) -> SingleScalarDependence | None:
        """Derives a dependency from a single equation ``a*x + b*y + c*z + d = 0``.

        The axes are eliminated in a fixed order of priority: z is preferably expressed in terms of y or x, then y in
        terms of x, and x only if it is the single remaining variable.

        Args:
            x_coefficient, y_coefficient, z_coefficient: The coefficients a, b and c.
            constant: The constant term d.

        Returns:
            The dependency or None if no coefficient is zero.

        Raises:
            DegenerateEquation: If all three coefficients are zero.

        """
        x_zero, y_zero, z_zero = is_zero(x_coefficient), is_zero(y_coefficient), is_zero(z_coefficient)

        if x_zero and y_zero and z_zero:
            raise DegenerateEquation("All three coefficients are zero.")
        if x_zero and y_zero:
            return cls._scalar_only(Dimension.Z, z_coefficient, constant)
        if x_zero and z_zero:
            return cls._scalar_only(Dimension.Y, y_coefficient, constant)
        if y_zero and z_zero:
            return cls._scalar_only(Dimension.X, x_coefficient, constant)
        if x_zero:
            return cls._from_coefficients(Dimension.Z, Dimension.Y, z_coefficient, y_coefficient, constant)
        if y_zero:
            return cls._from_coefficients(Dimension.Z, Dimension.X, z_coefficient, x_coefficient, constant)
        if z_zero:
            return cls._from_coefficients(Dimension.Y, Dimension.X, y_coefficient, x_coefficient, constant)

        return None

    @classmethod
    def compute_from(cls, eq1: LinearEquation3D, eq2: LinearEquation3D) -> SingleScalarDependence:
        """Derives a dependency from two independent equations of the form ``a*x + b*y + c*z + d = 0``.

        If neither equation yields a dependency on its own, x is eliminated from the two equations and the dependency
        is derived from the reduced equation.

        Args:
            eq1, eq2: The coefficients (a, b, c, d) of the two equations.

        Returns:
            A dependency that holds for every common solution of the two equations.

        Raises:
            LinearDependenceError: If the variable coefficients of the equations are linearly dependent.

        """
        normal1, normal2 = Vector(eq1[:3]), Vector(eq2[:3])
        if normal1.is_linearly_dependent(normal2):
            raise LinearDependenceError("The equations cannot form a single dependency.", normal1, normal2)

        for eq in (eq1, eq2):
            result = cls.compute(*eq)
            if result is not None:
                return result

        logger.debug("Eliminating x from %s and %s", eq1, eq2)
        return cls._compute_from_full_equations(eq1, eq2)

    @classmethod
    def _compute_from_full_equations(cls, eq1: LinearEquation3D, eq2: LinearEquation3D) -> SingleScalarDependence:
        a, b, c, d1 = eq1
        m, n, k, d2 = eq2
        multiplier = a / m
        # (b - n*a/m)*y + (c - k*a/m)*z + d1 - d2*a/m = 0
        reduced = cls.compute(0.0, b - n * multiplier, c - k * multiplier, d1 - d2 * multiplier)
        if reduced is None:
            raise RuntimeError("An equation without x always yields a dependency.")
        return reduced

    def substitute_in(
        self, x_coefficient: float, y_coefficient: float, z_coefficient: float, constant: float
    ) -> SingleScalarDependence | None:
        """Derives a second dependency from another equation of the form ``a*x + b*y + c*z + d = 0``.

        The equation is used directly if it yields a dependency for a different target. If it yields a dependency for
        the same target, the two dependencies are equated. Otherwise this dependency is substituted into the equation
        to eliminate its target.

        Args:
            x_coefficient, y_coefficient, z_coefficient: The coefficients a, b and c.
            constant: The constant term d.

        Returns:
            A dependency independent of this one or None if the equation adds no information (or contradicts this
            dependency).

        Raises:
            DegenerateEquation: If all three coefficients are zero.

        """
        result = self.compute(x_coefficient, y_coefficient, z_coefficient, constant)
        if result is None:
            return self._substitute([x_coefficient, y_coefficient, z_coefficient], constant)
        if result.target != self.target:
            return result
        # the normalized form cancels exactly if the equation reproduces this dependency
        return self._substitute(*result._normalized_equation())

    def _normalized_equation(self) -> tuple[list[float], float]:
        # target - source_scalar*source - constant = 0
        coefficients = [0.0, 0.0, 0.0]
        coefficients[self.target.value] = 1.0
        if self.source.is_axis:
            coefficients[self.source.value] = -self.source_scalar
        return coefficients, -self.constant

    def _substitute(self, coefficients: list[float], constant: float) -> SingleScalarDependence | None:
        # with z = m*x + n:  a*x + b*y + c*(m*x + n) + d = (a + c*m)*x + b*y + c*n + d = 0
        target_coefficient = coefficients[self.target.value]
        coefficients[self.target.value] = 0.0
        constant += self.constant * target_coefficient
        if self.source.is_axis:
            coefficients[self.source.value] += self.source_scalar * target_coefficient

        if all(is_zero(c) for c in coefficients):
            logger.debug("Equation is equivalent to or conflicts with %s", self)
            return None

        if not self.source.is_axis:
            return self.compute(*coefficients, constant)

        remaining = _remaining_axis(self.target, self.source)
        if is_zero(coefficients[remaining.value]):
            return self._scalar_only(self.source, coefficients[self.source.value], constant)
        return self._from_coefficients(
            remaining, self.source, coefficients[remaining.value], coefficients[self.source.value], constant
        )

    def put(self, value: float) -> float:
        """Evaluates the target for a given value of the source."""
        if not self.source.is_axis:
            return self.constant
        return self.source_scalar * value + self.constant

    @staticmethod
    def put_multiple(dep1: SingleScalarDependence, dep2: SingleScalarDependence, value: float) -> Vector:
        """Assembles a point from two independent dependencies.

        The axis that is the target of neither dependency is the free parameter and takes the given value. The targets
        are evaluated afterwards, a dependency whose source is the target of the other one is evaluated last.

        Args:
            dep1, dep2: The two dependencies.
            value: The value of the free coordinate.

        Returns:
            The point that satisfies both dependencies.

        Raises:
            IncompatibleDependencies: If both dependencies have the same target or depend on each other.

        """
        if dep1.target == dep2.target:
            raise IncompatibleDependencies(f"Both dependencies have the target {dep1.target.name}.")

        values = {_remaining_axis(dep1.target, dep2.target): value}
        pending = [dep1, dep2]
        while pending:
            ready = [dep for dep in pending if not dep.source.is_axis or dep.source in values]
            if not ready:
                raise IncompatibleDependencies("The dependencies depend on each other.")
            for dep in ready:
                values[dep.target] = dep.put(values.get(dep.source, 0.0))
                pending.remove(dep)

        return Vector(values[Dimension.X], values[Dimension.Y], values[Dimension.Z])
