from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spacegeom.base import Vector


class GeometryException(Exception):
    """A general geometric error occurred."""


class NotCoplanar(GeometryException, ValueError):
    """The given lines are not coplanar."""


class NotParallel(GeometryException, ValueError):
    """The given planes are not parallel."""


class LinearDependenceError(GeometryException, ValueError):
    """The given values were linearly dependent, making the computation impossible.

    Attributes:
        dependent_values (tuple[Vector, ...]): The vectors that turned out to be linearly dependent.

    """

    def __init__(self, message: str, *dependent_values: Vector) -> None:
        super().__init__(message)
        self.dependent_values = dependent_values


class DegenerateEquation(GeometryException, ValueError):
    """All variable coefficients of a linear equation are zero."""


class IncompatibleDependencies(GeometryException, ValueError):
    """Two affine dependencies cannot be combined into a point."""


class IncompatibleShapeError(ValueError):
    """The given array has a shape that is not compatible."""
