from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import TYPE_CHECKING

from spacegeom.base import Vector
from spacegeom.equation import solve_linear, solve_system_2x2
from spacegeom.exceptions import LinearDependenceError
from spacegeom.utils import acute_angle, is_zero

if TYPE_CHECKING:
    from spacegeom.utils.typing import LinearEquation2D, VectorLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """A line in three-dimensional space, given by a point and a direction.

    The points of the line are ``point + t * direction`` for all real t. The direction is assumed to be non-zero.

    Args:
        point: A point on the line.
        direction: The direction of the line.

    """

    point: Vector
    direction: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", Vector(self.point))
        object.__setattr__(self, "direction", Vector(self.direction))

    @classmethod
    def from_two_points(cls, p: VectorLike, q: VectorLike) -> Line:
        """Constructs the line through two points.

        Args:
            p, q: Two distinct points.

        Returns:
            The line through p in the direction of q - p.

        Raises:
            LinearDependenceError: If the two points coincide.

        """
        p, q = Vector(p), Vector(q)
        direction = q - p
        if direction.is_zero:
            raise LinearDependenceError("Two identical points do not determine a line.", p, q)
        return cls(p, direction)

    def point_at(self, t: float) -> Vector:
        """The point ``point + t * direction``."""
        return self.point + t * self.direction

    def distance_from_point(self, other: VectorLike) -> float:
        """Calculates the distance between a point and the line.

        The foot of the perpendicular ``f = point + t * direction`` satisfies ``direction * (f - other) = 0``, which is a
        linear equation in t.

        Args:
            other: The point.

        Returns:
            The distance of the point from the line.

        """
        other = Vector(other)
        offset = self.point - other
        t = solve_linear(self.direction.dot(self.direction), self.direction.dot(offset))
        if not t.is_real:
            raise RuntimeError("The foot of the perpendicular is unique for a non-zero direction.")
        return (offset + t.value * self.direction).length  # type: ignore[operator]

    def is_on_line(self, other: VectorLike) -> bool:
        """Tests whether the line contains a point."""
        return is_zero(self.distance_from_point(other))

    def intersection(self, other: Line) -> Vector | None:
        """Calculates the point of intersection of two lines.

        The lines meet where ``t * u1 - s * u2 = p2 - p1``. Each axis gives one equation in t and s, axes where both
        directions vanish are skipped. Pairs of these equations are solved until one has a unique solution, then both
        lines are evaluated to check the remaining equation.

        The check uses exact comparison by default. Lines that meet may then be rejected because of rounding, e.g. when
        the parameters are thirds. Set ``spacegeom.utils.math.EQ_TOL_ABS`` to accept points within a tolerance.

        Args:
            other: The second line.

        Returns:
            The common point or None if the lines are parallel, identical or skew.

        """
        offset = other.point - self.point
        equations: list[LinearEquation2D] = [
            (u, -v, -o)
            for u, v, o in zip(self.direction, other.direction, offset)
            if not (is_zero(u) and is_zero(v))
        ]

        for eq1, eq2 in combinations(equations, 2):
            solution = solve_system_2x2(eq1, eq2)
            if solution is not None:
                break
        else:
            return None

        t, s = solution
        p, q = self.point_at(t), other.point_at(s)
        if not p.isclose(q):
            logger.debug("Lines %s and %s do not meet, %s != %s", self, other, p, q)
            return None
        return p

    def angle_between(self, other: Line) -> float:
        r"""The angle between two lines in radians, between :math:`0` and :math:`\pi / 2`."""
        return acute_angle(self.direction.angle(other.direction))

    def relation(self, other: Line) -> LineRelation:
        return LineRelation.of(self, other)

    def coincides_with(self, other: Line) -> bool:
        """Tests whether two lines consist of the same points, independently of their parametrization."""
        return self.relation(other).kind is LineRelationKind.UNITE


class LineRelationKind(Enum):
    UNITE = "unite"
    PARALLEL = "parallel"
    INTERSECT = "intersect"
    FOREIGN = "foreign"


@dataclass(frozen=True)
class LineRelation:
    """The relation between two lines.

    Exactly one of the following applies to a pair of lines:

    - UNITE: the lines consist of the same points.
    - PARALLEL: the lines have a constant ``distance``.
    - INTERSECT: the lines meet in ``point`` at ``angle``.
    - FOREIGN: the lines are skew, they have a ``distance`` and an ``angle`` but no common plane.

    Attributes:
        kind: The kind of the relation.
        distance: The distance of the lines, set for PARALLEL and FOREIGN.
        point: The point of intersection, set for INTERSECT.
        angle: The angle between the lines, set for INTERSECT and FOREIGN.

    """

    kind: LineRelationKind
    distance: float | None = None
    point: Vector | None = None
    angle: float | None = None

    @classmethod
    def unite(cls) -> LineRelation:
        return cls(LineRelationKind.UNITE)

    @classmethod
    def parallel(cls, distance: float) -> LineRelation:
        return cls(LineRelationKind.PARALLEL, distance=distance)

    @classmethod
    def intersect(cls, point: Vector, angle: float) -> LineRelation:
        return cls(LineRelationKind.INTERSECT, point=point, angle=angle)

    @classmethod
    def foreign(cls, distance: float, angle: float) -> LineRelation:
        return cls(LineRelationKind.FOREIGN, distance=distance, angle=angle)

    @classmethod
    def of(cls, line1: Line, line2: Line) -> LineRelation:
        """Classifies the relation between two lines.

        Args:
            line1, line2: The lines to compare.

        Returns:
            The relation of the two lines.

        """
        if line1.direction.is_linearly_dependent(line2.direction):
            distance = line1.distance_from_point(line2.point)
            if is_zero(distance):
                return cls.unite()
            return cls.parallel(distance)

        angle = line1.angle_between(line2)
        point = line1.intersection(line2)
        if point is not None:
            return cls.intersect(point, angle)

        from spacegeom.plane import Plane

        # the plane through the first line that is parallel to the second one
        common_plane = Plane.from_origin_and_directions(line1.point, line1.direction, line2.direction)
        return cls.foreign(common_plane.distance_from(line2.point), angle)
