from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from spacegeom.base import Vector
from spacegeom.dependence import SingleScalarDependence
from spacegeom.equation import SolutionKind, solve_linear
from spacegeom.exceptions import DegenerateEquation, LinearDependenceError, NotCoplanar, NotParallel
from spacegeom.line import Line, LineRelationKind
from spacegeom.utils import acute_angle, is_zero

if TYPE_CHECKING:
    from spacegeom.utils.typing import LinearEquation3D, VectorLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plane:
    """A plane in three-dimensional space, given by the equation ``plumb * p + constant_d = 0``.

    Args:
        plumb: The normal vector of the plane, must not be zero.
        constant_d: The constant term of the plane equation.

    Raises:
        DegenerateEquation: If the normal vector is zero.

    """

    plumb: Vector
    constant_d: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "plumb", Vector(self.plumb))
        object.__setattr__(self, "constant_d", float(self.constant_d))
        if self.plumb.is_zero:
            raise DegenerateEquation("The normal vector of a plane must not be zero.")

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float, d: float) -> Plane:
        """Constructs the plane ``a*x + b*y + c*z + d = 0``."""
        return cls(Vector(a, b, c), d)

    @classmethod
    def from_origin_and_directions(cls, origin: VectorLike, dir1: VectorLike, dir2: VectorLike) -> Plane:
        """Constructs the plane through a point that is spanned by two directions.

        Args:
            origin: A point on the plane.
            dir1, dir2: Two linearly independent directions.

        Returns:
            The plane whose normal vector is the vector product of the two directions.

        Raises:
            LinearDependenceError: If the directions are linearly dependent.

        """
        origin, dir1, dir2 = Vector(origin), Vector(dir1), Vector(dir2)
        plumb = dir1.cross(dir2)
        if dir1.is_linearly_dependent(dir2) or plumb.is_zero:
            raise LinearDependenceError("Two linearly dependent vectors cannot span a plane.", dir1, dir2)
        return cls(plumb, -plumb.dot(origin))

    @classmethod
    def from_two_lines(cls, line1: Line, line2: Line) -> Plane:
        """Constructs the plane that contains two parallel or intersecting lines.

        Args:
            line1, line2: The two lines.

        Returns:
            The common plane of the lines.

        Raises:
            LinearDependenceError: If the lines coincide, they lie in infinitely many planes.
            NotCoplanar: If the lines are skew.

        """
        relation = line1.relation(line2)
        if relation.kind is LineRelationKind.PARALLEL:
            return cls.from_origin_and_directions(line1.point, line1.direction, line2.point - line1.point)
        if relation.kind is LineRelationKind.INTERSECT:
            return cls.from_origin_and_directions(relation.point, line1.direction, line2.direction)  # type: ignore[arg-type]
        if relation.kind is LineRelationKind.UNITE:
            raise LinearDependenceError("The lines coincide and lie in infinitely many planes.")
        raise NotCoplanar("Skew lines have no common plane.")

    @classmethod
    def from_three_points(cls, p1: VectorLike, p2: VectorLike, p3: VectorLike) -> Plane:
        """Constructs the plane through three points.

        Raises:
            LinearDependenceError: If the points are collinear.

        """
        p1, p2, p3 = Vector(p1), Vector(p2), Vector(p3)
        return cls.from_origin_and_directions(p1, p2 - p1, p3 - p1)

    @property
    def coefficients(self) -> LinearEquation3D:
        """The coefficients (a, b, c, d) of the plane equation ``a*x + b*y + c*z + d = 0``."""
        a, b, c = self.plumb
        return a, b, c, self.constant_d

    def evaluate(self, point: VectorLike) -> float:
        """The value of ``plumb * point + constant_d``, zero for the points of the plane."""
        return self.plumb.dot(Vector(point)) + self.constant_d

    def distance_from(self, point: VectorLike) -> float:
        """Calculates the distance between a point and the plane."""
        return abs(self.evaluate(point)) / self.plumb.length

    def contains_point(self, point: VectorLike) -> bool:
        return is_zero(self.evaluate(point))

    def contains_line(self, line: Line) -> bool:
        """Tests whether the plane contains a line.

        The line lies in the plane if its point does and its direction is perpendicular to the normal vector.
        """
        return self.contains_point(line.point) and is_zero(line.direction.dot(self.plumb))

    def angle_with_vector(self, vector: VectorLike) -> float:
        r"""The signed angle between the plane and a vector, between :math:`-\pi / 2` and :math:`\pi / 2`."""
        return math.pi / 2 - self.plumb.angle(Vector(vector))

    def angle_with_line(self, line: Line) -> float:
        r"""The angle between the plane and a line, between :math:`0` and :math:`\pi / 2`."""
        return abs(self.angle_with_vector(line.direction))

    def angle_between(self, other: Plane) -> float:
        r"""The angle between two planes, between :math:`0` and :math:`\pi / 2`."""
        return acute_angle(self.plumb.angle(other.plumb))

    def relation_with_line(self, line: Line) -> PlaneLineRelation:
        """Classifies the relation between the plane and a line.

        The point ``line.point + t * line.direction`` lies in the plane if
        ``t * (plumb * direction) + plumb * point + constant_d = 0``.

        Args:
            line: The line.

        Returns:
            The relation between the plane and the line.

        """
        t = solve_linear(self.plumb.dot(line.direction), self.evaluate(line.point))
        if t.kind is SolutionKind.REAL:
            return PlaneLineRelation.intersect(line.point_at(t.value), self.angle_with_line(line))  # type: ignore[arg-type]
        if t.kind is SolutionKind.NONE:
            return PlaneLineRelation.parallel(self.distance_from(line.point))
        return PlaneLineRelation.containing()

    def distance_between(self, other: Plane) -> float:
        """Calculates the constant distance between two parallel planes.

        Args:
            other: A plane parallel to this one.

        Returns:
            The distance between the planes.

        Raises:
            NotParallel: If the planes intersect.

        """
        if not self.plumb.is_linearly_dependent(other.plumb):
            raise NotParallel("Intersecting planes have no constant distance.")

        # scale the other equation so that both planes share the same normal vector
        constant_d2 = other.constant_d * self.plumb.scale_factor(other.plumb)
        return abs(self.constant_d - constant_d2) / self.plumb.length

    def relation(self, other: Plane) -> PlaneRelation:
        return PlaneRelation.of(self, other)

    def intersection(self, other: Plane) -> Line:
        return intersection(self, other)

    def coincides_with(self, other: Plane) -> bool:
        """Tests whether two planes consist of the same points, independently of the scale of their equations."""
        return self.relation(other).kind is PlaneRelationKind.UNITE


def intersection(plane1: Plane, plane2: Plane) -> Line:
    """Calculates the line of intersection of two planes.

    The two plane equations are reduced to two independent affine dependencies between the coordinates. Evaluating
    them for two values of the free coordinate gives two points of the line.

    Args:
        plane1, plane2: Two planes that are not parallel.

    Returns:
        The line of intersection.

    Raises:
        LinearDependenceError: If the planes are parallel or identical.

    """
    eq1, eq2 = plane1.coefficients, plane2.coefficients
    dep1 = SingleScalarDependence.compute_from(eq1, eq2)
    dep2 = dep1.substitute_in(*eq1)
    if dep2 is None:
        dep2 = dep1.substitute_in(*eq2)
    if dep2 is None:
        raise RuntimeError("Two independent planes always yield two independent dependencies.")

    logger.debug("Intersecting %s and %s using %s and %s", plane1, plane2, dep1, dep2)
    point1 = SingleScalarDependence.put_multiple(dep1, dep2, 0.0)
    point2 = SingleScalarDependence.put_multiple(dep1, dep2, 1.0)
    return Line.from_two_points(point1, point2)


class PlaneLineRelationKind(Enum):
    CONTAINING = "containing"
    INTERSECT = "intersect"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class PlaneLineRelation:
    """The relation between a plane and a line.

    Attributes:
        kind: CONTAINING if the line lies in the plane, INTERSECT if it meets the plane in ``point`` at ``angle``,
            PARALLEL if it has a constant ``distance`` from the plane.

    """

    kind: PlaneLineRelationKind
    distance: float | None = None
    point: Vector | None = None
    angle: float | None = None

    @classmethod
    def containing(cls) -> PlaneLineRelation:
        return cls(PlaneLineRelationKind.CONTAINING)

    @classmethod
    def intersect(cls, point: Vector, angle: float) -> PlaneLineRelation:
        return cls(PlaneLineRelationKind.INTERSECT, point=point, angle=angle)

    @classmethod
    def parallel(cls, distance: float) -> PlaneLineRelation:
        return cls(PlaneLineRelationKind.PARALLEL, distance=distance)


class PlaneRelationKind(Enum):
    UNITE = "unite"
    PARALLEL = "parallel"
    INTERSECT = "intersect"


@dataclass(frozen=True)
class PlaneRelation:
    """The relation between two planes.

    Attributes:
        kind: UNITE if the planes consist of the same points, PARALLEL if they have a constant ``distance``,
            INTERSECT if they meet in ``line`` at ``angle``.

    """

    kind: PlaneRelationKind
    distance: float | None = None
    line: Line | None = None
    angle: float | None = None

    @classmethod
    def unite(cls) -> PlaneRelation:
        return cls(PlaneRelationKind.UNITE)

    @classmethod
    def parallel(cls, distance: float) -> PlaneRelation:
        return cls(PlaneRelationKind.PARALLEL, distance=distance)

    @classmethod
    def intersect(cls, line: Line, angle: float) -> PlaneRelation:
        return cls(PlaneRelationKind.INTERSECT, line=line, angle=angle)

    @classmethod
    def of(cls, plane1: Plane, plane2: Plane) -> PlaneRelation:
        """Classifies the relation between two planes.

        Planes with linearly dependent normals unite if their scaled distance is zero. The offsets are compared after
        scaling by the ratio of the normals, so ``x + 1 = 0`` and ``-x - 1 = 0`` unite, while ``x + 1 = 0`` and
        ``-x + 1 = 0`` are PARALLEL with distance 2.

        Args:
            plane1, plane2: The planes to compare.

        Returns:
            The relation of the two planes.

        """
        if not plane1.plumb.is_linearly_dependent(plane2.plumb):
            return cls.intersect(intersection(plane1, plane2), plane1.angle_between(plane2))

        distance = plane1.distance_between(plane2)
        if is_zero(distance):
            return cls.unite()
        return cls.parallel(distance)
