from __future__ import annotations

from typing import Union

from spacegeom.base import Vector
from spacegeom.exceptions import GeometryException, LinearDependenceError, NotCoplanar
from spacegeom.line import Line, LineRelationKind
from spacegeom.plane import Plane, PlaneLineRelationKind, PlaneRelationKind
from spacegeom.utils import is_zero

GeometricObject = Union[Vector, Line, Plane]


def dist(a: GeometricObject, b: GeometricObject) -> float:
    """Calculates the (euclidean) distance between two objects.

    Objects that meet have distance zero.

    Args:
        a, b: The points, lines or planes to calculate the distance between.

    Returns:
        The distance between the given objects.

    """
    if isinstance(a, Vector) and isinstance(b, Vector):
        return (a - b).length
    if isinstance(a, Vector):
        return dist(b, a)
    if isinstance(a, Line) and isinstance(b, Vector):
        return a.distance_from_point(b)
    if isinstance(a, Plane) and isinstance(b, Vector):
        return a.distance_from(b)
    if isinstance(a, Line) and isinstance(b, Line):
        line_relation = a.relation(b)
        if line_relation.kind in (LineRelationKind.PARALLEL, LineRelationKind.FOREIGN):
            return line_relation.distance  # type: ignore[return-value]
        return 0.0
    if isinstance(a, Line) and isinstance(b, Plane):
        return dist(b, a)
    if isinstance(a, Plane) and isinstance(b, Line):
        plane_line_relation = a.relation_with_line(b)
        if plane_line_relation.kind is PlaneLineRelationKind.PARALLEL:
            return plane_line_relation.distance  # type: ignore[return-value]
        return 0.0
    if isinstance(a, Plane) and isinstance(b, Plane):
        if a.plumb.is_linearly_dependent(b.plumb):
            return a.distance_between(b)
        return 0.0

    raise TypeError(f"Unsupported combination of types: a: {type(a)}, b: {type(b)}")


def angle(a: GeometricObject, b: GeometricObject) -> float:
    r"""Calculates the angle between two vectors, lines or planes in radians.

    The angle between two vectors lies between :math:`0` and :math:`\pi`, all other angles are unoriented and lie
    between :math:`0` and :math:`\pi / 2`. A vector paired with a plane is treated as a direction.

    Args:
        a, b: The objects to calculate the angle between.

    Returns:
        The angle between the given objects.

    """
    if isinstance(a, Vector) and isinstance(b, Vector):
        return a.angle(b)
    if isinstance(a, Line) and isinstance(b, Line):
        return a.angle_between(b)
    if isinstance(a, Plane) and isinstance(b, Plane):
        return a.angle_between(b)
    if isinstance(a, Plane) and isinstance(b, Line):
        return a.angle_with_line(b)
    if isinstance(a, Plane) and isinstance(b, Vector):
        return abs(a.angle_with_vector(b))
    if isinstance(b, Plane):
        return angle(b, a)

    raise TypeError(f"Unsupported combination of types: a: {type(a)}, b: {type(b)}")


def meet(a: Line | Plane, b: Line | Plane) -> Vector | Line:
    """Intersects two lines, a line and a plane, or two planes.

    Args:
        a, b: The objects to intersect.

    Returns:
        The point of intersection, or the line of intersection of two planes.

    Raises:
        LinearDependenceError: If the two objects coincide or a plane contains the line.
        NotCoplanar: If two lines are skew.
        GeometryException: If the objects are parallel.

    """
    if isinstance(a, Line) and isinstance(b, Line):
        line_relation = a.relation(b)
        if line_relation.kind is LineRelationKind.INTERSECT:
            return line_relation.point  # type: ignore[return-value]
        if line_relation.kind is LineRelationKind.UNITE:
            raise LinearDependenceError("The lines coincide.")
        if line_relation.kind is LineRelationKind.FOREIGN:
            raise NotCoplanar("The given lines are not coplanar.")
        raise GeometryException("Parallel lines do not meet.")

    if isinstance(a, Line) and isinstance(b, Plane):
        return meet(b, a)

    if isinstance(a, Plane) and isinstance(b, Line):
        plane_line_relation = a.relation_with_line(b)
        if plane_line_relation.kind is PlaneLineRelationKind.INTERSECT:
            return plane_line_relation.point  # type: ignore[return-value]
        if plane_line_relation.kind is PlaneLineRelationKind.CONTAINING:
            raise LinearDependenceError("The plane contains the line.")
        raise GeometryException("The line is parallel to the plane.")

    if isinstance(a, Plane) and isinstance(b, Plane):
        plane_relation = a.relation(b)
        if plane_relation.kind is PlaneRelationKind.INTERSECT:
            return plane_relation.line  # type: ignore[return-value]
        if plane_relation.kind is PlaneRelationKind.UNITE:
            raise LinearDependenceError("The planes coincide.")
        raise GeometryException("Parallel planes do not meet.")

    raise TypeError(f"Unsupported combination of types: a: {type(a)}, b: {type(b)}")


def is_collinear(p: Vector, q: Vector, r: Vector) -> bool:
    """Tests whether three points lie on a common line."""
    return (q - p).cross(r - p).is_zero


def is_coplanar(*points: Vector) -> bool:
    """Tests whether the given points lie in a common plane.

    Args:
        *points: The points to test.

    Returns:
        True if there is a plane that contains all the points.

    """
    if len(points) <= 3:
        return True

    origin = points[0]
    for i in range(1, len(points) - 1):
        for j in range(i + 1, len(points)):
            if not is_collinear(origin, points[i], points[j]):
                plane = Plane.from_three_points(origin, points[i], points[j])
                return all(plane.contains_point(p) for p in points)

    return True


def is_parallel(a: Line | Plane, b: Line | Plane) -> bool:
    """Tests whether two lines, a line and a plane, or two planes are parallel.

    Coincident objects and a line lying in a plane count as parallel.
    """
    if isinstance(a, Line) and isinstance(b, Line):
        return a.direction.is_linearly_dependent(b.direction)
    if isinstance(a, Plane) and isinstance(b, Plane):
        return a.plumb.is_linearly_dependent(b.plumb)
    if isinstance(a, Line):
        a, b = b, a
    return is_zero(a.plumb.dot(b.direction))  # type: ignore[union-attr]


def is_perpendicular(a: Line | Plane, b: Line | Plane) -> bool:
    """Tests whether two lines, a line and a plane, or two planes are perpendicular."""
    if isinstance(a, Line) and isinstance(b, Line):
        return is_zero(a.direction.dot(b.direction))
    if isinstance(a, Plane) and isinstance(b, Plane):
        return is_zero(a.plumb.dot(b.plumb))
    if isinstance(a, Line):
        a, b = b, a
    return a.plumb.is_linearly_dependent(b.direction)  # type: ignore[union-attr]
