from spacegeom.base import Vector
from spacegeom.dependence import Dimension, SingleScalarDependence
from spacegeom.equation import EquationSolution, SolutionKind, solve_linear, solve_system_2x2
from spacegeom.exceptions import (
    DegenerateEquation,
    GeometryException,
    IncompatibleDependencies,
    IncompatibleShapeError,
    LinearDependenceError,
    NotCoplanar,
    NotParallel,
)
from spacegeom.line import Line, LineRelation, LineRelationKind
from spacegeom.operators import angle, dist, is_collinear, is_coplanar, is_parallel, is_perpendicular, meet
from spacegeom.plane import (
    Plane,
    PlaneLineRelation,
    PlaneLineRelationKind,
    PlaneRelation,
    PlaneRelationKind,
)
from spacegeom.ratio import Ratio, RatioKind
from spacegeom.version import __version__
