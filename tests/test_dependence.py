import logging

import pytest

from spacegeom import (
    DegenerateEquation,
    Dimension,
    IncompatibleDependencies,
    LinearDependenceError,
    SingleScalarDependence,
    Vector,
)

X, Y, Z, NONE = Dimension.X, Dimension.Y, Dimension.Z, Dimension.NONE


class TestCompute:
    def test_two_zeros(self) -> None:
        # -x + 3 = 0  =>  x = 3
        assert SingleScalarDependence.compute(-1, 0, 0, 3) == SingleScalarDependence(X, NONE, 0.0, 3.0)
        assert SingleScalarDependence.compute(0, -1, 0, 3) == SingleScalarDependence(Y, NONE, 0.0, 3.0)
        assert SingleScalarDependence.compute(0, 0, -1, 3) == SingleScalarDependence(Z, NONE, 0.0, 3.0)

    def test_one_zero(self) -> None:
        # -x + y + 3 = 0  =>  y = x - 3
        assert SingleScalarDependence.compute(-1, 1, 0, 3) == SingleScalarDependence(Y, X, 1.0, -3.0)
        assert SingleScalarDependence.compute(-1, 0, 1, 3) == SingleScalarDependence(Z, X, 1.0, -3.0)
        assert SingleScalarDependence.compute(0, -1, 1, 3) == SingleScalarDependence(Z, Y, 1.0, -3.0)
        assert SingleScalarDependence.compute(0, 2, 4, 8) == SingleScalarDependence(Z, Y, -0.5, -2.0)

    def test_no_zero(self) -> None:
        assert SingleScalarDependence.compute(1, 2, 3, 4) is None

    def test_all_zero(self) -> None:
        with pytest.raises(DegenerateEquation):
            SingleScalarDependence.compute(0, 0, 0, 1)


class TestSubstituteIn:
    def test_direct(self) -> None:
        # y = x - 3
        dep = SingleScalarDependence(Y, X, 1.0, -3.0)
        # -x + 2z - 8 = 0  =>  z = 2x + 8
        assert dep.substitute_in(2, 0, -1, 8) == SingleScalarDependence(Z, X, 2.0, 8.0)

    def test_substitution(self) -> None:
        # y = x - 3 and z = 2x + 8 satisfy x + y - z + 11 = 0
        dep = SingleScalarDependence(Y, X, 1.0, -3.0)
        assert dep.substitute_in(1, 1, -1, 11) == SingleScalarDependence(Z, X, 2.0, 8.0)

    def test_substitute_constant(self) -> None:
        # z = 4 in x + y + z - 6 = 0 gives y = -x + 2
        dep = SingleScalarDependence(Z, NONE, 0.0, 4.0)
        assert dep.substitute_in(1, 1, 1, -6) == SingleScalarDependence(Y, X, -1.0, 2.0)

    def test_source_becomes_constant(self) -> None:
        # z = x in 2x + z - 3 = 0 gives x = 1
        dep = SingleScalarDependence(Z, X, 1.0, 0.0)
        assert dep.substitute_in(2, 0, 1, -3) == SingleScalarDependence(X, NONE, 0.0, 1.0)

    def test_equivalent_equation(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="spacegeom.dependence")
        dep = SingleScalarDependence.compute(-1, 1, 0, 3)
        assert dep is not None
        assert dep.substitute_in(-2, 2, 0, 6) is None
        assert "equivalent" in caplog.text

    def test_same_equation(self) -> None:
        for equation in [(0, 0.1, 0.3, 0.7), (1, 0, 49, 1), (0.7, 0, -0.6, 2.7), (-1, 1, 0, 3)]:
            dep = SingleScalarDependence.compute(*equation)
            assert dep is not None
            assert dep.substitute_in(*equation) is None

        dep = SingleScalarDependence.compute(1, 0, 49, 1)
        assert dep is not None
        assert dep.substitute_in(2, 0, 98, 2) is None

    def test_same_target_other_source(self) -> None:
        # z = x in -y + z - 2 = 0 gives y = x - 2
        dep = SingleScalarDependence(Z, X, 1.0, 0.0)
        assert dep.substitute_in(0, -1, 1, -2) == SingleScalarDependence(Y, X, 1.0, -2.0)

    def test_conflicting_equation(self) -> None:
        dep = SingleScalarDependence(Y, X, 1.0, -3.0)
        assert dep.substitute_in(-1, 1, 0, 5) is None


class TestComputeFrom:
    def test_full_substitution(self) -> None:
        # z = y - 3 and x = 2y + 8 satisfy both equations
        eq1 = (1.0, -1.0, -1.0, -11.0)
        eq2 = (2.0, -3.0, -1.0, -19.0)
        first = SingleScalarDependence.compute_from(eq1, eq2)
        assert first == SingleScalarDependence(Z, Y, 1.0, -3.0)

        second = first.substitute_in(*eq2)
        assert second == SingleScalarDependence(X, Y, 2.0, 8.0)

    def test_prefers_single_equations(self) -> None:
        eq1 = (1.0, 2.0, 3.0, 4.0)
        eq2 = (1.0, 0.0, 1.0, -2.0)
        assert SingleScalarDependence.compute_from(eq1, eq2) == SingleScalarDependence(Z, X, -1.0, 2.0)

    def test_reduced_equation_without_z(self) -> None:
        # x + y + z = 0 and x + 2y + z - 1 = 0  =>  y = 1
        eq1 = (1.0, 1.0, 1.0, 0.0)
        eq2 = (1.0, 2.0, 1.0, -1.0)
        assert SingleScalarDependence.compute_from(eq1, eq2) == SingleScalarDependence(Y, NONE, 0.0, 1.0)

    def test_dependent_equations(self) -> None:
        with pytest.raises(LinearDependenceError):
            SingleScalarDependence.compute_from((1, 2, 3, 4), (2, 4, 6, 0))


class TestPut:
    def test_put(self) -> None:
        assert SingleScalarDependence(Y, X, 1.0, -3.0).put(5) == 2.0
        assert SingleScalarDependence(Z, NONE, 0.0, 4.0).put(5) == 4.0

    def test_shared_source(self) -> None:
        dep1 = SingleScalarDependence(Y, X, 1.0, -3.0)
        dep2 = SingleScalarDependence(Z, X, 2.0, 8.0)
        assert SingleScalarDependence.put_multiple(dep1, dep2, 1.0) == Vector(1, -2, 10)
        assert SingleScalarDependence.put_multiple(dep2, dep1, 0.0) == Vector(0, -3, 8)

    def test_one_constant(self) -> None:
        dep1 = SingleScalarDependence(Z, NONE, 0.0, 4.0)
        dep2 = SingleScalarDependence(Y, X, -1.0, 2.0)
        assert SingleScalarDependence.put_multiple(dep1, dep2, 1.0) == Vector(1, 1, 4)

    def test_two_constants(self) -> None:
        dep1 = SingleScalarDependence(Z, NONE, 0.0, 4.0)
        dep2 = SingleScalarDependence(X, NONE, 0.0, 1.0)
        assert SingleScalarDependence.put_multiple(dep1, dep2, 7.0) == Vector(1, 7, 4)

    def test_chained(self) -> None:
        # z = x and x = 1, y is free
        dep1 = SingleScalarDependence(Z, X, 1.0, 0.0)
        dep2 = SingleScalarDependence(X, NONE, 0.0, 1.0)
        assert SingleScalarDependence.put_multiple(dep1, dep2, 5.0) == Vector(1, 5, 1)

        # z = y - 3 and y = 2x
        dep1 = SingleScalarDependence(Z, Y, 1.0, -3.0)
        dep2 = SingleScalarDependence(Y, X, 2.0, 0.0)
        assert SingleScalarDependence.put_multiple(dep1, dep2, 1.0) == Vector(1, 2, -1)

    def test_same_target(self) -> None:
        dep1 = SingleScalarDependence(Z, X, 1.0, 0.0)
        dep2 = SingleScalarDependence(Z, Y, 1.0, 0.0)
        with pytest.raises(IncompatibleDependencies):
            SingleScalarDependence.put_multiple(dep1, dep2, 0.0)

    def test_cycle(self) -> None:
        dep1 = SingleScalarDependence(Z, Y, 1.0, 0.0)
        dep2 = SingleScalarDependence(Y, Z, 1.0, 0.0)
        with pytest.raises(IncompatibleDependencies):
            SingleScalarDependence.put_multiple(dep1, dep2, 0.0)
