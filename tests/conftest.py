from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest

from spacegeom import Line, Vector

if TYPE_CHECKING:
    from numpy.random import Generator


@pytest.fixture(scope="session")
def rng() -> Generator:
    return np.random.default_rng(seed=0)


@pytest.fixture
def x_axis() -> Line:
    return Line(Vector(0, 0, 0), Vector(1, 0, 0))
