from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy import typing as npt

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    from spacegeom.base import Vector

# a*x + b*y + c = 0
LinearEquation2D: TypeAlias = tuple[float, float, float]
# a*x + b*y + c*z + d = 0
LinearEquation3D: TypeAlias = tuple[float, float, float, float]

VectorLike: TypeAlias = Union["Vector", Sequence[float], npt.NDArray[np.floating]]
