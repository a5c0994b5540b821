from spacegeom.utils.math import acute_angle, is_zero, isclose
