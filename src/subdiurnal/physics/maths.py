"""Angle reduction helpers that extend `numpy`.

Both functions are thin wrappers over numpy ufuncs, so they work on scalars and arrays alike.

* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import fmod

# Local Imports
from . import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy.typing import ArrayLike


def fmodAngle(angle: ArrayLike) -> ArrayLike:
    r"""Reduce `angle` modulo :math:`2\pi`, keeping the sign of `angle`.

    The result lies in :math:`(-2\pi, 2\pi)`. This is the C/Fortran ``fmod`` convention, not
    the floored modulo used by Python's ``%`` operator.
    """
    # Fmod takes sign of dividend (first arg)
    return fmod(angle, const.TWOPI)


def fmodArcseconds(angle: ArrayLike) -> ArrayLike:
    """Reduce an angle in arcseconds modulo one full turn, keeping the sign of `angle`."""
    return fmod(angle, const.TURNAS)
