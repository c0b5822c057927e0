"""Helper functions that convert an epoch into the time arguments of the IERS models."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import fmod

# Local Imports
from .. import constants as const
from ..maths import fmodAngle

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy.typing import ArrayLike


def julianCenturiesSinceJ2000(epoch: ArrayLike) -> ArrayLike:
    """Convert a Modified Julian Date into Julian centuries elapsed since J2000.0.

    Args:
        epoch (``float``): Modified Julian Date (TT/TDB).

    Returns:
        ``float``: Julian centuries since J2000.0, negative before the reference epoch.
    """
    return (epoch - const.MJD_J2000) / const.DAYS_PER_JULIAN_CENTURY


def greenwichMeanSiderealSeconds(ttt: ArrayLike) -> ArrayLike:
    """Determine Greenwich mean sidereal time, in seconds of time, for `ttt`.

    References:
        :cite:t:`vallado_2013_astro`, Section 3.5.2

    Note:
        The result is reduced with ``fmod`` so it carries the sign of the unreduced value,
        i.e. it is negative for epochs well before J2000.0.

    Args:
        ttt (``float``): Julian centuries since J2000.0.

    Returns:
        ``float``: GMST in seconds, magnitude less than one day.
    """
    # Horner form; 3155760000 s is the whole-turn part of 876600 h/century
    gmst = 67310.54841 + ttt * (
        (8640184.812866 + 3155760000.0) + ttt * (0.093104 + ttt * (-0.0000062))
    )
    return fmod(gmst, const.DAYS2SEC)


def greenwichSiderealArgument(ttt: ArrayLike) -> ArrayLike:
    r"""Determine the sidereal argument :math:`\Theta = GMST + \pi` used by tidal series.

    Args:
        ttt (``float``): Julian centuries since J2000.0.

    Returns:
        ``float``: :math:`\Theta` in radians, reduced modulo :math:`2\pi`.
    """
    return fmodAngle(greenwichMeanSiderealSeconds(ttt) / const.RAD2SEC + const.PI)
