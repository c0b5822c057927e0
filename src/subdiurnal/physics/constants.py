"""Global math & physics constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to the subdiurnal series remain in :mod:`.subdiurnal_terms`.

References:
    #. :cite:t:`petit_2010_iers`, Chapter 5
    #. :cite:t:`vallado_2013_astro`
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
PI = pi
TWOPI = 2.0 * pi
DAYS2SEC = 86400.0
RAD2SEC = DAYS2SEC / TWOPI  # Seconds of time per radian of Earth rotation
TURNAS = 1296000.0  # Arcseconds in a full circle

DAS2R: float = 4.848136811095359935899141e-6
"""``float``: arcseconds to radians, written out to match the IERS routines bit for bit."""

MICROARCSEC2ARCSEC = 1.0e-6
MICROARCSEC2RAD = MICROARCSEC2ARCSEC * DAS2R

# Time constants
MJD_J2000: float = 51544.5
"""``float``: Modified Julian Date of the J2000.0 epoch."""

MJD_OFFSET: float = 2400000.5
"""``float``: difference between a Julian date and a Modified Julian Date."""

DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_YEAR = 365.25
