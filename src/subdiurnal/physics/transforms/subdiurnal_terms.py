"""Coefficients of the subdiurnal polar motion series.

This module stores IERS Conventions (2010) Table 5.1a: 25 trigonometric terms of polar motion
driven by tidal gravitation on a non-rigid Earth, plus the rate of secular polar motion.
Values are transcribed exactly and must not be re-derived or "corrected" against older
tables.

References:
    :cite:t:`petit_2010_iers`, Table 5.1a
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass


@dataclass(frozen=True)
class TidalTerm:
    """One trigonometric term of the subdiurnal polar motion series."""

    multipliers: tuple[int, int, int, int, int, int]
    r"""``tuple``: integer multipliers of :math:`[\Theta, l, l', F, D, \Omega]`."""

    period: float
    """``float``: period in mean solar days; informational, not used in computations."""

    xs: float
    """``float``: sine coefficient of the x pole coordinate (microarcseconds)."""

    xc: float
    """``float``: cosine coefficient of the x pole coordinate (microarcseconds)."""

    ys: float
    """``float``: sine coefficient of the y pole coordinate (microarcseconds)."""

    yc: float
    """``float``: cosine coefficient of the y pole coordinate (microarcseconds)."""


SUBDIURNAL_TERMS: tuple[TidalTerm, ...] = (
    # Long periodic terms
    TidalTerm((0, 0, 0, 0, 0, -1), 6798.3837, 0.0, 0.6, -0.1, -0.1),
    TidalTerm((0, -1, 0, 1, 0, 2), 6159.1355, 1.5, 0.0, -0.2, 0.1),
    TidalTerm((0, -1, 0, 1, 0, 1), 3231.4956, -28.5, -0.2, 3.4, -3.9),
    TidalTerm((0, -1, 0, 1, 0, 0), 2190.3501, -4.7, -0.1, 0.6, -0.9),
    TidalTerm((0, 1, 1, -1, 0, 0), 438.35990, -0.7, 0.2, -0.2, -0.7),
    TidalTerm((0, 1, 1, -1, 0, -1), 411.80661, 1.0, 0.3, -0.3, 1.0),
    TidalTerm((0, 0, 0, 1, -1, 1), 365.24219, 1.2, 0.2, -0.2, 1.4),
    TidalTerm((0, 1, 0, 1, -2, 1), 193.55971, 1.3, 0.4, -0.2, 2.9),
    TidalTerm((0, 0, 0, 1, 0, 2), 27.431826, -0.1, -0.2, 0.0, -1.7),
    TidalTerm((0, 0, 0, 1, 0, 1), 27.321582, 0.9, 4.0, -0.1, 32.4),
    TidalTerm((0, 0, 0, 1, 0, 0), 27.212221, 0.1, 0.6, 0.0, 5.1),
    TidalTerm((0, -1, 0, 1, 2, 1), 14.698136, 0.0, 0.1, 0.0, 0.6),
    TidalTerm((0, 1, 0, 1, 0, 1), 13.718786, -0.1, 0.3, 0.0, 2.7),
    TidalTerm((0, 0, 0, 3, 0, 3), 9.1071941, -0.1, 0.1, 0.0, 0.9),
    TidalTerm((0, 0, 0, 3, 0, 2), 9.0950103, -0.1, 0.1, 0.0, 0.6),
    # Quasi diurnal terms
    TidalTerm((1, -1, 0, -2, 0, -1), 1.1196992, -0.4, 0.3, -0.3, -0.4),
    TidalTerm((1, -1, 0, -2, 0, -2), 1.1195149, -2.3, 1.3, -1.3, -2.3),
    TidalTerm((1, 1, 0, -2, -2, -2), 1.1134606, -0.4, 0.3, -0.3, -0.4),
    TidalTerm((1, 0, 0, -2, 0, -1), 1.0759762, -2.1, 1.2, -1.2, -2.1),
    TidalTerm((1, 0, 0, -2, 0, -2), 1.0758059, -11.4, 6.5, -6.5, -11.4),
    TidalTerm((1, -1, 0, 0, 0, 0), 1.0347187, 0.8, -0.5, 0.5, 0.8),
    TidalTerm((1, 0, 0, -2, 2, -2), 1.0027454, -4.8, 2.7, -2.7, -4.8),
    TidalTerm((1, 0, 0, 0, 0, 0), 0.9972696, 14.3, -8.2, 8.2, 14.3),
    TidalTerm((1, 0, 0, 0, 0, -1), 0.9971233, 1.9, -1.1, 1.1, 1.9),
    TidalTerm((1, 1, 0, 0, 0, 0), 0.9624365, 0.8, -0.4, 0.4, 0.8),
)
"""``tuple``: the 25 terms of Table 5.1a, long periodic terms first."""

QUASI_DIURNAL_START: int = 15
"""``int``: index of the first quasi diurnal term in :data:`.SUBDIURNAL_TERMS`."""

LONG_PERIOD_TERMS: tuple[TidalTerm, ...] = SUBDIURNAL_TERMS[:QUASI_DIURNAL_START]
"""``tuple``: the 15 long periodic terms."""

QUASI_DIURNAL_TERMS: tuple[TidalTerm, ...] = SUBDIURNAL_TERMS[QUASI_DIURNAL_START:]
"""``tuple``: the 10 quasi diurnal terms."""

SECULAR_RATE_X: float = -3.8
"""``float``: rate of secular polar motion in x (microarcseconds per Julian year)."""

SECULAR_RATE_Y: float = -4.3
"""``float``: rate of secular polar motion in y (microarcseconds per Julian year)."""
