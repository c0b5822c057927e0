from __future__ import annotations

# Third Party Imports
from numpy import array, isclose

# SUBDIURNAL Imports
from subdiurnal.physics import constants as const
from subdiurnal.physics.time.conversions import (
    greenwichMeanSiderealSeconds,
    greenwichSiderealArgument,
    julianCenturiesSinceJ2000,
)

# Earth rotation rate of the GMST polynomial, sidereal days per solar day (Vallado Eq. 3-40)
EARTH_ROTATION_RATIO = 1.002737909350795


def testJulianCenturies():
    """Test the elapsed time arguments relative to J2000.0."""
    assert julianCenturiesSinceJ2000(const.MJD_J2000) == 0.0
    assert julianCenturiesSinceJ2000(const.MJD_J2000 + 36525.0) == 1.0
    assert julianCenturiesSinceJ2000(const.MJD_J2000 - 36525.0) == -1.0
    assert (julianCenturiesSinceJ2000(array([51544.5, 88069.5])) == array([0.0, 1.0])).all()


def testGreenwichMeanSiderealSecondsAtJ2000():
    """Test GMST at J2000.0 is the constant term of the polynomial."""
    assert greenwichMeanSiderealSeconds(0.0) == 67310.54841


def testGreenwichMeanSiderealSecondsRange():
    """Test GMST is reduced to less than a day, keeping the sign of the unreduced value."""
    after = greenwichMeanSiderealSeconds(julianCenturiesSinceJ2000(54335.0))
    assert 0.0 <= after < const.DAYS2SEC

    before = greenwichMeanSiderealSeconds(julianCenturiesSinceJ2000(44239.0))
    assert -const.DAYS2SEC < before <= 0.0


def testSiderealArgumentAdvance():
    """Test the sidereal argument advances by a sidereal day's excess over one solar day."""
    ttt_1 = julianCenturiesSinceJ2000(54335.0)
    ttt_2 = julianCenturiesSinceJ2000(54336.0)
    theta_1 = greenwichSiderealArgument(ttt_1)
    theta_2 = greenwichSiderealArgument(ttt_2)

    assert 0.0 <= theta_1 < const.TWOPI
    advance = (theta_2 - theta_1) % const.TWOPI
    assert isclose(advance, (EARTH_ROTATION_RATIO - 1.0) * const.TWOPI, rtol=1e-6)


def testSiderealArgumentAtJ2000():
    """Test the sidereal argument at J2000.0 is GMST plus pi."""
    gmst = 67310.54841 / const.DAYS2SEC * const.TWOPI
    assert isclose(greenwichSiderealArgument(0.0), (gmst + const.PI) % const.TWOPI, rtol=0.0, atol=1e-13)
