from __future__ import annotations

# Standard Library Imports
from datetime import datetime

# Third Party Imports
import pytest
from numpy import isclose

# SUBDIURNAL Imports
from subdiurnal.physics import constants as const
from subdiurnal.physics.time.stardate import ModifiedJulianDate, datetimeToModifiedJulianDate


def testGetModifiedJulianDate():
    """Test calendar dates convert to the expected Modified Julian Dates."""
    assert ModifiedJulianDate.getModifiedJulianDate(2007, 8, 23, 0, 0, 0) == 54335.0
    assert ModifiedJulianDate.getModifiedJulianDate(2000, 1, 1, 12, 0, 0) == const.MJD_J2000
    assert isinstance(ModifiedJulianDate.getModifiedJulianDate(2007, 8, 23, 0, 0, 0), ModifiedJulianDate)


def testDatetimeToModifiedJulianDate():
    """Test ``datetime`` objects convert, including fractional seconds."""
    assert datetimeToModifiedJulianDate(datetime(2007, 8, 23)) == 54335.0
    mjd = datetimeToModifiedJulianDate(datetime(2007, 8, 23, 6, 0, 0, 500000))
    assert isclose(mjd, 54335.25 + 0.5 / const.DAYS2SEC, rtol=0.0, atol=1e-9)


def testInvalidCalendarFields():
    """Test out of range calendar fields are rejected."""
    with pytest.raises(ValueError, match="Month"):
        ModifiedJulianDate.getModifiedJulianDate(2007, 13, 1, 0, 0, 0)
    with pytest.raises(ValueError, match="Day"):
        ModifiedJulianDate.getModifiedJulianDate(2007, 8, 0, 0, 0, 0)
    with pytest.raises(ValueError, match="Hour"):
        ModifiedJulianDate.getModifiedJulianDate(2007, 8, 23, 25, 0, 0)
    with pytest.raises(ValueError, match="Minute"):
        ModifiedJulianDate.getModifiedJulianDate(2007, 8, 23, 0, 61, 0)
    with pytest.raises(ValueError, match="Second"):
        ModifiedJulianDate.getModifiedJulianDate(2007, 8, 23, 0, 0, -1.0)


def testRepr():
    """Test the string representation shows the numeric value."""
    assert repr(ModifiedJulianDate(54335.0)) == "ModifiedJulianDate(54335.0)"
