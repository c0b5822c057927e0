"""Defines the :class:`.ModifiedJulianDate` class and supporting functions.

A Modified Julian Date is just a ``float``; subclassing it lets callers see what kind of
time value they hold without paying for a heavier type.

.. code-block:: python

    epoch = ModifiedJulianDate.getModifiedJulianDate(2007, 8, 23, 0, 0, 0)
    assert epoch == 54335.0

Calendar fields are assumed to already be in the timescale of the model being evaluated. The
conversion is valid for dates between 1900 and 2100.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import floor

# Local Imports
from .. import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import datetime


class ModifiedJulianDate(float):
    """Class representing a Modified Julian Date in floating point form."""

    @classmethod
    def getModifiedJulianDate(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: float,
    ) -> ModifiedJulianDate:
        """From a calendar date & time [ymdhms], return the :class:`.ModifiedJulianDate`.

        References:
            :cite:t:`vallado_2013_astro`, Section 3.5.1, Algorithm 14

        Args:
            year (int): Calendar year
            month (int): Month of the year
            day (int): Day of the month
            hour (int): Hours in the day
            minute (int): Minutes in the hour
            second (float): Seconds in the minute

        Raises:
            ValueError: if any calendar field is out of range

        Returns:
            :class:`.ModifiedJulianDate`: corresponding calendar date as a Modified Julian Date
        """
        # Make sure we have correct inputs for months and days
        if month > 12 or month < 1:
            raise ValueError("ModifiedJulianDate: Month must be an integer (1-12).")
        if day > 31 or day < 1:
            raise ValueError("ModifiedJulianDate: Day must be an integer (1-31).")
        if hour > 24.0 or hour < 0.0:
            raise ValueError("ModifiedJulianDate: Hour must be a float (0-24).")
        if minute > 60.0 or minute < 0.0:
            raise ValueError("ModifiedJulianDate: Minute must be a float (0-60).")
        if second > 60.0 or second < 0.0:
            raise ValueError("ModifiedJulianDate: Second must be a float (0-60).")

        # Integer part of the Julian date, shifted to the MJD origin before adding the
        # fraction so the fractional day keeps full precision
        julian_day = (
            367 * year
            - floor((7 * (year + floor((month + 9) / 12))) * 0.25)
            + floor(275 * month / 9)
            + day
            + 1721013.5
        )
        modified_day = julian_day - const.MJD_OFFSET

        day_fraction = (second + minute * 60 + hour * 3600) / const.DAYS2SEC

        return cls(float(modified_day + day_fraction))

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.ModifiedJulianDate`."""
        return f"ModifiedJulianDate({float(self)})"


def datetimeToModifiedJulianDate(date_time: datetime) -> ModifiedJulianDate:
    """Convert a ``datetime`` object to a :class:`.ModifiedJulianDate`.

    Args:
        date_time (datetime): ``datetime`` object to be converted; any ``tzinfo`` is ignored.

    Returns:
        ModifiedJulianDate: Converted :class:`.ModifiedJulianDate` object.
    """
    return ModifiedJulianDate.getModifiedJulianDate(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        date_time.second + date_time.microsecond / 1e6,
    )
