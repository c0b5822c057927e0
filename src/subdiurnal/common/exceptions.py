"""Contains all the custom-defined exceptions used in SUBDIURNAL."""

from __future__ import annotations


class BandPolicyError(Exception):
    """Exception indicating an unrecognized band policy for the subdiurnal series."""
