"""Define the command line interface for the SUBDIURNAL polar motion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path
from datetime import datetime

# Local Imports
from .logger import subdiurnalLogError

UNIT_CHOICES: tuple[str, ...] = ("uas", "arcsec", "rad")
"""``tuple``: output units accepted by ``--units``."""

BAND_CHOICES: tuple[str, ...] = ("quasi_diurnal_only", "full_model")
"""``tuple``: band policies accepted by ``--band``."""


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        subdiurnalLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def dateChecker(date_string):
    """Parse an ISO 8601 date or date-time passed to the CLI parser.

    Args:
        date_string (``str``): ISO 8601 string, e.g. ``2007-08-23`` or ``2007-08-23T12:00:00``.

    Raises:
        ValueError: if the string isn't a valid ISO 8601 date

    Returns:
        ``datetime``: parsed date-time
    """
    try:
        return datetime.fromisoformat(date_string)
    except ValueError:
        subdiurnalLogError(f"Bad date given to CLI: {date_string!r}")
        raise


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(
        description="SUBDIURNAL Command Line Interface: tidal polar motion corrections",
    )
    epoch_group = parser.add_argument_group("Epochs")

    epoch_group.add_argument(
        "epochs",
        metavar="MJD",
        nargs="*",
        type=float,
        help="Modified Julian Date(s) to evaluate, in TT",
    )

    epoch_group.add_argument(
        "--date",
        dest="dates",
        metavar="ISO_DATE",
        action="append",
        default=[],
        type=dateChecker,
        help="Calendar date-time to evaluate, in TT. May be repeated",
    )

    parser.add_argument(
        "-b",
        "--band",
        dest="band",
        default=None,
        choices=BAND_CHOICES,
        help="Terms to evaluate. DEFAULT: value in the behavioral config",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavioral config file",
    )

    parser.add_argument(
        "-u",
        "--units",
        dest="units",
        default="uas",
        choices=UNIT_CHOICES,
        help="Output units. DEFAULT: microarcseconds",
    )

    return parser
