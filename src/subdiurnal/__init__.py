"""Main Module Documentation.

Tidal polar motion ("subdiurnal nutation") corrections following the IERS Conventions (2010).
The library API is re-exported here; :func:`.main` is the command line entry point.
"""

from __future__ import annotations

# Local Imports
from .physics.transforms.subdiurnal import BandPolicy, PoleOffset, SubdiurnalNutation, evaluate

__version__ = "1.0.0"

__all__ = ["BandPolicy", "PoleOffset", "SubdiurnalNutation", "evaluate", "runSubdiurnal", "main"]


def runSubdiurnal(
    epochs: list[float],
    band: str | None = None,
    config_path: str | None = None,
) -> list[PoleOffset]:
    """Evaluate the subdiurnal pole offset at each epoch.

    Args:
        epochs (``list``): Modified Julian Dates (TT) to evaluate.
        band (``str``, optional): band policy name. Defaults to ``None``, which uses the
            behavioral config value.
        config_path (``str``, optional): behavioral config file to load before building the
            model. Defaults to ``None``, which keeps the current config.

    Returns:
        ``list``: one :class:`.PoleOffset` per epoch, in input order.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.logger import Logger, subdiurnalLogInfo

    if config_path:
        BehavioralConfig(config_file_path=config_path)

    Logger()
    model = SubdiurnalNutation(band=band)
    subdiurnalLogInfo(f"Evaluating {len(epochs)} epoch(s) with {model!r}")

    return [model.evaluate(epoch) for epoch in epochs]


def main() -> None:
    """SUBDIURNAL main entry point.

    This is the function that the :command:`subdiurnal` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser
    from .physics.time.stardate import datetimeToModifiedJulianDate

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    epochs = list(cli_args.epochs)
    epochs.extend(datetimeToModifiedJulianDate(date) for date in cli_args.dates)
    if not epochs:
        parser.error("at least one MJD or --date is required")

    offsets = runSubdiurnal(epochs, band=cli_args.band, config_path=cli_args.config_path)

    for epoch, offset in zip(epochs, offsets):
        if cli_args.units == "arcsec":
            pm_x, pm_y = offset.in_arcseconds
        elif cli_args.units == "rad":
            pm_x, pm_y = offset.in_radians
        else:
            pm_x, pm_y = offset.dx, offset.dy
        print(f"{float(epoch):.6f} {float(pm_x):.17g} {float(pm_y):.17g}")
