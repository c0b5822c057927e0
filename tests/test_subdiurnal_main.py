"""Tests for :func:`.runSubdiurnal` and :func:`.main`."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
import pytest
from numpy import isclose

# SUBDIURNAL Imports
import subdiurnal
from subdiurnal import BandPolicy, PoleOffset, SubdiurnalNutation, evaluate, main, runSubdiurnal
from subdiurnal.physics import constants as const

# Local Imports
from . import CONFIG_DIR, FIXTURE_DATA_DIR, REFERENCE_ATOL, REFERENCE_DX, REFERENCE_DY, REFERENCE_EPOCH

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


def runMain(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, *args: str) -> list[list[float]]:
    """Run :func:`.main` with `args` and return the printed rows as floats."""
    monkeypatch.setattr("sys.argv", ["subdiurnal", *args])
    main()
    out = capsys.readouterr().out
    return [[float(value) for value in line.split()] for line in out.splitlines() if line]


def testPublicApi():
    """Test the top-level package re-exports the library API."""
    assert subdiurnal.__version__
    offset = evaluate(REFERENCE_EPOCH)
    assert isinstance(offset, PoleOffset)
    assert SubdiurnalNutation().band is BandPolicy.QUASI_DIURNAL_ONLY


def testRunSubdiurnal():
    """Test :func:`.runSubdiurnal` evaluates each epoch in order."""
    offsets = runSubdiurnal([REFERENCE_EPOCH, const.MJD_J2000])
    assert len(offsets) == 2
    assert isclose(offsets[0].dx, REFERENCE_DX, rtol=0.0, atol=REFERENCE_ATOL)
    assert isclose(offsets[0].dy, REFERENCE_DY, rtol=0.0, atol=REFERENCE_ATOL)
    assert offsets[1] == SubdiurnalNutation(BandPolicy.QUASI_DIURNAL_ONLY).evaluate(const.MJD_J2000)


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testRunSubdiurnalConfig(datafiles: Path):
    """Test :func:`.runSubdiurnal` picks the band from a config file, unless overridden."""
    config_file = str(datafiles / CONFIG_DIR / "full_model.config")
    full = SubdiurnalNutation(BandPolicy.FULL_MODEL).evaluate(REFERENCE_EPOCH)

    (offset,) = runSubdiurnal([REFERENCE_EPOCH], config_path=config_file)
    assert offset == full

    (offset,) = runSubdiurnal([REFERENCE_EPOCH], band="quasi_diurnal_only", config_path=config_file)
    assert isclose(offset.dx, REFERENCE_DX, rtol=0.0, atol=REFERENCE_ATOL)


def testMain(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Test the command line prints the IERS test case."""
    rows = runMain(monkeypatch, capsys, f"{REFERENCE_EPOCH}")
    assert len(rows) == 1
    epoch, pm_x, pm_y = rows[0]
    assert epoch == REFERENCE_EPOCH
    assert isclose(pm_x, REFERENCE_DX, rtol=0.0, atol=REFERENCE_ATOL)
    assert isclose(pm_y, REFERENCE_DY, rtol=0.0, atol=REFERENCE_ATOL)


def testMainDatesAndUnits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Test calendar dates are converted and units are applied."""
    rows = runMain(monkeypatch, capsys, "--date", "2007-08-23", "--units", "rad")
    assert len(rows) == 1
    epoch, pm_x, pm_y = rows[0]
    assert epoch == REFERENCE_EPOCH
    atol_rad = REFERENCE_ATOL * const.MICROARCSEC2RAD
    assert isclose(pm_x, REFERENCE_DX * const.MICROARCSEC2RAD, rtol=0.0, atol=atol_rad)
    assert isclose(pm_y, REFERENCE_DY * const.MICROARCSEC2RAD, rtol=0.0, atol=atol_rad)

    rows = runMain(monkeypatch, capsys, "54335", "51544.5", "--units", "arcsec", "--band", "full_model")
    assert [row[0] for row in rows] == [REFERENCE_EPOCH, const.MJD_J2000]
    full = SubdiurnalNutation(BandPolicy.FULL_MODEL).evaluate(REFERENCE_EPOCH)
    assert isclose(rows[0][1], full.in_arcseconds[0], rtol=1e-12, atol=0.0)
    assert isclose(rows[0][2], full.in_arcseconds[1], rtol=1e-12, atol=0.0)


def testMainNoEpochs(monkeypatch: pytest.MonkeyPatch):
    """Test the command line refuses to run without an epoch."""
    monkeypatch.setattr("sys.argv", ["subdiurnal"])
    with pytest.raises(SystemExit):
        main()
