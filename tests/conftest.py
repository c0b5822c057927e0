from __future__ import annotations

# Standard Library Imports
import logging

# Third Party Imports
import pytest

# SUBDIURNAL Imports
from subdiurnal.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from subdiurnal.common.logger import PACKAGE_LOGGER_NAME
from subdiurnal.physics.transforms.subdiurnal import getSubdiurnalModel


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield


@pytest.fixture(autouse=True)
def _resetSharedState() -> None:
    """Restore the default config, default model, and package log handlers after each test."""
    yield
    BehavioralConfig()
    getSubdiurnalModel.cache_clear()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
