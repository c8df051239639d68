import logging

import pytest

from sqlselect import config


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from the default (PostgreSQL) dialect."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def debug_logs(caplog):
    """Capture sqlselect DEBUG records."""
    caplog.set_level(logging.DEBUG, logger="sqlselect")
    return caplog
