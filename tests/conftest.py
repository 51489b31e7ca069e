"""Test configuration for pytest."""

import logging
import os
import pytest

from regionmatch.logging import reset_level, set_level


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['REGIONMATCH_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['regionmatch.matching.table', 'regionmatch.matching.hashtable']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)

    yield

    # A CLI run may have raised the package level for the rest of the process
    set_level(logging.WARNING)
    reset_level()
