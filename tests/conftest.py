"""Test configuration and fixtures for rigfreq tests."""

import logging
import os
import pytest
import sys

# Make the package importable when the tests run from a plain checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Rejected input is logged at debug level; keep test output quiet
@pytest.fixture(autouse=True)
def disable_logging():
    """Disable logging messages during tests."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)
