"""
rigfreq: frequency string parsing, formatting and band lookup for amateur radio
"""
import logging

__version__ = "1.0.0"

# Package logger; handlers are configured by the application (see rigfreq.cli)
logger = logging.getLogger('rigfreq')
logger.addHandler(logging.NullHandler())
