"""
Signing gate tasks package.

Task modules are collected into the package namespace by the top-level
__init__.py using Collection.from_module().
"""

import logging

from ..config.logging import bootstrap_logging


def setup_logging(debug=False):
    """Set up logging configuration based on debug flag."""
    if debug:
        import os
        os.environ['LOG_LEVEL'] = 'DEBUG'
    bootstrap_logging(__name__)
    if debug:
        logging.getLogger('signing_gate').debug("Debug logging enabled")
