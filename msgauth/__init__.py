"""Canonical field-set signing on secp256k1."""

import logging

__version__ = "0.1.0"

# Silent until the host (or the msgauth CLI) configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
