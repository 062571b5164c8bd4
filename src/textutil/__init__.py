"""TEXTUTIL

Locale-independent character and string utilities for narrow (``bytes``) and
wide (``str``) text: classification predicates, file-name sanitization, XML
escaping, trimming, case conversion and duration formatting.
"""

import logging

__all__ = ["__version__"]
__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
