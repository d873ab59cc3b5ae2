"""Structural equality checking for test assertions, with path-qualified failure messages."""

from .pythonutils import *
from .pythonutils import __all__

__version__ = '0.1.0'
