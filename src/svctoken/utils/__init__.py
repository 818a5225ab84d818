"""Utility modules for svctoken."""

from . import duration
from . import time

__all__ = ['duration', 'time']
