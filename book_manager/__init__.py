"""
book_manager package initializer.
"""

from . import client
from . import manager
from . import storage

__all__ = ["client", "manager", "storage"]
