"""
CI runtime bindings.
"""

from . import actions

__all__ = ["actions"]
