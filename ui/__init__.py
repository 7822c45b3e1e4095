"""
UI package for Cafezinho Orders
Contains user interface implementations
"""

from .simple_ui import SimpleStoreUI

__all__ = [
    'SimpleStoreUI'
]
