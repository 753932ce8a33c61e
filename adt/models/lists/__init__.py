"""
Indexed list implementations.
"""

from adt.models.lists.array_list import ArrayList

__all__ = ["ArrayList"]
