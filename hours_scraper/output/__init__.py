"""
Output generation module.
Writes extraction results as a JSON array.
"""

from .writer import JsonResultWriter

__all__ = [
    'JsonResultWriter',
]
