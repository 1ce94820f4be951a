"""
Utility modules for the extractor.
"""

from .logger import ExtractorLogger, get_logger, init_logger
from .patterns import *

__all__ = [
    'ExtractorLogger',
    'get_logger',
    'init_logger',
]
