"""
``pluginutils``
===============

General purpose helpers for commerce platform scripts: traversal
adapters over host iterators and collections, array set operations,
object path access and comparison, and cookie handling.
"""
from ._version import __version__
from . import arrays
from . import collection
from . import iterators
from . import objects
from . import sources
from . import web
from .logger import setup_logger


__all__ = [
    "__version__",
    "arrays",
    "collection",
    "iterators",
    "objects",
    "sources",
    "web",
    "setup_logger",
]
