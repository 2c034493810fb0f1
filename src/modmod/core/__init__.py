"""Core track processing module.

This module contains the domain logic: config records, hierarchy resolution,
content aggregation, exercise selection and book assembly.
"""

from modmod.core.book import Book, BookBuilder
from modmod.core.build import render_track
from modmod.core.errors import (
    GlobPatternError,
    LoadError,
    ModmodError,
    OutputError,
    OutputNotEmptyError,
    UnsupportedOperationError,
)
from modmod.core.loader import Loaded, load_spec

__all__ = [
    "Book",
    "BookBuilder",
    "GlobPatternError",
    "Loaded",
    "LoadError",
    "ModmodError",
    "OutputError",
    "OutputNotEmptyError",
    "UnsupportedOperationError",
    "load_spec",
    "render_track",
]
