"""modmod - Modular course material assembler.

Turns a hierarchy of track, module, unit and topic descriptions into rendered
slide decks, selected exercise sources and a book outline.
"""

from modmod.__version__ import __version__

# Convenience imports for common classes
from modmod.core.build import render_track
from modmod.core.specs import ExerciseSpec, ModuleSpec, TopicSpec, TrackSpec, UnitSpec

__all__ = [
    "__version__",
    "render_track",
    "ExerciseSpec",
    "ModuleSpec",
    "TopicSpec",
    "TrackSpec",
    "UnitSpec",
]
