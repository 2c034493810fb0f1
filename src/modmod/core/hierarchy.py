"""Expansion of a track file into its module, unit and topic tree.

Every reference is loaded relative to the file that contains it: modules
relative to the track file, topics and templates relative to their module
file, exercises relative to their topic file.
"""

import logging
from pathlib import Path

from attrs import Factory, frozen

from modmod.core.errors import UnsupportedOperationError
from modmod.core.loader import Loaded, load_spec
from modmod.core.specs import ModuleSpec, TopicSpec, TrackSpec, UnitSpec

logger = logging.getLogger(__name__)


@frozen
class ResolvedUnit:
    spec: UnitSpec
    module: Loaded[ModuleSpec]
    topics: list[Loaded[TopicSpec]] = Factory(list)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def template_path(self) -> Path:
        return self.module.resolve(self.spec.template)


@frozen
class ResolvedModule:
    module: Loaded[ModuleSpec]
    units: list[ResolvedUnit] = Factory(list)

    @property
    def name(self) -> str:
        return self.module.data.name

    def triples(self) -> list[tuple[ModuleSpec, UnitSpec, list[Loaded[TopicSpec]]]]:
        return [(self.module.data, unit.spec, unit.topics) for unit in self.units]


def load_track(path: Path | str) -> Loaded[TrackSpec]:
    return load_spec(TrackSpec, path)


def resolve_excluded_topics(track: Loaded[TrackSpec]) -> list[Loaded[TopicSpec]]:
    """Resolve the topics a track excludes from its units.

    Exclusion filtering is not implemented. A track that lists excluded
    topics is rejected instead of being built with the list ignored.
    """
    if track.data.excluded_topics:
        excluded = ", ".join(str(path) for path in track.data.excluded_topics)
        raise UnsupportedOperationError(f"excluded topics in {track.path} ({excluded})")
    return []


def load_modules(track: Loaded[TrackSpec]) -> list[Loaded[ModuleSpec]]:
    return [load_spec(ModuleSpec, path, track.base_dir) for path in track.data.modules]


def load_units(module: Loaded[ModuleSpec]) -> list[ResolvedUnit]:
    units = []
    for unit in module.data.units:
        topics = [load_spec(TopicSpec, path, module.base_dir) for path in unit.topics]
        logger.debug(f"Loaded {len(topics)} topics for unit {unit.name!r}")
        units.append(ResolvedUnit(spec=unit, module=module, topics=topics))
    return units


def resolve_hierarchy(track: Loaded[TrackSpec]) -> list[ResolvedModule]:
    """Load every module and topic referenced by ``track``, in declaration order.

    Raises:
        LoadError: Any referenced file is missing or malformed
        UnsupportedOperationError: The track lists excluded topics
    """
    resolve_excluded_topics(track)
    modules = []
    for module in load_modules(track):
        modules.append(ResolvedModule(module=module, units=load_units(module)))
    logger.debug(f"Resolved {len(modules)} modules for track {track.data.name!r}")
    return modules
