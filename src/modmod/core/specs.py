"""Record types for the track, module, unit, topic and exercise config files.

All path fields hold the path exactly as written in the config file. They are
relative to the directory of the file that declared them and are only resolved
when they are dereferenced (see ``modmod.core.loader.Loaded.resolve``).
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SLIDES_FILE = "slides.md"
DEFAULT_TEMPLATE_FILE = "template.md"
DEFAULT_DESCRIPTION_FILE = "description.md"
DEFAULT_EXERCISE_INCLUDES = ("Cargo.toml", "Cargo.lock", "src/**")


class SpecModel(BaseModel):
    """Common settings for config records: immutable, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ExerciseSpec(SpecModel):
    """A practice task whose sources are selectively copied to the output."""

    name: str
    path: Path = Field(description="Exercise source directory")
    description: Path = Field(
        default=Path(DEFAULT_DESCRIPTION_FILE),
        description="Description file, relative to the exercise directory",
    )
    includes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXERCISE_INCLUDES),
        description="Glob patterns, relative to the exercise directory",
    )


class TopicSpec(SpecModel):
    name: str
    dependencies: list[Path] = Field(default_factory=list)
    exercises: list[ExerciseSpec] = Field(default_factory=list)
    summary: list[str] = Field(default_factory=list)
    objectives: list[str] = Field(default_factory=list)
    content: Path = Field(
        default=Path(DEFAULT_SLIDES_FILE),
        description="Slide content contributed by this topic",
    )
    further_reading: list[str] = Field(default_factory=list)


class UnitSpec(SpecModel):
    """A group of topics rendered into a single slide deck.

    Units are declared inline in their module file, so ``template`` and
    ``topics`` resolve against the module file's directory.
    """

    name: str
    template: Path = Field(default=Path(DEFAULT_TEMPLATE_FILE))
    topics: list[Path]


class ModuleSpec(SpecModel):
    name: str
    description: str
    units: list[UnitSpec]


class TrackSpec(SpecModel):
    """Root of the hierarchy; one track is built per invocation."""

    name: str
    modules: list[Path]
    excluded_topics: list[Path] = Field(default_factory=list)
