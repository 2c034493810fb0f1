"""Rendering of a complete track into the output directory.

The build is strictly sequential and all-or-nothing: the first failure aborts
it and propagates unchanged. Output layout::

    <output>/<NN-module>/<NN-unit>/slides.md
    <output>/<NN-module>/<NN-unit>/exercises/<NN-exercise>/<exercise files>
    <output>/<NN-module>/<NN-unit>/exercises/<NN-exercise>.md
    <output>/SUMMARY.md
"""

import logging
from pathlib import Path, PurePosixPath

from modmod.core.aggregator import aggregate_topics
from modmod.core.book import Book, BookBuilder, ChapterBuilder
from modmod.core.exercises import unit_exercises
from modmod.core.hierarchy import ResolvedModule, ResolvedUnit, load_track, resolve_hierarchy
from modmod.core.template import render_template
from modmod.core.utils.file_utils import make_dir, prepare_output_dir, read_text, write_text
from modmod.core.utils.text_utils import to_numbered_tag

logger = logging.getLogger(__name__)

SLIDES_FILE = "slides.md"
EXERCISES_DIR = "exercises"


def render_unit(
    unit: ResolvedUnit,
    unit_index: int,
    module_dir: PurePosixPath,
    output_dir: Path,
    chapter: ChapterBuilder,
) -> None:
    unit_dir = module_dir / to_numbered_tag(unit.name, unit_index)
    logger.info(f"Rendering unit {unit.name!r} into {unit_dir}")
    make_dir(output_dir / unit_dir)
    exercises_dir = unit_dir / EXERCISES_DIR
    make_dir(output_dir / exercises_dir)

    section = chapter.section(unit.name, unit_dir / SLIDES_FILE)
    template = read_text(unit.template_path)
    aggregate = aggregate_topics(unit.topics)
    unit_slides = render_template(template, aggregate)

    for exercise in unit_exercises(unit.topics):
        section.subsection(
            exercise.name,
            exercise.description_path,
            exercises_dir / f"{exercise.tag}.md",
        )
        exercise.copy_to(output_dir / exercises_dir)
    section.add()

    write_text(output_dir / unit_dir / SLIDES_FILE, unit_slides)


def render_module(
    module: ResolvedModule,
    module_index: int,
    output_dir: Path,
    book: BookBuilder,
) -> None:
    module_dir = PurePosixPath(to_numbered_tag(module.name, module_index))
    logger.info(f"Rendering module {module.name!r} into {module_dir}")
    make_dir(output_dir / module_dir)
    chapter = book.chapter(module.name)
    for unit_index, unit in enumerate(module.units, start=1):
        render_unit(unit, unit_index, module_dir, output_dir, chapter)
    chapter.add()


def render_track(
    track_path: Path | str,
    output_dir: Path | str,
    clear_output: bool = False,
) -> Book:
    """Build the track described by ``track_path`` into ``output_dir``.

    Args:
        track_path: The track config file
        output_dir: Directory that receives all generated files
        clear_output: Remove and recreate ``output_dir`` first; otherwise it
            must exist and be empty

    Returns:
        The rendered book structure

    Raises:
        ModmodError: Any step failed. Unless ``clear_output`` was set, the
            output directory may then contain partial results.
    """
    output_dir = Path(output_dir)
    logger.info(f"Building track {track_path} into {output_dir}")
    prepare_output_dir(output_dir, clear_output)

    track = load_track(track_path)
    modules = resolve_hierarchy(track)

    book = BookBuilder(track.data.name)
    for module_index, module in enumerate(modules, start=1):
        render_module(module, module_index, output_dir, book)

    result = book.build()
    result.render(output_dir)
    logger.info(f"Finished building track {track.data.name!r}")
    return result
