"""Navigation tree of the rendered course and its mdBook-style summary.

The tree is assembled through builders that mirror the course hierarchy::

    builder = BookBuilder("Rust Fundamentals")
    chapter = builder.chapter("Basics")
    section = chapter.section("Ownership", PurePosixPath("01-basics/01-ownership/slides.md"))
    section.subsection("Exercise", Path("/src/ex/description.md"), PurePosixPath("..."))
    section.add()
    chapter.add()
    builder.build().render(output_dir)

Paths stored in the tree are relative to the output directory.
"""

import logging
from pathlib import Path, PurePosixPath

from attrs import Factory, define, frozen
from jinja2 import Environment, PackageLoader, StrictUndefined

from modmod.core.utils.file_utils import copy_file, write_text

logger = logging.getLogger(__name__)

SUMMARY_FILE = "SUMMARY.md"
SUMMARY_TEMPLATE = "SUMMARY.md.jinja"


def _link(path: PurePosixPath | None) -> str:
    return path.as_posix() if path is not None else ""


@frozen
class Subsection:
    title: str
    content: Path
    path: PurePosixPath

    @property
    def link(self) -> str:
        return _link(self.path)


@frozen
class Section:
    title: str
    path: PurePosixPath | None = None
    subsections: tuple[Subsection, ...] = ()

    @property
    def link(self) -> str:
        return _link(self.path)


@frozen
class Chapter:
    title: str
    path: PurePosixPath | None = None
    sections: tuple[Section, ...] = ()

    @property
    def link(self) -> str:
        return _link(self.path)


@frozen
class Book:
    title: str
    chapters: tuple[Chapter, ...] = ()

    @property
    def subsections(self) -> list[Subsection]:
        return [
            subsection
            for chapter in self.chapters
            for section in chapter.sections
            for subsection in section.subsections
        ]

    def summary(self) -> str:
        env = Environment(
            loader=PackageLoader("modmod", "templates"),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        return env.get_template(SUMMARY_TEMPLATE).render(book=self)

    def render(self, output_dir: Path) -> Path:
        """Write the summary and subsection contents below ``output_dir``.

        Returns:
            Path of the written summary file
        """
        for subsection in self.subsections:
            copy_file(subsection.content, output_dir / subsection.path)
        summary_path = output_dir / SUMMARY_FILE
        write_text(summary_path, self.summary())
        logger.info(f"Rendered book {self.title!r} with {len(self.chapters)} chapters")
        return summary_path


@define
class SectionBuilder:
    chapter: "ChapterBuilder"
    title: str
    path: PurePosixPath | None = None
    subsections: list[Subsection] = Factory(list)

    def subsection(self, title: str, content: Path, path: PurePosixPath) -> None:
        self.subsections.append(Subsection(title=title, content=content, path=path))

    def add(self) -> None:
        self.chapter.sections.append(
            Section(title=self.title, path=self.path, subsections=tuple(self.subsections))
        )


@define
class ChapterBuilder:
    book: "BookBuilder"
    title: str
    path: PurePosixPath | None = None
    sections: list[Section] = Factory(list)

    def section(self, title: str, path: PurePosixPath | None = None) -> SectionBuilder:
        return SectionBuilder(chapter=self, title=title, path=path)

    def add(self) -> None:
        self.book.chapters.append(
            Chapter(title=self.title, path=self.path, sections=tuple(self.sections))
        )


@define
class BookBuilder:
    title: str
    chapters: list[Chapter] = Factory(list)

    def chapter(self, title: str, path: PurePosixPath | None = None) -> ChapterBuilder:
        return ChapterBuilder(book=self, title=title, path=path)

    def build(self) -> Book:
        return Book(title=self.title, chapters=tuple(self.chapters))
