"""Selection and copying of exercise source files.

Include patterns are matched with ``fnmatch`` against the path of each file
relative to the exercise directory. On top of ``fnmatch`` syntax they support:

- ``**/`` for zero or more leading directories (``*`` already matches ``/``)
- ``{a,b}`` alternation, which may nest
- ``\\`` to escape the next character

Absolute patterns are matched against the absolute file path instead.
"""

import fnmatch
import logging
import re
from pathlib import Path, PurePosixPath

from attrs import frozen

from modmod.core.errors import GlobPatternError
from modmod.core.loader import Loaded
from modmod.core.specs import ExerciseSpec, TopicSpec
from modmod.core.utils.file_utils import copy_file, iter_files
from modmod.core.utils.text_utils import to_numbered_tag

logger = logging.getLogger(__name__)


def _class_end(pattern: str, start: int) -> int:
    """Index of the ``]`` closing the character class opened at ``start``."""
    i = start + 1
    if pattern.startswith("!", i):
        i += 1
    # A leading "]" is a member of the class, as in fnmatch
    if pattern.startswith("]", i):
        i += 1
    end = pattern.find("]", i)
    if end == -1:
        raise GlobPatternError(pattern, "unclosed character class")
    return end


def expand_braces(pattern: str) -> list[str]:
    """Expand every ``{a,b}`` group into separate patterns.

    >>> expand_braces("*.{toml,lock}")
    ['*.toml', '*.lock']
    >>> expand_braces("{src,tests}/{a,b}.rs")
    ['src/a.rs', 'src/b.rs', 'tests/a.rs', 'tests/b.rs']
    """
    depth = 0
    bounds: list[int] = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "\\":
            i += 2
            continue
        if c == "[":
            i = _class_end(pattern, i) + 1
            continue
        if c == "{":
            if depth == 0:
                bounds = [i]
            depth += 1
        elif c == "," and depth == 1:
            bounds.append(i)
        elif c == "}" and depth:
            depth -= 1
            if depth == 0:
                bounds.append(i)
                head, tail = pattern[: bounds[0]], pattern[i + 1 :]
                return [
                    expanded
                    for start, end in zip(bounds, bounds[1:])
                    for expanded in expand_braces(head + pattern[start + 1 : end] + tail)
                ]
        i += 1
    if depth:
        raise GlobPatternError(pattern, "unclosed alternation")
    return [pattern]


def unescape(pattern: str) -> str:
    """Rewrite ``\\`` escapes into their fnmatch equivalents."""
    result = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "\\":
            if i + 1 == len(pattern):
                raise GlobPatternError(pattern, "dangling escape")
            i += 1
            c = pattern[i]
            result.append(f"[{c}]" if c in "*?[" else c)
        elif c == "[":
            end = _class_end(pattern, i)
            result.append(pattern[i : end + 1])
            i = end
        else:
            result.append(c)
        i += 1
    return "".join(result)


def expand_double_star(pattern: str) -> list[str]:
    """Expand each ``**/`` into a variant without it and one with ``*/``.

    >>> expand_double_star("**/*.rs")
    ['*.rs', '*/*.rs']
    """
    head, sep, tail = pattern.partition("**/")
    if not sep:
        return [pattern]
    rests = expand_double_star(tail)
    return [head + rest for rest in rests] + [head + "*/" + rest for rest in rests]


def compile_include(pattern: str) -> list[re.Pattern]:
    """Compile one include pattern into the fnmatch regexes it expands to."""
    return [
        re.compile(fnmatch.translate(variant))
        for alternative in expand_braces(pattern)
        for variant in expand_double_star(unescape(alternative))
    ]


@frozen
class IncludeSet:
    """The compiled include patterns of one exercise."""

    root: Path
    relative: tuple[re.Pattern, ...]
    absolute: tuple[re.Pattern, ...] = ()

    @classmethod
    def build(cls, exercise_dir: Path, includes: list[str]) -> "IncludeSet":
        relative: list[re.Pattern] = []
        absolute: list[re.Pattern] = []
        for include in includes:
            target = absolute if PurePosixPath(include).is_absolute() else relative
            target.extend(compile_include(include))
        return cls(exercise_dir, tuple(relative), tuple(absolute))

    def is_match(self, path: Path) -> bool:
        if any(pattern.fullmatch(path.as_posix()) for pattern in self.absolute):
            return True
        if not path.is_relative_to(self.root):
            return False
        text = path.relative_to(self.root).as_posix()
        return any(pattern.fullmatch(text) for pattern in self.relative)


@frozen
class Exercise:
    """An exercise together with the topic that declared it."""

    spec: ExerciseSpec
    topic: Loaded[TopicSpec]
    index: int

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def tag(self) -> str:
        return to_numbered_tag(self.spec.name, self.index)

    @property
    def source_dir(self) -> Path:
        return self.topic.resolve(self.spec.path)

    @property
    def description_path(self) -> Path:
        return self.source_dir / self.spec.description

    def selected_files(self) -> list[Path]:
        """Return every file below the source directory matching an include pattern."""
        includes = IncludeSet.build(self.source_dir, self.spec.includes)
        return [path for path in iter_files(self.source_dir) if includes.is_match(path)]

    def copy_to(self, exercises_dir: Path) -> list[Path]:
        """Copy the selected files to ``exercises_dir/<tag>``, keeping relative paths.

        Returns:
            The destination paths, in copy order
        """
        target_dir = exercises_dir / self.tag
        copied = []
        for path in self.selected_files():
            dest = target_dir / path.relative_to(self.source_dir)
            copy_file(path, dest)
            copied.append(dest)
        logger.debug(f"Copied {len(copied)} files for exercise {self.name!r} to {target_dir}")
        return copied


def unit_exercises(topics: list[Loaded[TopicSpec]]) -> list[Exercise]:
    """Number the exercises of all of a unit's topics from 1.

    Numbering follows topic order, then declaration order within each topic,
    so tags stay unique inside the unit's ``exercises`` directory.
    """
    specs = [(topic, spec) for topic in topics for spec in topic.data.exercises]
    return [
        Exercise(spec=spec, topic=topic, index=index)
        for index, (topic, spec) in enumerate(specs, start=1)
    ]
