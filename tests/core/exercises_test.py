from pathlib import Path

import pytest

from modmod.core.errors import GlobPatternError, OutputError
from modmod.core.exercises import (
    Exercise,
    IncludeSet,
    compile_include,
    expand_braces,
    expand_double_star,
    unit_exercises,
)
from modmod.core.loader import Loaded
from modmod.core.specs import ExerciseSpec, TopicSpec
from tests.fixtures.course_fixtures import write_files

EXERCISE_DIR = Path("/course/topic/exercise")


def matches(pattern: str, relative: str) -> bool:
    return IncludeSet.build(EXERCISE_DIR, [pattern]).is_match(EXERCISE_DIR / relative)


class TestIncludePatterns:
    def test_star_matches_file_name(self):
        assert matches("*.txt", "notes.txt")
        assert not matches("*.txt", "notes.md")

    def test_star_crosses_directories(self):
        assert matches("*.txt", "docs/notes.txt")

    def test_double_star_prefix_matches_zero_or_more_dirs(self):
        assert matches("**/*.rs", "main.rs")
        assert matches("**/*.rs", "src/a/b/lib.rs")

    def test_trailing_double_star_matches_everything_below(self):
        assert matches("src/**", "src/main.rs")
        assert matches("src/**", "src/bin/tool.rs")
        assert not matches("src/**", "tests/it.rs")

    def test_default_source_pattern(self):
        assert matches("src/**", "src/lib.rs")
        assert matches("Cargo.toml", "Cargo.toml")
        assert not matches("Cargo.toml", "sub/Cargo.toml")

    def test_question_mark_and_classes(self):
        assert matches("file?.txt", "file1.txt")
        assert not matches("file?.txt", "file10.txt")
        assert matches("[ab].txt", "a.txt")
        assert not matches("[!ab].txt", "a.txt")
        assert matches("[!ab].txt", "c.txt")

    def test_alternatives(self):
        assert matches("*.{toml,lock}", "Cargo.lock")
        assert matches("*.{toml,lock}", "Cargo.toml")
        assert not matches("*.{toml,lock}", "Cargo.rs")

    def test_escaped_characters_are_literal(self):
        assert matches(r"\*.txt", "*.txt")
        assert not matches(r"\*.txt", "a.txt")

    def test_pattern_is_anchored_at_exercise_dir(self):
        includes = IncludeSet.build(EXERCISE_DIR, ["*.txt"])

        assert not includes.is_match(Path("/course/topic/notes.txt"))
        assert not includes.is_match(Path("/course/topic/exercise-2/notes.txt"))

    def test_special_characters_in_exercise_dir(self):
        exercise_dir = Path("/course/topic [draft]/ex+1")
        includes = IncludeSet.build(exercise_dir, ["*.txt"])

        assert includes.is_match(exercise_dir / "notes.txt")

    @pytest.mark.parametrize("pattern", ["[abc", "{a,b", "trailing\\", "[]"])
    def test_invalid_patterns(self, pattern):
        with pytest.raises(GlobPatternError):
            compile_include(pattern)

    def test_nested_alternatives(self):
        assert matches("src/{bin/{a,b},lib}.rs", "src/bin/b.rs")
        assert matches("src/{bin/{a,b},lib}.rs", "src/lib.rs")
        assert not matches("src/{bin/{a,b},lib}.rs", "src/bin/c.rs")

    def test_escaped_brace_is_literal(self):
        assert matches(r"\{a,b\}.txt", "{a,b}.txt")
        assert not matches(r"\{a,b\}.txt", "a.txt")

    def test_absolute_pattern_matches_absolute_path(self):
        includes = IncludeSet.build(EXERCISE_DIR, ["/course/topic/exercise/*.md"])

        assert includes.is_match(EXERCISE_DIR / "README.md")
        assert not includes.is_match(EXERCISE_DIR / "README.txt")


class TestPatternExpansion:
    def test_braces_expand_in_order(self):
        assert expand_braces("{src,tests}/*.{rs,toml}") == [
            "src/*.rs",
            "src/*.toml",
            "tests/*.rs",
            "tests/*.toml",
        ]

    def test_comma_inside_class_is_not_a_separator(self):
        assert expand_braces("{[,;],x}") == ["[,;]", "x"]

    def test_pattern_without_braces_is_unchanged(self):
        assert expand_braces("src/**") == ["src/**"]

    def test_double_star_variants(self):
        assert expand_double_star("a/**/b") == ["a/b", "a/*/b"]
        assert expand_double_star("src/**") == ["src/**"]

    def test_one_regex_per_variant(self):
        assert len(compile_include("**/*.{rs,toml}")) == 4


def make_exercise(tmp_path: Path, includes: list[str], index: int = 1) -> Exercise:
    write_files(
        tmp_path / "topic" / "exercise",
        {
            "notes.txt": "notes",
            "description.md": "# Description",
            "Cargo.toml": "[package]",
            "src/main.rs": "fn main() {}",
            "src/util/mod.rs": "// util",
            "target/debug/build.log": "log",
        },
    )
    spec = ExerciseSpec(name="Build Things", path=Path("exercise"), includes=includes)
    topic = Loaded(
        data=TopicSpec(name="t", exercises=[spec]),
        path=tmp_path / "topic" / "topic.toml",
    )
    return Exercise(spec=spec, topic=topic, index=index)


class TestExercise:
    def test_paths_resolve_against_topic_file(self, tmp_path):
        exercise = make_exercise(tmp_path, ["*.txt"], index=2)

        assert exercise.tag == "02-build-things"
        assert exercise.source_dir == tmp_path / "topic" / "exercise"
        assert exercise.description_path == tmp_path / "topic" / "exercise" / "description.md"

    def test_selection_is_exactly_the_matched_set(self, tmp_path):
        exercise = make_exercise(tmp_path, ["Cargo.toml", "src/**"])
        source = exercise.source_dir

        selected = exercise.selected_files()

        assert selected == [
            source / "Cargo.toml",
            source / "src/main.rs",
            source / "src/util/mod.rs",
        ]

    def test_copy_preserves_relative_structure(self, tmp_path):
        exercise = make_exercise(tmp_path, ["Cargo.toml", "src/**"])
        out = tmp_path / "out" / "exercises"

        copied = exercise.copy_to(out)

        target = out / "01-build-things"
        assert copied == [
            target / "Cargo.toml",
            target / "src/main.rs",
            target / "src/util/mod.rs",
        ]
        assert (target / "src" / "util" / "mod.rs").read_text() == "// util"
        assert not (target / "notes.txt").exists()
        assert not (target / "target").exists()

    def test_no_match_copies_nothing(self, tmp_path):
        exercise = make_exercise(tmp_path, ["*.py"])
        out = tmp_path / "out"

        assert exercise.copy_to(out) == []
        assert not (out / "01-build-things").exists()

    def test_missing_source_dir_is_fatal(self, tmp_path):
        spec = ExerciseSpec(name="Gone", path=Path("nowhere"))
        topic = Loaded(data=TopicSpec(name="t"), path=tmp_path / "topic.toml")

        with pytest.raises(OutputError) as excinfo:
            Exercise(spec=spec, topic=topic, index=1).copy_to(tmp_path / "out")

        assert excinfo.value.path == tmp_path / "nowhere"

    def test_invalid_pattern_is_fatal(self, tmp_path):
        exercise = make_exercise(tmp_path, ["*.txt", "{broken"])

        with pytest.raises(GlobPatternError):
            exercise.copy_to(tmp_path / "out")


def test_unit_exercises_are_numbered_across_topics(tmp_path):
    def topic(name, *exercise_names):
        exercises = [ExerciseSpec(name=n, path=Path(n)) for n in exercise_names]
        spec = TopicSpec(name=name, exercises=exercises)
        return Loaded(data=spec, path=tmp_path / name / "t.toml")

    exercises = unit_exercises([topic("a", "Intro", "Loops"), topic("b"), topic("c", "Intro")])

    assert [exercise.tag for exercise in exercises] == ["01-intro", "02-loops", "03-intro"]
    assert [exercise.topic.data.name for exercise in exercises] == ["a", "a", "c"]
