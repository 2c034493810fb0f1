from pathlib import Path

import pytest

from modmod.core.errors import LoadError
from modmod.core.loader import Loaded, load_spec
from modmod.core.specs import ExerciseSpec, ModuleSpec, TopicSpec, TrackSpec


def test_load_spec_applies_defaults(tmp_path):
    path = tmp_path / "topic.toml"
    path.write_text('name = "Minimal"\n[[exercises]]\nname = "Ex"\npath = "ex"\n')

    topic = load_spec(TopicSpec, path)

    assert topic.data.name == "Minimal"
    assert topic.data.content == Path("slides.md")
    assert topic.data.dependencies == []
    assert topic.data.summary == []
    assert topic.data.objectives == []
    assert topic.data.further_reading == []
    exercise = topic.data.exercises[0]
    assert exercise.description == Path("description.md")
    assert exercise.includes == ["Cargo.toml", "Cargo.lock", "src/**"]


def test_default_includes_are_not_shared(tmp_path):
    first = ExerciseSpec(name="a", path=Path("a"))
    second = ExerciseSpec(name="b", path=Path("b"))

    assert first.includes == second.includes
    assert first.includes is not second.includes


def test_load_spec_returns_absolute_source_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("track.toml").write_text('name = "T"\nmodules = []\n')

    track = load_spec(TrackSpec, "track.toml")

    assert track.path == tmp_path / "track.toml"
    assert track.path.is_absolute()
    assert track.base_dir == tmp_path
    assert track.data.excluded_topics == []


def test_load_spec_resolves_against_base_dir(tmp_path):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (nested / "topic.toml").write_text('name = "Nested"\n')

    topic = load_spec(TopicSpec, Path("b/topic.toml"), tmp_path / "a")

    assert topic.path == nested / "topic.toml"
    assert topic.resolve(topic.data.content) == nested / "slides.md"


def test_loaded_resolve_uses_parent_of_source_file():
    loaded = Loaded(data=TopicSpec(name="x"), path=Path("/course/topics/x/topic.toml"))

    assert loaded.resolve("../shared/slides.md") == Path("/course/topics/x/../shared/slides.md")


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.toml"

        with pytest.raises(LoadError) as excinfo:
            load_spec(TopicSpec, missing)

        assert excinfo.value.path == missing
        assert "file not found" in str(excinfo.value)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(LoadError) as excinfo:
            load_spec(TopicSpec, tmp_path)

        assert excinfo.value.path == tmp_path

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "topic.toml"
        path.write_text('name = "unterminated\n')

        with pytest.raises(LoadError, match="invalid TOML"):
            load_spec(TopicSpec, path)

    def test_missing_required_field(self, tmp_path):
        path = tmp_path / "module.toml"
        path.write_text('name = "No units"\ndescription = ""\n')

        with pytest.raises(LoadError) as excinfo:
            load_spec(ModuleSpec, path)

        assert "units" in excinfo.value.reason

    def test_wrong_field_type(self, tmp_path):
        path = tmp_path / "topic.toml"
        path.write_text('name = "T"\nobjectives = "not a list"\n')

        with pytest.raises(LoadError) as excinfo:
            load_spec(TopicSpec, path)

        assert "objectives" in excinfo.value.reason

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "topic.toml"
        path.write_bytes(b'name = "\xff\xfe"\n')

        with pytest.raises(LoadError, match="UTF-8"):
            load_spec(TopicSpec, path)


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "topic.toml"
    path.write_text('name = "T"\nauthor = "someone"\n')

    assert load_spec(TopicSpec, path).data.name == "T"
