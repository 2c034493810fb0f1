"""Loading of config records together with the file they came from."""

import logging
import tomllib
from pathlib import Path
from typing import Generic, TypeVar

from attrs import frozen
from pydantic import BaseModel, ValidationError

from modmod.core.errors import LoadError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@frozen
class Loaded(Generic[T]):
    """A parsed record paired with the absolute path of its source file.

    Relative paths inside ``data`` are resolved against ``base_dir``, the
    directory of the file that declared them, never against the working
    directory or the root track file.
    """

    data: T
    path: Path

    @property
    def base_dir(self) -> Path:
        return self.path.parent

    def resolve(self, relative: Path | str) -> Path:
        return self.base_dir / relative


def format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        messages.append(f"{location}: {item['msg']}")
    return "; ".join(messages)


def load_spec(spec_cls: type[T], path: Path | str, base_dir: Path | None = None) -> Loaded[T]:
    """Read a TOML file and validate it into a ``spec_cls`` record.

    Args:
        spec_cls: The pydantic model describing the file's schema
        path: Path to the file; relative paths are taken relative to
            ``base_dir`` if given, otherwise to the working directory
        base_dir: Directory of the file that referenced ``path``

    Returns:
        The record together with the absolute path it was loaded from

    Raises:
        LoadError: The file is missing, unreadable, not valid TOML, or does
            not match the schema
    """
    path = Path(path)
    if base_dir is not None:
        path = base_dir / path
    path = path.absolute()
    logger.debug(f"Loading {spec_cls.__name__} from {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise LoadError(path, "file not found") from None
    except UnicodeDecodeError as e:
        raise LoadError(path, f"file is not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise LoadError(path, e.strerror or str(e)) from e

    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise LoadError(path, f"invalid TOML: {e}") from e

    try:
        data = spec_cls.model_validate(raw)
    except ValidationError as e:
        raise LoadError(path, format_validation_error(e)) from e

    return Loaded(data=data, path=path)
