"""Filesystem helpers that report failures as ``ModmodError`` subclasses."""

import errno
import logging
import shutil
from pathlib import Path

from modmod.core.errors import LoadError, OutputError, OutputNotEmptyError

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(path, f"file is not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise OutputError(path, e) from e


def write_text(path: Path, text: str) -> None:
    try:
        # newline="" keeps the text byte-identical to the rendered string
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputError(path, e) from e


def make_dir(path: Path, parents: bool = False) -> None:
    try:
        path.mkdir(parents=parents, exist_ok=parents)
    except OSError as e:
        raise OutputError(path, e) from e


def copy_file(source: Path, dest: Path) -> None:
    """Copy ``source`` to ``dest`` byte for byte, creating parent directories."""
    logger.debug(f"Copying {source} to {dest}")
    make_dir(dest.parent, parents=True)
    try:
        shutil.copyfile(source, dest)
    except OSError as e:
        raise OutputError(source, e) from e


def iter_files(root: Path) -> list[Path]:
    """Return all files below ``root`` in sorted order."""
    if not root.is_dir():
        raise OutputError(root, NotADirectoryError(errno.ENOTDIR, "Not a directory", str(root)))
    try:
        return sorted(path for path in root.rglob("*") if path.is_file())
    except OSError as e:
        raise OutputError(root, e) from e


def prepare_output_dir(output_dir: Path, clear_output: bool) -> None:
    """Establish exclusive ownership of ``output_dir`` before anything is written.

    With ``clear_output`` the directory is removed (if present) and recreated.
    Otherwise it must already exist and be empty.

    Raises:
        OutputNotEmptyError: ``clear_output`` is false and the directory has entries
        OutputError: The directory cannot be removed, created or listed
    """
    if clear_output:
        if output_dir.exists():
            logger.info(f"Removing output directory {output_dir}")
            try:
                shutil.rmtree(output_dir)
            except OSError as e:
                raise OutputError(output_dir, e) from e
        make_dir(output_dir, parents=True)
        return

    try:
        has_entries = next(output_dir.iterdir(), None) is not None
    except OSError as e:
        raise OutputError(output_dir, e) from e
    if has_entries:
        raise OutputNotEmptyError(output_dir)
