"""Build command: render a track into an output directory."""

import logging
from pathlib import Path

import click

from modmod.cli.commands.shared import LOG_LEVELS, setup_logging
from modmod.core.build import render_track
from modmod.core.errors import ModmodError
from modmod.infrastructure.config import get_config

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "track-file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="Directory for the generated files (default from config: build.output_dir).",
)
@click.option(
    "--clear-output/--no-clear-output",
    default=None,
    help="Remove and recreate the output directory first. "
    "Without it the directory must exist and be empty.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Set the logging level (default from config: logging.log_level).",
)
@click.option(
    "--verbose-logging",
    is_flag=True,
    help="Show log messages in console (by default logs go to file only).",
)
def build(
    track_file: Path,
    output_dir: Path | None,
    clear_output: bool | None,
    log_level: str | None,
    verbose_logging: bool,
):
    """Render TRACK_FILE into slide decks, exercises and a book summary.

    Examples:

    \b
        modmod build track.toml -o book --clear-output
        modmod build track.toml --log-level DEBUG --verbose-logging
    """
    cfg = get_config()
    log_file = setup_logging(
        log_level or cfg.logging.log_level,
        console_logging=verbose_logging or cfg.logging.console_logging,
        file_log_level_name=cfg.logging.file_log_level,
        log_file=Path(cfg.logging.log_file) if cfg.logging.log_file else None,
    )
    logger.debug(f"Logging to {log_file}")
    if output_dir is None:
        output_dir = Path(cfg.build.output_dir)
    if clear_output is None:
        clear_output = cfg.build.clear_output

    try:
        book = render_track(track_file, output_dir, clear_output=clear_output)
    except ModmodError as e:
        logger.error(f"Build failed: {e}")
        raise click.ClickException(str(e)) from e

    num_sections = sum(len(chapter.sections) for chapter in book.chapters)
    click.echo(
        f"Built {book.title!r}: {len(book.chapters)} modules, {num_sections} units, "
        f"{len(book.subsections)} exercises -> {output_dir}"
    )
