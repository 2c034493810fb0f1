"""Outline command for printing a track's structure in Markdown format.

The track name becomes the title, modules and units become headings, and
topics are listed as bullet points with their exercises nested below.
"""

from pathlib import Path

import click

from modmod.core.errors import ModmodError
from modmod.core.hierarchy import ResolvedModule, load_track, resolve_hierarchy


def generate_outline(track_name: str, modules: list[ResolvedModule]) -> str:
    lines = [f"# {track_name}", ""]

    for module in modules:
        lines.append(f"## {module.name}")
        if module.module.data.description.strip():
            lines.append("")
            lines.append(module.module.data.description.strip())
        lines.append("")

        for _, unit, topics in module.triples():
            lines.append(f"### {unit.name}")
            for topic in topics:
                lines.append(f"- {topic.data.name}")
                for exercise in topic.data.exercises:
                    lines.append(f"  - Exercise: {exercise.name}")
            lines.append("")

    return "\n".join(lines)


@click.command()
@click.argument(
    "track-file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the outline to FILE instead of stdout.",
)
def outline(track_file: Path, output_file: Path | None):
    """Print a Markdown outline of a track.

    Loads every module and topic file but writes no build output.

    Examples:

    \b
        modmod outline track.toml              # Print outline to stdout
        modmod outline track.toml -o out.md    # Write outline to file
    """
    try:
        track = load_track(track_file)
        modules = resolve_hierarchy(track)
    except ModmodError as e:
        raise click.ClickException(str(e)) from e

    content = generate_outline(track.data.name, modules)

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")
        click.echo(f"Written: {output_file}")
    else:
        click.echo(content)
