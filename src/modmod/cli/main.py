"""Command-line interface for modmod.

Commands are organized into separate modules under modmod.cli.commands.
"""

import click

from modmod.__version__ import __version__


@click.group()
@click.version_option(version=__version__, prog_name="modmod")
def cli():
    """modmod - Modular course material assembler.

    Renders a track of modules, units and topics into slide decks,
    exercise sources and a book summary.
    """
    pass


# These imports must come after cli is defined, hence noqa: E402
from modmod.cli.commands.build import build  # noqa: E402
from modmod.cli.commands.config import config  # noqa: E402
from modmod.cli.commands.outline import outline  # noqa: E402

cli.add_command(build)
cli.add_command(config)
cli.add_command(outline)


if __name__ == "__main__":
    cli()
