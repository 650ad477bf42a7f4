"""
Main CLI dispatcher for design-archive.

Usage:
    design-archive browse [-q TEXT] [--category C] [--decade 1950] [--region R]
    design-archive show ID
    design-archive favorite ID
    design-archive cache [install|activate|fetch|list|clear]
    design-archive config [show|set|path]
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from designarchive import __version__
from designarchive.core.config import ArchivePaths, Settings, get_paths, load_settings

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, verbose: bool = False, data_dir: Path | None = None):
        self.verbose = verbose
        self.data_dir = data_dir
        self.console = console

    @property
    def paths(self) -> ArchivePaths:
        return get_paths(self.data_dir)

    @property
    def settings(self) -> Settings:
        return load_settings(self.data_dir)


pass_context = click.make_pass_decorator(Context, ensure=True)


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
    )


@click.group()
@click.version_option(version=__version__, prog_name="design-archive")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="DESIGN_ARCHIVE_HOME",
    help="Directory for favorites, preferences and caches",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, data_dir: Path | None) -> None:
    """Design Archive: browse a catalog of design artifacts.

    Search, filter and sort the catalog, keep favorites, and manage the
    offline cache.
    """
    _configure_logging(verbose)
    ctx.obj = Context(verbose=verbose, data_dir=data_dir)


# Import and register command groups (imports after main definition intentional)
from designarchive.catalog.commands import (  # noqa: E402
    browse,
    facets,
    favorite,
    favorites,
    show,
    stats,
    theme,
)
from designarchive.config.commands import config  # noqa: E402
from designarchive.offline.commands import cache  # noqa: E402

main.add_command(browse)
main.add_command(show)
main.add_command(favorite)
main.add_command(favorites)
main.add_command(facets)
main.add_command(stats)
main.add_command(theme)
main.add_command(cache)
main.add_command(config)


if __name__ == "__main__":
    main()
