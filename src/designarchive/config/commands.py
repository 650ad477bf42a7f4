"""
Configuration management CLI commands.

Manages settings stored in config.yaml inside the data directory, layered
over the global ~/.config/design-archive/config.yaml.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from designarchive.core.config import (
    Settings,
    get_global_config_path,
    get_paths,
    load_local_config,
    load_settings,
    save_config,
)

if TYPE_CHECKING:
    from designarchive.cli import Context

console = Console()

SETTING_DESCRIPTIONS = {
    "data_source": "Corpus JSON path or URL",
    "page_size": "Designs revealed per page",
    "lazy_load_margin": "Pixels beyond the viewport that count as visible",
    "debounce_delay": "Search input quiet time in seconds",
    "scroll_threshold": "Distance from page bottom (px) that loads more",
    "scroll_quiet_period": "Seconds without scrolling that end a scroll burst",
    "default_theme": "Theme used when none is saved (light or dark)",
    "cache_name": "Live offline cache version",
    "origin": "Origin treated as same-origin by the offline cache",
    "favorites_key": "Storage key for favorites",
    "theme_key": "Storage key for the theme preference",
}


def _data_dir(ctx: Context | None) -> Path | None:
    return ctx.data_dir if ctx is not None else None


@click.group()
def config() -> None:
    """Manage design-archive configuration."""
    pass


@config.command(name="show")
@click.pass_obj
def show_cmd(ctx: Context | None) -> None:
    """Show effective settings."""
    data_dir = _data_dir(ctx)
    settings = load_settings(data_dir)
    defaults = Settings()

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value", style="green")
    table.add_column("Default", style="dim")
    table.add_column("Description", style="dim")

    for f in fields(Settings):
        table.add_row(
            f.name,
            str(getattr(settings, f.name)),
            str(getattr(defaults, f.name)),
            SETTING_DESCRIPTIONS.get(f.name, ""),
        )

    console.print(table)
    console.print(f"\n[dim]Config file: {get_paths(data_dir).config_file}[/dim]")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def set_cmd(ctx: Context | None, key: str, value: str) -> None:
    """Set a configuration value.

    \b
    Examples:
        design-archive config set page_size 24
        design-archive config set data_source https://example.com/data.json
    """
    valid = {f.name for f in fields(Settings)}
    if key not in valid:
        console.print(f"[red]Unknown setting: {key}[/red]")
        console.print("\nAvailable settings:")
        for name in sorted(valid):
            console.print(f"  - {name}")
        return

    default = getattr(Settings(), key)
    try:
        typed = type(default)(value)
    except ValueError:
        console.print(f"[red]Invalid value for {key}: {value}[/red]")
        return

    data_dir = _data_dir(ctx)
    current = load_local_config(data_dir)
    current[key] = typed
    path = save_config(current, data_dir)
    console.print(f"[green]Set {key} = {typed}[/green]")
    console.print(f"[dim]Saved to {path}[/dim]")


@config.command(name="path")
@click.pass_obj
def path_cmd(ctx: Context | None) -> None:
    """Show configuration and data paths."""
    paths = get_paths(_data_dir(ctx))
    console.print(f"Data directory: {paths.root}")
    console.print(f"Local config:   {paths.config_file}")
    console.print(f"Global config:  {get_global_config_path()}")
    console.print(f"Storage:        {paths.storage}")
    console.print(f"Caches:         {paths.caches}")
