"""CLI commands for the offline cache."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from designarchive.core.errors import NetworkError

if TYPE_CHECKING:
    from designarchive.cli import Context
    from designarchive.offline.cache import OfflineCache

console = Console()


def _offline(ctx: Context | None) -> OfflineCache:
    from designarchive.offline.cache import CacheStorage, OfflineCache

    if ctx is None:
        from designarchive.cli import Context

        ctx = Context()
    settings = ctx.settings
    return OfflineCache(
        CacheStorage(ctx.paths.caches),
        cache_name=settings.cache_name,
        origin=settings.origin,
    )


@click.group(name="cache")
def cache() -> None:
    """Manage the versioned offline cache.

    Core assets are pre-fetched on install; activation removes every cache
    version except the live one.
    """
    pass


@cache.command(name="install")
@click.pass_obj
def install_cmd(ctx: Context | None) -> None:
    """Pre-fetch the core asset manifest into the live cache."""
    offline = _offline(ctx)
    console.print(f"[cyan]Installing {offline.cache_name}...[/cyan]")
    try:
        stored = offline.install()
    except NetworkError as e:
        console.print(f"[red]Install failed: {e.message}[/red]")
        if e.source:
            console.print(f"[dim]{e.source}[/dim]")
        raise SystemExit(1) from e
    console.print(f"[green]Cached {len(stored)} core assets[/green]")


@cache.command(name="activate")
@click.pass_obj
def activate_cmd(ctx: Context | None) -> None:
    """Delete cache versions other than the live one."""
    offline = _offline(ctx)
    deleted = offline.activate()
    for name in deleted:
        console.print(f"  [yellow]Deleted[/yellow] {name}")
    console.print(f"[green]Active cache: {offline.cache_name}[/green]")


@cache.command(name="fetch")
@click.argument("url")
@click.option("--accept", default="*/*", show_default=True, help="Accept header of the request")
@click.option("--method", default="GET", show_default=True, help="HTTP method")
@click.pass_obj
def fetch_cmd(ctx: Context | None, url: str, accept: str, method: str) -> None:
    """Request a URL through the cache (cache first, then network)."""
    from designarchive.offline.cache import CacheRequest

    offline = _offline(ctx)
    try:
        response = offline.fetch(CacheRequest(url, method=method, accept=accept))
    except NetworkError as e:
        console.print(f"[red]Request failed: {e.message}[/red]")
        raise SystemExit(1) from e

    console.print(f"{response.status} [dim]{response.type}[/dim] {response.url}")
    console.print(f"[dim]{len(response.body)} bytes[/dim]")


@cache.command(name="list")
@click.pass_obj
def list_cmd(ctx: Context | None) -> None:
    """List cache versions and their entries."""
    offline = _offline(ctx)
    names = offline.storage.keys()

    if not names:
        console.print("[yellow]No caches found[/yellow]")
        console.print("[dim]Run 'design-archive cache install' first[/dim]")
        return

    table = Table(title=f"Caches ({len(names)})")
    table.add_column("Name", style="cyan")
    table.add_column("Entries", justify="right")
    table.add_column("Live", justify="center")
    for name in names:
        entries = offline.storage.open(name).keys()
        table.add_row(name, str(len(entries)), "*" if name == offline.cache_name else "")
    console.print(table)


@cache.command(name="clear")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def clear_cmd(ctx: Context | None, yes: bool) -> None:
    """Delete all cache versions."""
    offline = _offline(ctx)
    names = offline.storage.keys()
    if not names:
        console.print("[dim]Nothing to clear[/dim]")
        return
    if not yes and not click.confirm(f"Delete {len(names)} cache(s)?"):
        console.print("[dim]Cancelled[/dim]")
        return
    for name in names:
        offline.storage.delete(name)
    console.print(f"[green]Deleted {len(names)} cache(s)[/green]")
