"""CLI commands for browsing the catalog."""

from __future__ import annotations

import json as json_module
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from designarchive.catalog.filters import SortMode

if TYPE_CHECKING:
    from designarchive.catalog.models import DesignRecord
    from designarchive.catalog.session import ArchiveSession
    from designarchive.cli import Context

console = Console()

SORT_CHOICES = [m.value for m in SortMode]


def _context(ctx: Context | None) -> Context:
    if ctx is None:
        from designarchive.cli import Context

        ctx = Context()
    return ctx


def _resolve_source(source: str, data_root: Path) -> str:
    """Resolve a relative corpus path against cwd, then the data directory."""
    if source.startswith(("http://", "https://")):
        return source
    path = Path(source).expanduser()
    if not path.is_absolute() and not path.exists():
        path = data_root / path
    return str(path)


def open_session(ctx: Context | None, source: str | None = None) -> ArchiveSession:
    """Load corpus, favorites and settings into a new session."""
    from designarchive.catalog.corpus import load_corpus_or_fallback
    from designarchive.catalog.favorites import FavoritesStore
    from designarchive.catalog.session import ArchiveSession
    from designarchive.core.storage import KeyValueStore

    ctx = _context(ctx)
    settings = ctx.settings
    paths = ctx.paths

    corpus = load_corpus_or_fallback(_resolve_source(source or settings.data_source, paths.root))
    if corpus.fallback and ctx.verbose:
        console.print("[yellow]Corpus source unavailable, using built-in designs[/yellow]")

    store = FavoritesStore(KeyValueStore(paths.storage), key=settings.favorites_key)
    store.load()

    return ArchiveSession(corpus, store, page_size=settings.page_size)


def _records_table(title: str, records: list[DesignRecord], session: ArchiveSession) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", justify="right")
    table.add_column("Title", style="cyan", no_wrap=False)
    table.add_column("Designer")
    table.add_column("Year")
    table.add_column("Category")
    table.add_column("Region")
    table.add_column("Fav", justify="center")

    for index, record in enumerate(records, start=1):
        table.add_row(
            str(index),
            str(record.id),
            record.title,
            record.display_name or "-",
            record.year or "-",
            record.category or "-",
            record.region or "-",
            "*" if session.is_favorite(record.id) else "",
        )
    return table


@click.command()
@click.option("-q", "--search", help="Search title, designer, year, category, description and style")
@click.option("--category", help="Exact category")
@click.option("--decade", help="Decade start year, e.g. 1950")
@click.option("--region", help="Exact region")
@click.option("--sort", type=click.Choice(SORT_CHOICES), default=SortMode.RELEVANCE.value,
              show_default=True, help="Result ordering")
@click.option("--favorites", "favorites_only", is_flag=True, help="Only favorited designs")
@click.option("--pages", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of pages to reveal")
@click.option("--source", help="Corpus path or URL (overrides data_source)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def browse(
    ctx: Context | None,
    search: str | None,
    category: str | None,
    decade: str | None,
    region: str | None,
    sort: str,
    favorites_only: bool,
    pages: int,
    source: str | None,
    as_json: bool,
) -> None:
    """Browse the catalog with search, facet filters and sorting.

    \b
    Examples:
        design-archive browse -q chair --sort year-asc
        design-archive browse --decade 1950 --region Europe
        design-archive browse --favorites --pages 2
    """
    session = open_session(ctx, source)
    if favorites_only:
        session.toggle_favorites_view()
    session.apply_filters(
        search=search, category=category, decade=decade, region=region, sort=sort
    )
    for _ in range(pages - 1):
        if not session.load_more():
            break

    visible = session.visible

    if as_json:
        output = {
            "total": len(session.corpus),
            "filtered": len(session.results),
            "has_more": session.has_more,
            "designs": [r.to_dict() for r in visible],
        }
        click.echo(json_module.dumps(output, indent=2, ensure_ascii=False))
        return

    for _name, label, value in session.active_filters:
        console.print(f"[dim]{label}:[/dim] {value}")

    if session.no_results:
        console.print("[yellow]No designs found matching criteria[/yellow]")
        console.print("[dim]Try removing filters or 'design-archive browse' with no options[/dim]")
        return

    stats = session.stats
    table = _records_table(
        f"Designs ({len(visible)} of {stats['filtered']} shown, {stats['total']} total)",
        visible,
        session,
    )
    console.print(table)

    if session.has_more:
        console.print(f"\n[dim]More available: use --pages {pages + 1}[/dim]")
    else:
        console.print("\n[dim]All results shown[/dim]")


@click.command()
@click.argument("record_id", type=int)
@click.option("--source", help="Corpus path or URL (overrides data_source)")
@click.pass_obj
def show(ctx: Context | None, record_id: int, source: str | None) -> None:
    """Show details for a specific design."""
    session = open_session(ctx, source)
    record = session.find(record_id)

    if record is None:
        console.print(f"[red]Design not found: {record_id}[/red]")
        console.print("[dim]Use 'design-archive browse' to see available designs[/dim]")
        return

    lines = [
        f"[bold]{record.title}[/bold]",
        f"[dim]{record.category}[/dim]",
        "",
        f"Designer: {record.display_name or '-'}",
        f"Year: {record.year or '-'}",
        f"Region: {record.region or '-'}",
    ]
    if record.description:
        lines += ["", record.description]
    if record.impact:
        lines += ["", f"Impact: {record.impact}"]
    if record.materials:
        lines.append(f"Materials: {', '.join(record.materials)}")
    if record.style:
        lines.append(f"Style: {', '.join(record.style)}")

    related = session.related(record)
    if related:
        lines += ["", "Related: " + ", ".join(f"{r.title} (#{r.id})" for r in related)]

    lines += ["", f"[dim]{record.image}[/dim]"]
    marker = " *" if session.is_favorite(record.id) else ""
    console.print(Panel("\n".join(lines), title=f"Design #{record.id}{marker}"))


@click.command()
@click.argument("record_id", type=int)
@click.pass_obj
def favorite(ctx: Context | None, record_id: int) -> None:
    """Add or remove a design from favorites."""
    session = open_session(ctx)
    record = session.find(record_id)

    if record is None:
        console.print(f"[red]Design not found: {record_id}[/red]")
        console.print("[dim]Use 'design-archive browse' to see available designs[/dim]")
        return

    if session.toggle_favorite(record_id):
        console.print(f"[green]Added to favorites:[/green] {record.title}")
    else:
        console.print(f"[yellow]Removed from favorites:[/yellow] {record.title}")
    console.print(f"[dim]{len(session.favorites)} favorite(s)[/dim]")


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def favorites(ctx: Context | None, as_json: bool) -> None:
    """List favorited designs."""
    session = open_session(ctx)
    session.toggle_favorites_view()
    records = session.results

    if as_json:
        click.echo(json_module.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False))
        return

    if not records:
        console.print("[yellow]No favorites yet[/yellow]")
        console.print("[dim]Add one with 'design-archive favorite <id>'[/dim]")
        return

    console.print(_records_table(f"Favorites ({len(records)})", records, session))


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def facets(ctx: Context | None, as_json: bool) -> None:
    """List the categories, decades and regions in the catalog."""
    session = open_session(ctx)
    corpus = session.corpus
    data: dict[str, Any] = {
        "categories": corpus.list_categories(),
        "decades": corpus.list_decades(),
        "regions": corpus.list_regions(),
    }

    if as_json:
        click.echo(json_module.dumps(data, indent=2, ensure_ascii=False))
        return

    table = Table(title="Facets")
    table.add_column("Facet", style="cyan")
    table.add_column("Values", no_wrap=False)
    for name, values in data.items():
        table.add_row(name.capitalize(), ", ".join(values) or "-")
    console.print(table)


@click.command()
@click.pass_obj
def stats(ctx: Context | None) -> None:
    """Show catalog statistics."""
    session = open_session(ctx)
    numbers = session.stats

    table = Table(title="Catalog")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Designs", str(numbers["total"]))
    table.add_row("Favorites", str(numbers["favorites"]))
    table.add_row("Categories", str(len(session.corpus.list_categories())))
    table.add_row("Regions", str(len(session.corpus.list_regions())))
    console.print(table)
    if session.corpus.fallback:
        console.print("[dim]Using built-in demonstration data[/dim]")


@click.command()
@click.argument("choice", required=False, type=click.Choice(["dark", "light", "toggle"]))
@click.pass_obj
def theme(ctx: Context | None, choice: str | None) -> None:
    """Show or change the theme preference."""
    from designarchive.catalog.preferences import ThemePreference
    from designarchive.core.storage import KeyValueStore

    ctx = _context(ctx)
    settings = ctx.settings
    pref = ThemePreference(
        KeyValueStore(ctx.paths.storage),
        key=settings.theme_key,
        default=settings.default_theme,
    )
    pref.load()

    if choice == "toggle":
        pref.toggle()
    elif choice:
        pref.set(choice)

    console.print(f"Theme: [cyan]{pref.theme}[/cyan]")
