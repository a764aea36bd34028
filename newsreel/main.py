#!/usr/bin/env python3
"""
Main CLI entry point for newsreel
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from newsreel import __version__
from newsreel.config.constants import DEFAULT_TOPIC, SEARCH_NEWS_TIME_DELAY
from newsreel.config.settings import (
    get_api_key,
    get_env_info,
    get_env_var,
    validate_all_env_vars,
)
from newsreel.exceptions import NewsreelError
from newsreel.services.news_service import NewsService

app = typer.Typer(help="newsreel - browse and search news from the terminal")
console = Console()


def _build_service(api_key: Optional[str], base_url: Optional[str]) -> NewsService:
    return NewsService(
        api_key=get_api_key(api_key),
        base_url=base_url or get_env_var("NEWSREEL_BASE_URL"),
    )


@app.command()
def browse(
    api_key: Optional[str] = typer.Option(
        None, "--api-key", envvar="NEWSREEL_API_KEY", help="NewsAPI key"
    ),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL"),
    delay: float = typer.Option(
        SEARCH_NEWS_TIME_DELAY, "--delay", help="Search debounce delay in seconds"
    ),
):
    """Open the interactive news browser."""
    from newsreel.ui.news_app import NewsApp
    from newsreel.utils.logging_utils import setup_tui_logging

    try:
        service = _build_service(api_key, base_url)
        setup_tui_logging(get_env_var("NEWSREEL_LOG_LEVEL") or "INFO")
    except NewsreelError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    try:
        NewsApp(service, search_delay=delay).run()
    except KeyboardInterrupt:
        pass


@app.command()
def fetch(
    query: str = typer.Argument(DEFAULT_TOPIC, help="Topic or search terms"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", envvar="NEWSREEL_API_KEY", help="NewsAPI key"
    ),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL"),
):
    """Fetch one page of articles and print it."""
    try:
        with _build_service(api_key, base_url) as service:
            news = service.fetch_articles(query, page)
    except NewsreelError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if as_json:
        print(
            json.dumps(
                {
                    "totalResults": news.total_results,
                    "articles": [a.to_dict() for a in news.articles],
                },
                indent=2,
            )
        )
        return

    if not news.articles:
        console.print("[yellow]No articles found[/yellow]")
        return

    table = Table(title=f"{query} - page {page} ({news.total_results} results)")
    table.add_column("Published", style="yellow", no_wrap=True)
    table.add_column("Source", style="cyan")
    table.add_column("Title", style="magenta")
    for article in news.articles:
        published = article.published_at.strftime("%Y-%m-%d %H:%M") if article.published_at else ""
        title = article.title[:80] + "..." if len(article.title) > 80 else article.title
        table.add_row(published, article.source.name, title)
    console.print(table)


@app.command()
def config():
    """Show newsreel environment variables."""
    table = Table(title="newsreel environment")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description")

    for name, info in get_env_info().items():
        value = info["value"] if info["is_set"] else "[dim]unset[/dim]"
        if not info["valid"]:
            value = f"[red]{value}[/red]"
        table.add_row(name, value, str(info["default"] or ""), info["description"])
    console.print(table)

    errors = validate_all_env_vars()
    for error in errors:
        console.print(f"[red]✗[/red] {error}")
    if errors:
        raise typer.Exit(1)


@app.command()
def version():
    """Show newsreel version"""
    typer.echo(f"newsreel version {__version__}")


def run():
    """Run the CLI application"""
    app()


if __name__ == "__main__":
    run()
