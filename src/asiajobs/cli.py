"""Typer CLI entry point for asiajobs."""

import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from asiajobs.config import load_config
from asiajobs.models import Job, SortOrder

app = typer.Typer(
    name="asiajobs",
    help="asiajobs — Asia education job aggregator",
    no_args_is_help=True,
)
console = Console()


def _get_config():
    return load_config(Path("config.yaml"))


def _load_jobs() -> list[Job]:
    from asiajobs.collector.refresh import load_corpus

    return load_corpus(_get_config().corpus_path)


def _fmt_date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else "—"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for every command."""
    level = "DEBUG" if verbose else _get_config().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def refresh(
    no_live: bool = typer.Option(False, "--no-live", help="Skip the live endpoint for this run"),
):
    """Load snapshots and live jobs, normalize and merge them into the corpus."""
    from asiajobs.collector.refresh import run_refresh

    config = _get_config()
    if no_live:
        config.live.enabled = False

    console.print("[bold]Refreshing jobs...[/bold]")
    result = run_refresh(config)

    for name, count in result.fetched.items():
        kept = result.normalized.get(name, 0)
        console.print(f"  {name}: [bold]{count}[/bold] fetched, {kept} usable")
    for name, err in result.errors.items():
        console.print(f"  [yellow]{name} failed:[/yellow] {err}")

    console.print(
        f"\n[bold green]Done![/bold green] {len(result.jobs)} jobs in corpus, {result.new_count} new. "
        f"Saved to {config.corpus_path}"
    )


@app.command()
def jobs(
    search: str | None = typer.Option(None, "--search", "-q", help="Free-text search"),
    country: str | None = typer.Option(None, "--country", "-c", help="Exact country label"),
    category: str | None = typer.Option(None, "--category", "-k", help="Exact category label"),
    sort: SortOrder = typer.Option(SortOrder.DATE_DESC, "--sort", "-s", help="Sort order"),
    limit: int = typer.Option(50, "--limit", "-n", help="Max results"),
):
    """List jobs in the corpus."""
    from asiajobs.listing import filter_jobs

    job_list = filter_jobs(_load_jobs(), search=search, country=country, category=category, sort=sort)
    if not job_list:
        console.print("[yellow]No jobs found.[/yellow]")
        return

    shown = job_list[:limit]
    table = Table(title=f"Jobs ({len(shown)} of {len(job_list)})")
    table.add_column("Posted", width=10)
    table.add_column("Title", style="bold", max_width=40)
    table.add_column("School", max_width=25)
    table.add_column("Country", max_width=20)
    table.add_column("Category", max_width=25)

    for job in shown:
        table.add_row(
            _fmt_date(job.posting_date),
            job.title or "Untitled role",
            job.school,
            job.country or Text("—", style="dim"),
            job.category or Text("—", style="dim"),
        )

    console.print(table)


@app.command()
def show(
    key: str = typer.Argument(help="Identity key (URL) or a prefix of it"),
):
    """Show full details of one job."""
    all_jobs = _load_jobs()
    job = next((j for j in all_jobs if j.identity_key == key), None)
    if job is None:
        matches = [j for j in all_jobs if j.identity_key.startswith(key)]
        if len(matches) == 1:
            job = matches[0]
        elif len(matches) > 1:
            console.print(f"[yellow]Multiple matches for '{key}':[/yellow]")
            for m in matches[:5]:
                console.print(f"  {m.identity_key}  {m.title}")
            raise typer.Exit(1)
        else:
            console.print(f"[red]Job not found: {key}[/red]")
            raise typer.Exit(1)

    meta = " · ".join(p for p in (job.school, job.display_location) if p)
    panel_content = (
        f"[bold]{job.title or 'Untitled role'}[/bold]\n"
        + (f"{meta}\n" if meta else "")
        + f"Country: {job.country or '—'}\n"
        f"Category: {job.category or '—'}\n"
        f"Level: {job.experience_level or '—'}\n"
        f"Posted: {_fmt_date(job.posting_date)}\n"
        f"Deadline: {_fmt_date(job.application_deadline)}\n"
        f"View: {job.view_url or '—'}\n"
        f"Apply: {job.apply_url or job.original_url or '—'}\n"
    )
    console.print(Panel(panel_content, title="Job", expand=False))
    console.print(f"\n[bold]Description:[/bold]\n{job.description or 'No description provided.'}")


@app.command()
def filters():
    """Show curated countries and categories, plus extras seen in the data."""
    from asiajobs.taxonomy import build_filter_options

    options = build_filter_options(_load_jobs())

    for title, groups, extras in (
        ("Countries", options.country_groups, options.country_extras),
        ("Categories", options.category_groups, options.category_extras),
    ):
        table = Table(title=title, show_lines=True)
        table.add_column("Group", style="bold")
        table.add_column("Values")
        for group in groups:
            table.add_row(group.label, ", ".join(group.items))
        if extras:
            table.add_row(Text("Other (from data)", style="yellow"), ", ".join(extras))
        console.print(table)


@app.command()
def classify(
    text: str = typer.Argument(help="A job title or free text to classify"),
    url: str = typer.Option("", "--url", "-u", help="Posting URL for domain hints"),
):
    """Classify a title/free text by country and category."""
    from asiajobs.classifier.category import classify_category
    from asiajobs.classifier.country import classify_country

    country = classify_country({"title": text, "original_url": url})
    category = classify_category(text)
    console.print(f"Country:  {country or '[dim]unknown[/dim]'}")
    console.print(f"Category: {category or '[dim]unknown[/dim]'}")


@app.command()
def watch(
    hours: float | None = typer.Option(None, "--hours", help="Refresh interval (default: from config)"),
):
    """Refresh now, then keep refreshing on a fixed interval."""
    from asiajobs.scheduler.scheduler import get_next_run_time, refresh_task, start_scheduler, stop_scheduler

    config = _get_config()
    if hours is not None:
        config.scheduler.interval_hours = hours

    console.print(f"[bold]Watching[/bold]: refresh every {config.scheduler.interval_hours} hours (Ctrl+C to stop)")
    refresh_task(config)
    scheduler = start_scheduler(config)
    try:
        next_run = get_next_run_time(scheduler)
        if next_run:
            console.print(f"Next refresh at {next_run:%Y-%m-%d %H:%M}")
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")
    finally:
        stop_scheduler(scheduler)


@app.command()
def config_cmd():
    """Show current configuration."""
    config = _get_config()
    console.print(Panel(str(config.model_dump_json(indent=2)), title="Configuration"))


if __name__ == "__main__":
    app()
