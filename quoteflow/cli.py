# quoteflow/cli.py
"""
CLI interface for quoteflow.

Thin presentation layer over the tools/ service layer. Every invocation is a
fresh in-memory session; nothing is kept between commands.
"""

import asyncio
import time

import typer

app = typer.Typer(
    name="quoteflow",
    help="Motivational quote studio: generate quotes and run bulk-creation batches.",
    no_args_is_help=True,
)


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _load_config():
    from quoteflow.config.loader import load_config

    return load_config()


def _cli_logging(verbose: bool) -> None:
    """Human-readable stderr logging for CLI mode (warnings only unless verbose)."""
    import logging

    from quoteflow.logging_config import configure_logging

    configure_logging(json_output=False, level=logging.INFO if verbose else logging.WARNING)


def _fmt_duration(seconds: float) -> str:
    """Format seconds as human-readable duration (e.g. '1m05s', '9s')."""
    s = int(seconds)
    if s < 60:
        return f"{s}s"
    m, s = divmod(s, 60)
    return f"{m}m{s:02d}s"


# (display name, stage name, progress at which the stage is done)
_DISPLAY_STAGES = [
    ("Generating quotes", "quote_generation", 25),
    ("Creating voice overs", "narration", 50),
    ("Adding background music", "music", 75),
    ("Organizing files", "file_organization", 100),
]


def _make_live_display(name: str, progress: int, elapsed: float, status: str = "pending"):
    """Build a rich renderable for the live batch progress display."""
    from rich.console import Group
    from rich.panel import Panel
    from rich.table import Table
    from rich.text import Text

    table = Table.grid(padding=(0, 2))
    table.add_column(width=3)
    table.add_column()

    prev_threshold = 0
    for label, _, threshold in _DISPLAY_STAGES:
        if progress >= threshold:
            icon, style = Text("✓", style="green"), "dim"
        elif progress >= prev_threshold and status == "processing":
            icon, style = Text("⟳", style="yellow"), "bold"
        else:
            icon, style = Text("○", style="dim"), "dim"
        table.add_row(icon, Text(label, style=style))
        prev_threshold = threshold

    bar_width = 36
    filled = progress * bar_width // 100
    bar = "█" * filled + "░" * (bar_width - filled)
    bar_text = Text(f"\n  {bar}  {progress}%  {_fmt_duration(elapsed)}\n", style="cyan")

    return Panel(
        Group(table, bar_text),
        title=Text(f" {name[:60]} ", style="bold"),
        border_style="bright_black",
    )


def _print_quotes(quotes: list[dict]) -> None:
    for q in quotes:
        typer.echo(f"{q['id']}  [{q['category']}]  \"{q['text']}\" - {q['author']}")


@app.command()
def generate(
    count: int = typer.Option(5, "--count", "-n", help="Number of quotes (1-100)"),
    category: str = typer.Option("all", "--category", "-c", help="Category, or 'all'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show info logs"),
):
    """Generate quotes from the corpus and print them."""
    from fastmcp.exceptions import ToolError

    from quoteflow.background.lifecycle import create_quote_store
    from quoteflow.tools.quotes import generate_quotes

    _cli_logging(verbose)
    config = _load_config()
    store = create_quote_store(config)

    try:
        result = _run(generate_quotes(count, category, quotes=store, config=config))
    except ToolError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    _print_quotes(result["quotes"])


async def _run_inline(job_id: str, worker, batches, quotes) -> None:
    """Run a batch inline with live rich progress display, then print its quotes."""
    from rich.console import Console
    from rich.live import Live

    console = Console(stderr=True)
    start = time.monotonic()
    job = await batches.get(job_id)

    job_task = asyncio.create_task(worker.run_job_direct(job_id))

    try:
        with Live(
            _make_live_display(job.name, 0, 0.0),
            console=console,
            refresh_per_second=4,
        ) as live:
            while not job_task.done():
                live.update(
                    _make_live_display(
                        job.name, job.progress, time.monotonic() - start, job.status.value
                    )
                )
                await asyncio.sleep(0.1)

            live.update(
                _make_live_display(job.name, job.progress, time.monotonic() - start, job.status.value)
            )

    except (KeyboardInterrupt, asyncio.CancelledError):
        job_task.cancel()
        try:
            await job_task
        except asyncio.CancelledError:
            pass
        raise KeyboardInterrupt

    elapsed = time.monotonic() - start
    console.print()
    if job_task.exception() is not None:
        console.print(f"[red]✗ Failed[/red]: {job.error or 'unknown error'}")
        raise typer.Exit(1)

    console.print(
        f"[green]✓ Done[/green]  {len(job.quote_ids)} quotes  time: {_fmt_duration(elapsed)}"
    )
    if job.quote_ids:
        library = quotes.get_media_asset(job.quote_ids[0]).download_folder
        console.print(f"[dim]Library:[/dim] {library}/")
    console.print()

    for quote_id in job.quote_ids:
        quote = quotes.get_quote(quote_id)
        asset = quotes.get_media_asset(quote_id)
        typer.echo(f"{quote.id}  \"{quote.text}\" - {quote.author}  -> {asset.video_url}")


@app.command()
def batch(
    name: str = typer.Argument(..., help="Batch name (also the library folder name)"),
    batch_type: str = typer.Option("complete", "--type", "-t", help="complete, quotes-only, voice-only or music-only"),
    count: int = typer.Option(10, "--count", "-n", help="Number of quotes (1-100)"),
    category: str = typer.Option("all", "--category", "-c", help="Category, or 'all'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show info logs"),
):
    """Run a bulk-creation batch with live progress and print the resulting quotes."""
    from fastmcp.exceptions import ToolError

    from quoteflow.background.lifecycle import create_quote_store
    from quoteflow.background.worker import BatchWorker
    from quoteflow.models.jobs import InMemoryBatchStore
    from quoteflow.tools.create_batch import create_batch

    _cli_logging(verbose)
    config = _load_config()

    async def _batch():
        quotes = create_quote_store(config)
        batches = InMemoryBatchStore()
        worker = BatchWorker(batches, quotes, config=config)

        result = await create_batch(name, batch_type, count, category, store=batches, config=config)
        await _run_inline(result["job_id"], worker, batches, quotes)

    try:
        _run(_batch())
    except ToolError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except KeyboardInterrupt:
        typer.echo("\nCancelled.", err=True)
        raise typer.Exit(130)


@app.command()
def categories():
    """List quote categories with the number of corpus templates in each."""
    from quoteflow.catalog import CATEGORIES, templates_for

    typer.echo(f"{'CATEGORY':<14} TEMPLATES")
    typer.echo("-" * 24)
    for category in CATEGORIES:
        typer.echo(f"{category:<14} {len(templates_for(category))}")


@app.command()
def serve():
    """Start the MCP server (stdio transport)."""
    from quoteflow.__main__ import main

    try:
        _run(main())
    except KeyboardInterrupt:
        pass
