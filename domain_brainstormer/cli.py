"""CLI interface for domain brainstormer."""

import click
from dataclasses import replace
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn, TimeRemainingColumn
from typing import List, Sequence

from . import __version__
from .config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from .generators import DomainGenerator, GeneratorOptions, NoKeywordsError, GENERATOR_PRESETS
from .logging_setup import setup_logging
from .scoring import DomainScorer, DomainSuggestion
from .search import DomainSearchService, build_availability_service
from .utils import ResultCache
from .utils import exporter


console = Console()

STATUS_STYLES = {
    'available': "[green]available[/green]",
    'registered': "[red]registered[/red]",
    'unknown': "[yellow]unknown[/yellow]",
    'error': "[yellow]error[/yellow]",
}


def parse_tlds(tlds: str) -> List[str]:
    return [t.strip() for t in tlds.split(',') if t.strip()]


def make_progress() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=console
    )


def suggestions_table(suggestions: Sequence[DomainSuggestion], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Grade", justify="center")
    table.add_column("Pronounce", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Brand", justify="right")
    table.add_column("Memory", justify="right")
    table.add_column("Typing", justify="right")

    for s in suggestions:
        b = s.scoring.breakdown
        table.add_row(
            s.name, str(s.score), s.scoring.grade,
            str(b.pronounceability), str(b.length), str(b.brandability),
            str(b.memorability), str(b.typing_ease)
        )
    return table


@click.group()
@click.version_option(version=__version__)
@click.option('--config', '-c', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to YAML config')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Domain Brainstormer - Generate and check brandable domain names."""
    try:
        settings = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

    if verbose:
        settings.logging.level = "DEBUG"
    setup_logging(settings.logging, console=Console(stderr=True))
    ctx.obj = settings


@cli.command()
@click.argument('description')
@click.option('--preset', '-p', type=click.Choice(sorted(GENERATOR_PRESETS)), default='standard', help='Generation preset')
@click.option('--count', '-n', type=int, default=None, help='Maximum number of suggestions')
@click.option('--min-score', type=int, default=None, help='Minimum score threshold')
@click.option('--by-grade', is_flag=True, help='Group suggestions by grade')
@click.pass_obj
def generate(settings, description, preset, count, min_score, by_grade):
    """Generate name suggestions from a project description."""
    options = GENERATOR_PRESETS[preset]
    if preset == 'standard':
        options = GeneratorOptions(
            max_suggestions=settings.generator.max_suggestions,
            min_score=settings.generator.min_score,
        )
    overrides = {}
    if count is not None:
        overrides['max_suggestions'] = count
    if min_score is not None:
        overrides['min_score'] = min_score

    generator = DomainGenerator()

    try:
        with console.status("[bold green]Generating names..."):
            if by_grade:
                graded = generator.generate_by_grade(description, replace(options, **overrides))
            else:
                suggestions = generator.generate(description, options, **overrides)
    except NoKeywordsError as e:
        raise click.ClickException(str(e))

    if by_grade:
        for label, group in (("Premium (A)", graded.premium), ("Good (B)", graded.good),
                             ("Acceptable (C)", graded.acceptable)):
            if group:
                console.print(suggestions_table(group, label))
        console.print(f"\n[bold]Total suggestions:[/bold] {len(graded.all)}")
        return

    if not suggestions:
        console.print("[yellow]No suggestions met the minimum score.[/yellow]")
        return

    console.print(suggestions_table(suggestions, f"Suggestions for \"{description}\""))
    console.print(f"\n[bold]Total suggestions:[/bold] {len(suggestions)}")


@cli.command()
@click.argument('names', nargs=-1, required=True)
@click.option('--tlds', '-t', default=None, help='TLDs to check (comma-separated)')
@click.option('--no-cache', is_flag=True, help='Bypass the result cache')
@click.pass_obj
def check(settings, names, tlds, no_cache):
    """Check availability of NAMES under each TLD."""
    tld_list = parse_tlds(tlds) if tlds else settings.tlds
    if no_cache:
        settings.cache.enabled = False

    service = build_availability_service(settings)
    total = len(names) * len(tld_list)
    console.print(f"[bold]Checking {len(names)} names across {len(tld_list)} TLDs...[/bold]")

    with make_progress() as progress:
        task = progress.add_task("[cyan]Checking domains...", total=total)

        def update(completed, _total):
            progress.update(task, completed=completed)

        results = service.check_availability(list(names), tld_list, progress_callback=update)

    table = Table(title="Availability")
    table.add_column("Domain", style="cyan")
    table.add_column("Status")
    table.add_column("Method", style="dim")
    table.add_column("Cached", justify="center", style="dim")

    for r in results:
        table.add_row(r.domain, STATUS_STYLES.get(r.status, r.status), r.method, "yes" if r.cached else "")
    console.print(table)

    groups = service.group_by_status(results)
    console.print(
        f"\n[bold green]{len(groups['available'])} available[/bold green], "
        f"{len(groups['registered'])} registered, {len(groups['unknown'])} unknown"
    )


@cli.command()
@click.argument('description')
@click.option('--tlds', '-t', default=None, help='TLDs to check (comma-separated)')
@click.option('--quick', is_flag=True, help='Fewer names, TLDs .com/.io/.dev, lower concurrency')
@click.option('--output', '-o', default=None, help='Export results (.json, .csv or .md)')
@click.pass_obj
def search(settings, description, tlds, quick, output):
    """Full pipeline: generate names, check availability, summarise."""
    tld_list = parse_tlds(tlds) if tlds else None
    service = DomainSearchService(settings=settings)

    console.print(f"[bold]Searching domains for \"{description}\"...[/bold]\n")

    try:
        with make_progress() as progress:
            task = progress.add_task("[cyan]Checking domains...", total=None)

            def update(completed, total):
                progress.update(task, completed=completed, total=total)

            results = service.search(
                description,
                tlds=tld_list,
                preset='quick' if quick else 'standard',
                progress_callback=update,
            )
    except NoKeywordsError as e:
        raise click.ClickException(str(e))

    groups = results.grouped()

    if groups['available']:
        table = Table(title="Available Domains", header_style="bold green")
        table.add_column("Domain", style="cyan bold")
        table.add_column("Score", justify="right", style="green")
        table.add_column("Grade", justify="center")
        table.add_column("Method", style="dim")
        for r in sorted(groups['available'], key=lambda r: (-r.score, r.domain)):
            table.add_row(r.domain, str(r.score), r.suggestion.scoring.grade, r.availability.method)
        console.print(table)
    else:
        console.print("[yellow]No available domains found.[/yellow]")

    if groups['registered']:
        console.print("\n[bold red]Registered:[/bold red]")
        console.print(", ".join(r.domain for r in groups['registered']))

    if groups['unknown']:
        console.print("\n[bold yellow]Unknown:[/bold yellow]")
        console.print(", ".join(r.domain for r in groups['unknown']))

    summary = results.summary
    console.print(f"\n[bold]Summary:[/bold]")
    console.print(f"  Checked:   {summary.total_checked}")
    console.print(f"  [bold green]Available: {summary.available}[/bold green]")
    console.print(f"  Registered: {summary.registered}")
    console.print(f"  Unknown:   {summary.unknown}")
    console.print(f"  Avg score: {summary.average_score}")
    console.print(f"  Duration:  {summary.duration:.1f}s")

    if output:
        try:
            path = exporter.save(results, output)
        except ValueError as e:
            raise click.ClickException(str(e))
        console.print(f"\n[green]Results saved to {path}[/green]")


@cli.command()
@click.argument('name')
def score(name):
    """Score a single name."""
    scorer = DomainScorer()
    result = scorer.score(name)
    b = result.breakdown

    console.print(f"\n[bold]Name:[/bold] {name}")
    console.print(f"[bold green]Overall Score:[/bold green] {result.overall} ({result.grade})")
    console.print(f"\n[bold]Breakdown:[/bold]")
    console.print(f"  Pronounceability: {b.pronounceability}/100")
    console.print(f"  Length:           {b.length}/100")
    console.print(f"  Brandability:     {b.brandability}/100")
    console.print(f"  Memorability:     {b.memorability}/100")
    console.print(f"  Typing ease:      {b.typing_ease}/100")


@cli.group()
def cache():
    """Inspect or reset the availability cache."""


def _open_cache(settings) -> ResultCache:
    return ResultCache(
        cache_file=settings.cache.file,
        ttl=settings.cache.ttl,
        flush_every=settings.cache.flush_every,
    )


@cache.command()
@click.pass_obj
def stats(settings):
    """Show cache statistics."""
    s = _open_cache(settings).stats()
    console.print(f"[bold]Cache file:[/bold] {s['cache_file']}")
    console.print(f"  Entries: {s['total']}")
    console.print(f"  Valid:   {s['valid']}")
    console.print(f"  Expired: {s['expired']}")


@cache.command()
@click.pass_obj
def clear(settings):
    """Delete every cached result."""
    _open_cache(settings).clear()
    console.print("[green]Cache cleared[/green]")


@cache.command()
@click.pass_obj
def cleanup(settings):
    """Remove expired entries."""
    removed = _open_cache(settings).cleanup()
    console.print(f"[green]Removed {removed} expired entries[/green]")


def main():
    cli()


if __name__ == '__main__':
    main()
