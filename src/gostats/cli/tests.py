"""gostats tests command - summarize `go test -json` output."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from gostats.api import read_tests
from gostats.core.errors import GoStatsError
from gostats.core.logging import get_logger
from gostats.runs.models import TestRun
from gostats.runs.report import collect_failures, summarize_test_run

log = get_logger("gostats.cli.tests")


def _make_packages_table(run: TestRun) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("package", style="cyan")
    table.add_column("tests", justify="right")
    table.add_column("result")
    table.add_column("time", justify="right")
    table.add_column("seed", style="dim", justify="right")

    for pkg in run.packages:
        result = "[red]FAIL[/red]" if pkg.failed else "[green]ok[/green]"
        seed = str(pkg.seed) if pkg.seed else ""
        table.add_row(
            pkg.name,
            str(pkg.count()),
            result,
            f"{pkg.duration.total_seconds():.3f}s",
            seed,
        )
    return table


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--failures", is_flag=True, help="List every failed test and subtest")
@click.pass_context
def tests_command(ctx: click.Context, file: Path, as_json: bool, failures: bool) -> None:
    """Summarize a `go test -json` log.

    FILE is the saved output of `go test -json ./...`. Exits with status 1
    when any package failed.
    """
    try:
        run = read_tests(file)
    except GoStatsError as e:
        log.debug("tests_command_failed", path=str(file), error=e)
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(summarize_test_run(run), indent=2))
    else:
        console = Console()
        console.print(_make_packages_table(run))
        console.print()
        status = "[red]FAIL[/red]" if run.failed else "[green]PASS[/green]"
        console.print(
            f"{status} {run.count()} tests in {len(run.packages)} packages "
            f"({run.duration.total_seconds():.3f}s)"
        )
        if failures:
            for pkg in run.packages:
                for test in collect_failures(pkg.tests):
                    console.print(f"  [red]✗[/red] {pkg.name} {test.full_name}")

    if run.failed:
        ctx.exit(1)
