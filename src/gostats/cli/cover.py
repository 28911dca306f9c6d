"""gostats cover command - summarize a Go coverage profile."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from gostats.api import read_coverage
from gostats.config.models import GoStatsConfig
from gostats.core.errors import GoStatsError
from gostats.core.logging import get_logger
from gostats.coverage.models import Coverage
from gostats.coverage.report import build_text_summary, summarize_coverage, uncovered_functions

log = get_logger("gostats.cli.cover")


def _make_coverage_table(coverage: Coverage) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("package", style="cyan")
    table.add_column("stmts", justify="right")
    table.add_column("covered", justify="right")
    table.add_column("percent", justify="right")

    for pkg in coverage.packages:
        style = "red" if pkg.percent < 50 else "green"
        table.add_row(
            pkg.name or "(root)",
            str(pkg.stmts),
            str(pkg.covered_stmts),
            f"[{style}]{pkg.percent:.1f}%[/{style}]",
        )
    return table


@click.command()
@click.argument("profile", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--func",
    "func_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Saved `go tool cover -func` output (default: run the go tool)",
)
@click.option("--trim-prefix", default=None, help="Module path removed from package names")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--uncovered", is_flag=True, help="List exported functions with zero coverage")
@click.pass_context
def cover_command(
    ctx: click.Context,
    profile: Path,
    func_file: Path | None,
    trim_prefix: str | None,
    as_json: bool,
    uncovered: bool,
) -> None:
    """Summarize statement and function coverage.

    PROFILE is the output of `go test -coverprofile=PROFILE`.
    """
    config: GoStatsConfig = ctx.obj["config"]
    try:
        coverage = read_coverage(profile, func_file, trim_prefix=trim_prefix, config=config)
    except GoStatsError as e:
        log.debug("cover_command_failed", path=str(profile), error=e)
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(summarize_coverage(coverage), indent=2))
        return

    console = Console()
    console.print(_make_coverage_table(coverage))
    console.print()
    console.print(build_text_summary(coverage))
    if uncovered:
        for fn in uncovered_functions(coverage, include_internal=False):
            console.print(f"  [red]0.0%[/red] {fn.file}:{fn.line} {fn.name}")
