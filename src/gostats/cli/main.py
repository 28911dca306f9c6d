"""gostats CLI - `gostats` command."""

from pathlib import Path

import click

from gostats import __version__
from gostats.cli.cover import cover_command
from gostats.cli.tests import tests_command
from gostats.config.loader import load_config
from gostats.core.errors import ConfigError
from gostats.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="gostats")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory containing .gostats.yaml (default: current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_dir: Path | None) -> None:
    """gostats - statistics for `go test -json` output and coverage profiles."""
    try:
        config = load_config(config_dir)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    set_run_id()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(tests_command, name="tests")
cli.add_command(cover_command, name="cover")


if __name__ == "__main__":
    cli()
