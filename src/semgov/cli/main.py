"""semgov CLI - Main entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from semgov.utils.versioning import get_semgov_version

from .context import GovernanceContext

console = Console()

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr; user-facing output goes through rich."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@click.group()
@click.version_option(version=get_semgov_version(), prog_name="semgov")
@click.option(
    "--repo",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Root of the plugin repository",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: semgov.yaml in the repository root)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.pass_context
def cli(ctx, repo, config_path, verbose):
    """semgov - semantic version governance for plugin repositories.

    Detects changed plugins, asks an oracle how severe each change is, and
    bumps or verifies plugin manifest versions accordingly.
    """
    from semgov.config.loader import ConfigError, resolve_config

    _setup_logging(verbose)
    try:
        config = resolve_config(repo, config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise SystemExit(1) from e
    ctx.obj = GovernanceContext(repo_root=repo, config=config)


from .bump_commands import bump  # noqa: E402
from .changed_commands import changed  # noqa: E402
from .check_commands import check, requires_bump  # noqa: E402
from .manifest_commands import validate  # noqa: E402

cli.add_command(bump)
cli.add_command(check)
cli.add_command(changed)
cli.add_command(requires_bump)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
