"""semgov bump - apply the version bump a plugin's changes call for."""

import logging

import click
from rich.console import Console
from rich.markup import escape

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.argument("plugin")
@click.option(
    "--staged/--no-staged",
    default=True,
    show_default=True,
    help="Include changes staged in the index",
)
@click.option("--branch", default="HEAD", show_default=True, help="Branch compared against the base")
@click.pass_obj
def bump(obj, plugin, staged, branch):
    """Classify PLUGIN's changes and bump its manifest version.

    Exits 0 when there is nothing to do or the bump was applied, and 1 when
    the manifest or the oracle's answer cannot be used.
    """
    from semgov.errors import SemgovError
    from semgov.git_ops import ComparisonScope
    from semgov.governance.result import BumpStatus

    scope = ComparisonScope(include_staged=staged, branch_ref=branch)
    console.print(f"Analyzing changes for plugin: [bold]{escape(plugin)}[/bold]")

    def show_verdict(verdict):
        console.print()
        console.print(f"Decision: [bold]{verdict.kind.value}[/bold]")
        console.print(f"Reason: {escape(verdict.reason)}")
        console.print()

    try:
        outcome = obj.orchestrator().apply(plugin, scope, on_verdict=show_verdict)
    except SemgovError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    if outcome.status is BumpStatus.NO_CHANGES:
        console.print(f"No changes detected for {escape(plugin)}")
    elif outcome.status is BumpStatus.NOT_REQUIRED:
        console.print(f"No version bump needed for {escape(plugin)}")
    else:
        console.print(
            f"[green]✓[/green] Bumped {escape(plugin)} version: "
            f"{outcome.old_version} → {outcome.new_version}"
        )
