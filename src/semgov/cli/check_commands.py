"""Compliance gates: check changed plugins, or a single diff from stdin."""

import logging

import click
from rich.console import Console
from rich.markup import escape

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.option("--staged", is_flag=True, help="Include changes staged in the index")
@click.option("--branch", default="HEAD", show_default=True, help="Branch compared against the base")
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Plugins classified concurrently",
)
@click.pass_obj
def check(obj, staged, branch, jobs):
    """Fail if any changed plugin needs a version update."""
    from semgov.git_ops import ComparisonScope

    scope = ComparisonScope(include_staged=staged, branch_ref=branch)
    report = obj.orchestrator().check(scope, max_workers=jobs)

    if not report.checked:
        console.print("No changed plugins.")
        return

    if report.passed:
        console.print(
            f"[green]All {len(report.checked)} changed plugin(s) are compliant.[/green]"
        )
        return

    console.print("[yellow]⚠️  Plugin version updates required:[/yellow]")
    for plugin in report.non_compliant:
        console.print(
            f"   - {escape(plugin)} ({escape(report.manifest_paths[plugin])})",
            soft_wrap=True,
        )
    raise SystemExit(1)


@click.command("requires-bump")
@click.pass_obj
def requires_bump(obj):
    """Read a diff from stdin and print YES if it requires a version update.

    Exits 1 when an update is required so the command can gate commits.
    """
    diff = click.get_text_stream("stdin").read()
    if not diff.strip():
        click.echo("No diff provided", err=True)
        return

    needed = obj.classifier().classify_required(diff)
    click.echo("YES" if needed else "NO")
    if needed:
        raise SystemExit(1)
