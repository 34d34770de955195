"""semgov validate - check marketplace and plugin manifests."""

import click
from rich.console import Console
from rich.markup import escape

console = Console()


@click.command()
@click.option(
    "--local-only",
    is_flag=True,
    help="Skip the external schema validator and only run structural checks",
)
@click.pass_obj
def validate(obj, local_only):
    """Validate the marketplace manifest and every plugin manifest."""
    from semgov.plugins.discovery import discover_manifests
    from semgov.plugins.validator import ManifestValidator

    validator = ManifestValidator(obj.config.validator, local_only=local_only)
    found = discover_manifests(obj.repo_root, obj.config)

    console.print("[bold]Validating plugin manifests[/bold]")
    console.print()

    if not found["marketplace"]:
        console.print(
            f"[yellow]No marketplace manifest at "
            f"{escape(obj.config.marketplace_manifest)}[/yellow]"
        )
    results = [validator.validate_file(p, plugin=False) for p in found["marketplace"]]
    results += [validator.validate_file(p) for p in found["plugins"]]

    for result in results:
        rel = result.path.relative_to(obj.repo_root)
        if result.passed:
            console.print(f"  [green]✓[/green] {escape(str(rel))}")
        else:
            console.print(f"  [red]✗[/red] {escape(str(rel))}")
            for error in result.errors:
                console.print(f"      {escape(error)}")

    passed = sum(1 for r in results if r.passed)
    failed = len(results) - passed
    console.print()
    console.print("[bold]Summary:[/bold]")
    console.print(f"  Passed: [green]{passed}[/green]")
    console.print(f"  Failed: [red]{failed}[/red]")

    if failed:
        raise SystemExit(1)
