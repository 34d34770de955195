"""semgov changed - list changed plugins or print one plugin's diff."""

import click


@click.command()
@click.argument("plugin", required=False)
@click.option("--staged", is_flag=True, help="Include changes staged in the index")
@click.option("--branch", default="HEAD", show_default=True, help="Branch compared against the base")
@click.pass_obj
def changed(obj, plugin, staged, branch):
    """List plugins changed relative to the base branch.

    With PLUGIN, print that plugin's diff instead; exits 1 if it has no
    changes in scope.
    """
    from semgov.git_ops import ComparisonScope

    scope = ComparisonScope(include_staged=staged, branch_ref=branch)
    plugins = obj.change_locator().list_changed_plugins(scope)

    if plugin is None:
        for name in sorted(plugins):
            click.echo(name)
        return

    if plugin not in plugins:
        raise SystemExit(1)

    diff = obj.diff_source().get_diff(plugin, scope, refresh=False)
    if not diff:
        raise SystemExit(1)
    click.echo(diff)
