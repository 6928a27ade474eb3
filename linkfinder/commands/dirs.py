import click
from ..decorators import handle_exceptions
from .common import toolchain_options, with_toolchain


@click.command()
@click.option("--libs", "show_libs", is_flag=True, help="Only list library search directories.")
@click.option("--includes", "show_includes", is_flag=True, help="Only list header search directories.")
@toolchain_options
@click.pass_context
@handle_exceptions
@with_toolchain
def dirs(ctx, show_libs, show_includes, toolchain, resolver_ctx, conf):
    """List the directories the toolchain searches for libraries and headers."""
    if not show_libs and not show_includes:
        show_libs = show_includes = True

    if show_libs:
        click.echo("Library search directories:")
        for directory in resolver_ctx.library_search_dirs(toolchain):
            click.echo(f"  {directory}")
    if show_includes:
        click.echo("Header search directories:")
        for directory in resolver_ctx.header_search_dirs(toolchain):
            click.echo(f"  {directory}")
