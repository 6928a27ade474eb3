import click
from ..decorators import handle_exceptions
from ..mangler import mangle as mangle_name
from ..models import VersionTriple
from .common import toolchain_options, with_toolchain


def parse_version(text):
    """Accept an encoded integer (106600) or a dotted version (1.66.0)."""
    if text.isdigit():
        return VersionTriple.decode(int(text))
    return VersionTriple.from_string(text)


@click.command()
@click.argument("name")
@click.option("--version", "version_text", required=True,
              help="Library version, encoded (106600) or dotted (1.66.0).")
@click.option("--variant", type=click.Choice(["static", "shared"]), default=None,
              help="How the library itself is requested.")
@toolchain_options
@click.pass_context
@handle_exceptions
@with_toolchain
def mangle(ctx, name, version_text, variant, toolchain, resolver_ctx, conf):
    """Print the decorated file name of a versioned library, e.g. boost_system."""
    version = parse_version(version_text)
    click.echo(mangle_name(name, toolchain, version, resolver_ctx.introspector, variant=variant))
