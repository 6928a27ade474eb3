import click
import json
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..resolvers import FAMILIES, get_resolver, min_version_from_string
from .common import toolchain_options, with_toolchain


def resolver_from_config(family, conf, components=()):
    """Resolver for ``family`` honouring the ``[boost]`` config table."""
    if family != "boost":
        return get_resolver(family)
    boost_conf = conf.get("boost", {})
    components = list(components) or list(boost_conf.get("components", []))
    min_version = boost_conf.get("min_version")
    if min_version is not None:
        min_version = min_version_from_string(str(min_version))
    return get_resolver("boost", components=components, min_version=min_version)


def format_link_spec(spec):
    lines = [f"{spec.logical_name}:"]
    if spec.override:
        lines.append(f"  override: {spec.override}")
    if spec.bundled:
        lines.append(f"  bundled project: {spec.bundled}")
    lines.append(f"  link tokens: {' '.join(spec.link_tokens) if spec.link_tokens else '(none)'}")
    if spec.link_mode:
        lines.append(f"  link mode: {spec.link_mode}")
    for path in spec.extra_search_paths:
        lines.append(f"  library path: {path}")
    for path in spec.include_paths:
        lines.append(f"  include path: {path}")
    for name, value in spec.defines.items():
        lines.append(f"  define: {name}" + (f"={value}" if value is not None else ""))
    return "\n".join(lines)


@click.command()
@click.argument("family", type=click.Choice(FAMILIES))
@click.option("--component", "-c", "components", multiple=True,
              help="Boost library to link, e.g. -c system -c regex.")
@click.option("--best-effort", is_flag=True,
              help="Pass unconfirmed plain library names through instead of failing.")
@click.option("--json", "as_json", is_flag=True, help="Print the link specification as JSON.")
@toolchain_options
@click.pass_context
@handle_exceptions
@with_toolchain
def resolve(ctx, family, components, best_effort, as_json, toolchain, resolver_ctx, conf):
    """Resolve how to link one library family for the configured toolchain."""
    resolver = resolver_from_config(family, conf, components)
    logger.debug(f"Resolving {family} for {toolchain}")
    spec = resolver.resolve(toolchain, resolver_ctx, best_effort=best_effort)
    if as_json:
        click.echo(json.dumps(spec.to_dict(), indent=4))
    else:
        click.echo(format_link_spec(spec))
