import click
import json
import os
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..models import ToolchainDescriptor
from ..resolvers import min_version_from_string

TOOLCHAIN_KEYS = (
    "compiler", "compiler_version", "target_os", "bits",
    "runtime_linkage", "runtime_mode", "compiler_command",
)


def split_key(key):
    parts = key.split('.')
    if not all(parts):
        raise ValueError(f"malformed key '{key}'")
    return parts


def coerce_value(conf, parts, value):
    """
    Check a value against the table it lands in and return it in the type
    that table stores. ``[toolchain]`` must still describe a valid toolchain
    after the change; ``[boost]`` holds a component list and a dotted version.
    """
    table, name = parts[0], parts[-1]
    if table == "toolchain":
        if len(parts) != 2 or name not in TOOLCHAIN_KEYS:
            raise ValueError(f"unknown toolchain key '{name}' (expected one of {', '.join(TOOLCHAIN_KEYS)})")
        if name == "bits":
            value = int(value) if value.isdigit() else value
        candidate = dict(conf.get("toolchain", {}))
        candidate[name] = value
        ToolchainDescriptor.from_dict(candidate)
    elif table == "boost" and len(parts) == 2:
        if name == "components":
            value = [c.strip() for c in value.split(",") if c.strip()]
        elif name == "min_version":
            min_version_from_string(value)
    return value


@click.group()
@click.pass_context
def config(ctx):
    """View or change the linkfinder.toml project configuration."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Print linkfinder.toml as it is on disk."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not os.path.isfile(config_file_path):
        logger.error("Error: No linkfinder.toml found. Create one with 'linkfinder config set toolchain.compiler gcc'.")
        return
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_file_path}: {e}")

@config.command(name="list")
@click.pass_context
def list_values(ctx):
    """Print the parsed configuration as JSON."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No linkfinder.toml found.")
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
@handle_exceptions
def get(ctx, key):
    """Print one dotted key, e.g. toolchain.compiler."""
    value = config_module.load_config(path=ctx.obj["path"])
    try:
        for part in split_key(key):
            value = value[part]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in linkfinder.toml")
        return
    click.echo(json.dumps(value) if isinstance(value, (list, dict)) else value)

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
@handle_exceptions
def set_value(ctx, key, value):
    """
    Set one dotted key, creating linkfinder.toml if needed.

    Toolchain keys are validated before anything is written; boost.components
    takes a comma separated list.
    """
    conf = config_module.load_config(path=ctx.obj["path"])
    parts = split_key(key)
    stored = coerce_value(conf, parts, value)

    table = conf
    for part in parts[:-1]:
        table = table.setdefault(part, {})
        if not isinstance(table, dict):
            raise ValueError(f"'{part}' in '{key}' is not a table")
    table[parts[-1]] = stored

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.success(f"{key} = {stored!r}")

@config.command()
@click.argument('key')
@click.pass_context
@handle_exceptions
def unset(ctx, key):
    """Remove one dotted key from linkfinder.toml."""
    conf = config_module.load_config(path=ctx.obj["path"])
    parts = split_key(key)
    table = conf
    try:
        for part in parts[:-1]:
            table = table[part]
        del table[parts[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in linkfinder.toml")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.success(f"Removed {key}")
