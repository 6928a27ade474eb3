import click
from .commands import check, config, dirs, log, mangle, resolve, version


@click.group()
@click.option("--path", "-p", default=".", help="Project directory (override descriptors, linkfinder.toml).")
@click.pass_context
def cli(ctx, path):
    """linkfinder: find native libraries and how to link them."""
    ctx.ensure_object(dict)
    ctx.obj["path"] = path

cli.add_command(resolve)
cli.add_command(check)
cli.add_command(dirs)
cli.add_command(mangle)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
