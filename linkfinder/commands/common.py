import functools
import click
from .. import config as config_module
from ..context import ResolverContext

TOOLCHAIN_OPTION_KEYS = (
    "compiler", "compiler_version", "target_os", "bits",
    "runtime_linkage", "runtime_mode", "compiler_command",
)


def toolchain_options(func):
    """Attach the toolchain description options to a command."""
    options = [
        click.option("--compiler", type=click.Choice(["vc", "gcc", "clang"]), default=None,
                     help="Compiler family (default: [toolchain] compiler, else gcc)."),
        click.option("--compiler-version", default=None,
                     help="Compiler version tag, e.g. 15 for MSVC 2017."),
        click.option("--target-os", type=click.Choice(["windows", "posix"]), default=None,
                     help="Target operating system."),
        click.option("--bits", type=click.Choice(["32", "64"]), default=None,
                     help="Target architecture width."),
        click.option("--runtime-linkage", type=click.Choice(["static", "shared"]), default=None,
                     help="C/C++ runtime linkage."),
        click.option("--runtime-mode", type=click.Choice(["release", "debug"]), default=None,
                     help="Runtime mode."),
        click.option("--compiler-command", default=None,
                     help="Compiler binary used for introspection."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def pop_toolchain(ctx, kwargs):
    """
    Remove the toolchain options from ``kwargs`` and return
    (ToolchainDescriptor, ResolverContext, config dict).
    """
    path = ctx.obj["path"]
    overrides = {key: kwargs.pop(key, None) for key in TOOLCHAIN_OPTION_KEYS}
    conf = config_module.load_config(path=path)
    toolchain = config_module.toolchain_from_config(conf, overrides)
    resolver_ctx = ctx.obj.get("resolver_context") or ResolverContext(root=path)
    return toolchain, resolver_ctx, conf


def with_toolchain(func):
    """Replace the raw toolchain options by ready-made objects."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        toolchain, resolver_ctx, conf = pop_toolchain(ctx, kwargs)
        return func(*args, toolchain=toolchain, resolver_ctx=resolver_ctx, conf=conf, **kwargs)
    return wrapper
