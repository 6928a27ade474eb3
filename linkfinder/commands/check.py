import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..resolvers import FAMILIES
from .common import toolchain_options, with_toolchain
from .resolve import resolver_from_config


@click.command()
@toolchain_options
@click.pass_context
@handle_exceptions
@with_toolchain
def check(ctx, toolchain, resolver_ctx, conf):
    """Report which library families can be found for the configured toolchain."""
    logger.info(f"Checking libraries for {toolchain.compiler_command} "
                f"({toolchain.compiler_family.value}, {toolchain.target_os.value}, "
                f"x{toolchain.architecture_bits})...")
    missing = []
    for family in FAMILIES:
        resolver = resolver_from_config(family, conf)
        if resolver.is_available(toolchain, resolver_ctx):
            logger.success(f"{family}: available")
        else:
            logger.warning(f"{family}: not found")
            missing.append(family)

    if not missing:
        logger.success("All library families are available.")
    else:
        logger.info("Missing families can be supplied with an override descriptor, "
                    "e.g. local-openssl.toml in the project directory.")
