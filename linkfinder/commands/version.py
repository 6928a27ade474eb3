import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of linkfinder."""
    try:
        ver = importlib.metadata.version("linkfinder")
        logger.info(f"linkfinder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of linkfinder. Is it installed correctly?")
