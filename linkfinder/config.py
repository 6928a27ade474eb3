import toml
import os
from .cli_logger import logger
from .models import ToolchainDescriptor

CONFIG_FILE = "linkfinder.toml"

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.debug(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def toolchain_from_config(conf, overrides=None):
    """
    Build a ToolchainDescriptor from the ``[toolchain]`` table, letting any
    non-None value in ``overrides`` win.
    """
    table = dict(conf.get("toolchain", {}))
    for key, value in (overrides or {}).items():
        if value is not None:
            table[key] = value
    return ToolchainDescriptor.from_dict(table)
