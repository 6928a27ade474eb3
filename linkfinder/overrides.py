import os
import toml

from .cli_logger import logger
from .errors import OverrideInvalid
from .models import LinkSpec


def override_file_name(environ, env_var, default_name):
    """Name from ``env_var`` if set, else the conventional ``default_name``."""
    return environ.get(env_var) or default_name


def find_override(ctx, env_var, default_name):
    """
    Path of the override descriptor for one library family, or None.

    The file may legitimately be missing; only an existing regular file
    counts. Relative names are resolved against the context root.
    """
    name = override_file_name(ctx.environ, env_var, default_name)
    path = os.path.join(ctx.root, name)
    if os.path.isfile(path):
        return path
    return None


def load_override(path, logical_name):
    """
    Turn an override descriptor into a LinkSpec.

    The descriptor is TOML; every key is optional::

        link_tokens = ["ssl", "crypto"]
        search_paths = ["/opt/openssl/lib"]
        include_paths = ["/opt/openssl/include"]

        [defines]
        OPENSSL_API_COMPAT = "0x10100000L"
        MY_FLAG = ""
    """
    try:
        with open(path, "r") as f:
            data = toml.load(f)
    except toml.TomlDecodeError as e:
        raise OverrideInvalid(path, e)
    except OSError as e:
        raise OverrideInvalid(path, e.strerror or str(e))

    defines = {}
    for key, value in data.get("defines", {}).items():
        defines[key] = None if value in ("", None) else str(value)

    logger.info(f"Using override descriptor {path} for {logical_name}")
    return LinkSpec(
        logical_name=logical_name,
        link_tokens=[str(t) for t in data.get("link_tokens", [])],
        extra_search_paths=[str(p) for p in data.get("search_paths", [])],
        include_paths=[str(p) for p in data.get("include_paths", [])],
        defines=defines,
        override=path,
    )
