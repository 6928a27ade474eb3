import os

from ..cli_logger import logger
from ..errors import FileUnreadable, VersionTooLow
from ..families import SHARED_VARIANT, STATIC_VARIANT, MsvcRules, rules_for
from ..mangler import mangle, needs_decoration
from ..models import LinkSpec, VersionTriple
from ..utils import file_exists
from ..version_header import decode_version, read_version_macro
from .base import BaseResolver

VERSION_HEADER = os.path.join("boost", "version.hpp")
VERSION_MACRO = "BOOST_VERSION"
MIN_VERSION = 106600
ROOT_ENV_VARS = ("BOOST_ROOT", "BOOSTROOT")
USE_BOOST_ASIO_ENV = "LINKFINDER_USE_BOOST_ASIO"


def detect_boost_root(ctx):
    """Boost root from BOOST_ROOT or BOOSTROOT; None when neither is set."""
    for name in ROOT_ENV_VARS:
        value = ctx.getenv(name)
        if value:
            return value
    return None


def boost_link_variant(ctx):
    """
    How compiled Boost libraries are requested: None when
    LINKFINDER_USE_BOOST_ASIO is unset, else "shared" or "static".
    """
    if USE_BOOST_ASIO_ENV not in ctx.environ:
        return None
    if ctx.environ[USE_BOOST_ASIO_ENV] == SHARED_VARIANT:
        return SHARED_VARIANT
    return STATIC_VARIANT


class BoostResolver(BaseResolver):
    """
    Boost, located through BOOST_ROOT or the compiler's include path and
    checked against a minimum BOOST_VERSION.

    ``components`` are compiled Boost libraries to link (``"system"`` gives
    ``boost_system``); header-only use passes none.
    """

    logical_name = "boost"
    override_env = "BOOST_PRJ_FILE"
    override_default = "local-boost.toml"

    def __init__(self, components=(), min_version=MIN_VERSION):
        self.components = list(components)
        self.min_version = min_version

    def detect_version(self, toolchain, ctx):
        """
        Returns (VersionTriple, encoded value, directory holding ``boost/``).
        """
        root = detect_boost_root(ctx)
        return ctx.memoize_version(
            ("boost", toolchain, root),
            lambda: self._read_version(toolchain, ctx, root),
        )

    def _read_version(self, toolchain, ctx, root):
        if root:
            value = read_version_macro(os.path.join(root, VERSION_HEADER), VERSION_MACRO)
            return decode_version(value), value, root

        include_dirs = ctx.header_search_dirs(toolchain)
        for directory in include_dirs:
            if file_exists(directory, VERSION_HEADER):
                value = read_version_macro(os.path.join(directory, VERSION_HEADER), VERSION_MACRO)
                return decode_version(value), value, directory

        logger.step_info("include dirs:")
        for directory in include_dirs:
            logger.step_info(directory, indent=2)
        raise FileUnreadable(
            os.path.join("<include_dir>", VERSION_HEADER),
            "Boost not found in include directories",
            searched=include_dirs,
        )

    def library_name(self, name, toolchain, ctx, variant=None):
        """Link token of one Boost library, decorated where the platform needs it."""
        version, _, _ = self.detect_version(toolchain, ctx)
        if needs_decoration(toolchain):
            return mangle(name, toolchain, version, ctx.introspector, variant=variant)
        return name

    def root_paths(self, toolchain, ctx):
        """(library dirs, include dirs) implied by BOOST_ROOT."""
        root = detect_boost_root(ctx)
        if not root:
            return [], []
        rules = rules_for(toolchain)
        if isinstance(rules, MsvcRules):
            return [os.path.join(root, rules.lib_dir_name(toolchain))], [root]
        return [], [root]

    def discover(self, toolchain, ctx, best_effort=False):
        version, value, _ = self.detect_version(toolchain, ctx)
        if value < self.min_version:
            raise VersionTooLow(self.logical_name, str(version), str(decode_version(self.min_version)))

        variant = boost_link_variant(ctx)
        tokens = [self.library_name(f"boost_{c}", toolchain, ctx, variant=variant) for c in self.components]
        lib_dirs, include_dirs = self.root_paths(toolchain, ctx)
        logger.debug(f"boost {version} resolved: {tokens}")
        return LinkSpec(
            logical_name=self.logical_name,
            link_tokens=tokens,
            extra_search_paths=lib_dirs,
            include_paths=include_dirs,
        )


def min_version_from_string(text):
    """``"1.66.0"`` -> ``106600``."""
    return VersionTriple.from_string(text).encode()
