from ..cli_logger import logger
from ..models import LinkSpec
from .simple import SimpleLibraryResolver

OWN_BUILD_ENV = "LINKFINDER_USE_OWN_ZLIB_BUILD"
BUNDLED_PROJECT = "zlib"


class ZlibResolver(SimpleLibraryResolver):
    """
    System zlib, or the bundled zlib project when asked for or when no
    system copy can be confirmed in best-effort mode.
    """

    def __init__(self):
        super().__init__(
            "zlib", ["z"],
            override_env="ZLIB_PRJ_FILE", override_default="local-zlib.toml",
        )

    def bundled_spec(self):
        return LinkSpec(logical_name=self.logical_name, bundled=BUNDLED_PROJECT)

    def discover(self, toolchain, ctx, best_effort=False):
        if OWN_BUILD_ENV in ctx.environ:
            logger.info(f"{OWN_BUILD_ENV} is set; using the bundled zlib build")
            return self.bundled_spec()
        return super().discover(toolchain, ctx, best_effort=best_effort)

    def fallback(self, toolchain, ctx, tried):
        logger.warning(f"System zlib not found (tried {', '.join(tried)}); using the bundled zlib build")
        return self.bundled_spec()


ZLIB_RESOLVER = ZlibResolver()
