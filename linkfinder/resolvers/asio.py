from ..cli_logger import logger
from ..models import LinkSpec
from .base import BaseResolver
from .boost import BoostResolver, boost_link_variant

BUNDLED_PROJECT = "asio"


class AsioSelector(BaseResolver):
    """
    Stand-alone asio from the bundled copy, or Boost.Asio when
    LINKFINDER_USE_BOOST_ASIO is set ("shared" links boost_system as a
    shared library, any other value statically).
    """

    logical_name = "asio"

    def __init__(self, boost=None):
        self.boost = boost or BoostResolver()

    def discover(self, toolchain, ctx, best_effort=False):
        variant = boost_link_variant(ctx)
        if variant is None:
            return LinkSpec(
                logical_name=self.logical_name,
                defines={"ASIO_STANDALONE": None},
                bundled=BUNDLED_PROJECT,
            )

        logger.debug(f"asio: using Boost.Asio ({variant})")
        if toolchain.is_windows:
            # Windows names encode the Boost version, so Boost must be found.
            token = self.boost.library_name("boost_system", toolchain, ctx, variant=variant)
            lib_dirs, include_dirs = self.boost.root_paths(toolchain, ctx)
        else:
            token, lib_dirs, include_dirs = "boost_system", [], []

        return LinkSpec(
            logical_name=self.logical_name,
            link_tokens=[token],
            extra_search_paths=lib_dirs,
            include_paths=include_dirs,
            link_mode=variant,
        )


ASIO_SELECTOR = AsioSelector()
