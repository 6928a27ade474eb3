from ..cli_logger import logger
from ..errors import LinkfinderError
from ..models import LibraryLocation
from ..overrides import find_override, load_override
from ..utils import all_files_exist


class BaseResolver:
    """
    Common contract of every library family.

    Subclasses implement ``discover``; this class puts the override gate in
    front of it and turns failures into ``False`` for availability checks.
    A resolver keeps no state between calls: anything worth caching lives
    in the ResolverContext passed to each call.
    """

    logical_name = None
    override_env = None
    override_default = None

    def override_path(self, ctx):
        if not self.override_env and not self.override_default:
            return None
        return find_override(ctx, self.override_env, self.override_default)

    def resolve(self, toolchain, ctx, best_effort=False):
        override = self.override_path(ctx)
        if override:
            return load_override(override, self.logical_name)
        return self.discover(toolchain, ctx, best_effort=best_effort)

    def is_available(self, toolchain, ctx):
        if self.override_path(ctx):
            return True
        try:
            self.discover(toolchain, ctx, best_effort=False)
        except LinkfinderError as e:
            logger.debug(f"{self.logical_name} is not available: {e}")
            return False
        return True

    def discover(self, toolchain, ctx, best_effort=False):
        raise NotImplementedError


def locate_first(directories, file_sets):
    """
    First directory (in search order) holding one complete file set.

    ``file_sets`` are alternatives, e.g. the shared and the static flavour
    of the same libraries; within one directory they are tried in order.
    """
    for directory in directories:
        if not directory:
            continue
        for names in file_sets:
            if all_files_exist(directory, names):
                return LibraryLocation(directory, tuple(names))
    return None
