import os

from .introspection import ToolsetIntrospector
from .utils import CompilerDiagnostic


class ResolverContext:
    """
    State shared by all resolvers during one build-configuration pass.

    Holds the compiler runner, the environment snapshot, the working root
    used for override descriptors and every memoization cache. Create one
    per pass; nothing survives the object.
    """

    def __init__(self, runner=None, environ=None, root="."):
        self.runner = runner if runner is not None else CompilerDiagnostic()
        self.environ = dict(os.environ) if environ is None else dict(environ)
        self.root = root
        self.introspector = ToolsetIntrospector(self.runner, self.environ)
        self.detected_versions = {}

    def getenv(self, name, default=None):
        return self.environ.get(name, default)

    def library_search_dirs(self, toolchain):
        return self.introspector.library_search_dirs(toolchain)

    def header_search_dirs(self, toolchain):
        return self.introspector.header_search_dirs(toolchain)

    def memoize_version(self, key, compute):
        """Cache a detected library version under ``key`` for this pass."""
        if key not in self.detected_versions:
            self.detected_versions[key] = compute()
        return self.detected_versions[key]
