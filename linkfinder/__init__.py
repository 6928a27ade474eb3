"""
linkfinder: locate native libraries for a compiler toolchain and describe
how to link them.
"""
from .context import ResolverContext
from .errors import (
    CompilerInvocationError,
    FileUnreadable,
    LinkfinderError,
    NotFound,
    OverrideInvalid,
    UnsupportedToolchain,
    VersionNotFound,
    VersionTooLow,
)
from .models import (
    CompilerFamily,
    LinkSpec,
    RuntimeLinkage,
    RuntimeMode,
    TargetOS,
    ToolchainDescriptor,
    VersionTriple,
)
from .resolvers import FAMILIES, get_resolver

__version__ = "0.1.0"
