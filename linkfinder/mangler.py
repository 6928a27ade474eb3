from .families import rules_for


def mangle(logical_name, toolchain, version, introspector, variant=None):
    """
    Decorated file/link name of a versioned library for ``toolchain``.

    ``variant`` is None, "static" or "shared" and mirrors the way the
    library itself was requested (see the asio selector). POSIX targets get
    the logical name back unchanged.
    """
    return rules_for(toolchain).mangle_name(
        logical_name, toolchain, version, introspector, variant=variant
    )


def needs_decoration(toolchain):
    """Windows targets link Boost libraries by their decorated names."""
    return toolchain.is_windows
