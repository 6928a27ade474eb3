"""
Failure kinds reported by library discovery.

Absence (``NotFound``, ``VersionTooLow``) is recoverable: the caller usually
skips the feature that needs the library. Everything else points at a broken
installation or toolchain and should stop the configuration pass.
"""


class LinkfinderError(Exception):
    """Base class for every discovery failure."""

    #: True when the failure means "library absent" rather than "broken".
    recoverable = False


class NotFound(LinkfinderError):
    recoverable = True

    def __init__(self, logical_name, tried=(), search_paths=()):
        self.logical_name = logical_name
        self.tried = list(tried)
        self.search_paths = list(search_paths)
        message = f"{logical_name} not found"
        if self.tried:
            message += f"; tried [{', '.join(self.tried)}]"
        if self.search_paths:
            message += f" in {len(self.search_paths)} search path(s)"
        super().__init__(message)


class VersionTooLow(LinkfinderError):
    recoverable = True

    def __init__(self, logical_name, found, minimum):
        self.logical_name = logical_name
        self.found = found
        self.minimum = minimum
        super().__init__(
            f"{logical_name} version must be at least {minimum}, found {found}"
        )


class FileUnreadable(LinkfinderError):
    def __init__(self, path, reason=None, searched=()):
        self.path = path
        self.reason = reason
        self.searched = list(searched)
        message = f"unable to read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class VersionNotFound(LinkfinderError):
    def __init__(self, path, macro_name):
        self.path = path
        self.macro_name = macro_name
        super().__init__(f"unable to find {macro_name} definition in {path}")


class UnsupportedToolchain(LinkfinderError):
    pass


class CompilerInvocationError(LinkfinderError):
    def __init__(self, command, reason):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"failed to run '{' '.join(self.command)}': {reason}")


class OverrideInvalid(LinkfinderError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"override descriptor {path} is invalid: {reason}")
