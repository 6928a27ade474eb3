import os
import re
import tempfile

from .cli_logger import logger
from .errors import UnsupportedToolchain
from .families import rules_for

LIBRARIES_LINE_RE = re.compile(r"^libraries: =(?P<libs>.*)")
INCLUDE_START_MARKER = "#include <...> search starts here:"
INCLUDE_END_MARKER = "End of search list."
GCC_VERSION_RE = re.compile(r"^gcc version (?P<major>\d+)\.(?P<minor>\d+)")


def parse_library_dirs(output, separator=":"):
    """Collect the ``libraries: =`` entries of ``-print-search-dirs`` output."""
    dirs = []
    for line in output.splitlines():
        match = LIBRARIES_LINE_RE.match(line)
        if match:
            dirs.extend(d for d in match.group("libs").strip().split(separator) if d)
    return dirs


def parse_include_dirs(output):
    """Collect the ``#include <...>`` search list printed by ``-E -v``."""
    dirs = []
    collecting = False
    for line in output.splitlines():
        if INCLUDE_START_MARKER in line:
            collecting = True
        elif INCLUDE_END_MARKER in line:
            collecting = False
        elif collecting:
            entry = line.strip()
            if entry:
                dirs.append(entry)
    return dirs


def parse_gcc_version_tag(output):
    """``gcc version 7.1.0 (...)`` -> ``mgw71``; None when absent."""
    tag = None
    for line in output.splitlines():
        match = GCC_VERSION_RE.match(line)
        if match:
            tag = f"mgw{match.group('major')}{match.group('minor')}"
    return tag


class ToolsetIntrospector:
    """
    Asks the toolchain where it looks for libraries and headers.

    Every answer is memoized per ToolchainDescriptor for the lifetime of the
    introspector, which in turn lives as long as its ResolverContext.
    """

    def __init__(self, runner, environ):
        self.runner = runner
        self.environ = environ
        self._library_dirs = {}
        self._include_dirs = {}
        self._gcc_version_tags = {}

    # -------- Public, memoized --------

    def library_search_dirs(self, toolchain):
        if toolchain not in self._library_dirs:
            dirs = rules_for(toolchain).library_search_dirs(toolchain, self)
            logger.debug(f"Library search dirs for {toolchain.compiler_command}: {dirs}")
            self._library_dirs[toolchain] = dirs
        return list(self._library_dirs[toolchain])

    def header_search_dirs(self, toolchain):
        if toolchain not in self._include_dirs:
            dirs = rules_for(toolchain).header_search_dirs(toolchain, self)
            logger.debug(f"Header search dirs for {toolchain.compiler_command}: {dirs}")
            self._include_dirs[toolchain] = dirs
        return list(self._include_dirs[toolchain])

    def gcc_version_tag(self, toolchain):
        if toolchain not in self._gcc_version_tags:
            output = self.runner.run([toolchain.compiler_command, "-v"])
            tag = parse_gcc_version_tag(output)
            if tag is None:
                raise UnsupportedToolchain(
                    f"unable to detect gcc version from '{toolchain.compiler_command} -v'"
                )
            self._gcc_version_tags[toolchain] = tag
        return self._gcc_version_tags[toolchain]

    # -------- Primitives used by the family rules --------

    def env_path_list(self, variable):
        value = self.environ.get(variable)
        if not value:
            return []
        return [p for p in value.split(";") if p]

    def compiler_library_dirs(self, toolchain):
        output = self.runner.run([toolchain.compiler_command, "-print-search-dirs"])
        separator = ";" if toolchain.is_windows else ":"
        return parse_library_dirs(output, separator)

    def compiler_include_dirs(self, toolchain):
        fd, probe_path = tempfile.mkstemp(prefix="linkfinder_include_probe_", suffix=".cpp")
        os.close(fd)
        try:
            output = self.runner.run(
                [toolchain.compiler_command, "-E", "-x", "c++", "-", "-v"],
                stdin_path=probe_path,
            )
        finally:
            os.remove(probe_path)
        return parse_include_dirs(output)
