import re

from .cli_logger import logger
from .errors import FileUnreadable, VersionNotFound
from .models import VersionTriple


def macro_pattern(macro_name):
    return re.compile(rf"#define\s+{re.escape(macro_name)}\s+(?P<value>\d+)\s*$")


def read_version_macro(path, macro_name, line_pattern=None):
    """
    Read the integer value of a ``#define`` out of a header file.

    Args:
        path (str): The header to scan, e.g. ``<root>/boost/version.hpp``.
        macro_name (str): Macro to look for, e.g. ``BOOST_VERSION``.
        line_pattern (re.Pattern, optional): Custom pattern with a ``value``
            group (or a single group) capturing the decimal number.

    Returns:
        int: the value of the first matching line.

    Raises:
        FileUnreadable: the file could not be opened or read.
        VersionNotFound: no line defines the macro.
    """
    pattern = line_pattern or macro_pattern(macro_name)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                match = pattern.search(line)
                if match:
                    groups = match.groupdict()
                    value = int(groups["value"] if "value" in groups else match.group(1))
                    logger.debug(f"{macro_name} = {value} in {path}")
                    return value
    except OSError as e:
        raise FileUnreadable(path, e.strerror or str(e))
    raise VersionNotFound(path, macro_name)


def decode_version(value):
    return VersionTriple.decode(value)
