from .check import check
from .config import config
from .dirs import dirs
from .log import log
from .mangle import mangle
from .resolve import resolve
from .version import version
