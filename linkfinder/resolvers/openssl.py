from ..cli_logger import logger
from ..errors import NotFound
from ..models import CompilerFamily
from ..utils import find_first_dir_index
from .simple import SimpleLibraryResolver

# OpenSSL renamed its MSVC import libraries in 1.1.0.
OPENSSL_BEFORE_11 = ["libeay32.lib", "ssleay32.lib"]
OPENSSL_AFTER_11 = ["libssl.lib", "libcrypto.lib"]


def select_generation(directories, before, after):
    """
    Pick the file set the linker would see first.

    Both generations may be installed side by side; the one found at the
    lower search-path index wins, whichever is newer. Returns an empty list
    when neither set is complete anywhere.
    """
    index_before = find_first_dir_index(directories, before)
    index_after = find_first_dir_index(directories, after)

    if index_before is not None and index_after is not None:
        return list(before) if index_before < index_after else list(after)
    if index_before is not None:
        return list(before)
    if index_after is not None:
        return list(after)
    return []


class OpenSSLResolver(SimpleLibraryResolver):

    def __init__(self):
        super().__init__(
            "openssl", ["ssl", "crypto"],
            override_env="OPENSSL_PRJ_FILE", override_default="local-openssl.toml",
            windows_extra_tokens=["gdi32"],
        )

    def discover(self, toolchain, ctx, best_effort=False):
        if toolchain.compiler_family is not CompilerFamily.MSVC:
            return super().discover(toolchain, ctx, best_effort=best_effort)

        dirs = ctx.library_search_dirs(toolchain)
        libs = select_generation(dirs, OPENSSL_BEFORE_11, OPENSSL_AFTER_11)
        if not libs:
            raise NotFound(self.logical_name, tried=OPENSSL_BEFORE_11 + OPENSSL_AFTER_11, search_paths=dirs)
        logger.debug(f"openssl: selected {', '.join(libs)}")
        return self.make_spec(libs)


OPENSSL_RESOLVER = OpenSSLResolver()
