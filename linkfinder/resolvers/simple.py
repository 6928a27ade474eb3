from ..cli_logger import logger
from ..errors import NotFound
from ..families import rules_for
from ..models import CompilerFamily, LinkSpec
from .base import BaseResolver, locate_first


class SimpleLibraryResolver(BaseResolver):
    """
    A binary library with one plain name per platform family.

    Discovery looks for the platform's file names of ``link_names`` across
    the linker search path. Windows targets may need extra system
    libraries appended (``windows_extra_tokens``).
    """

    def __init__(self, logical_name, link_names, override_env=None, override_default=None,
                 defines=None, windows_extra_tokens=(), link_mode=None):
        self.logical_name = logical_name
        self.link_names = list(link_names)
        self.override_env = override_env
        self.override_default = override_default
        self.defines = dict(defines or {})
        self.windows_extra_tokens = list(windows_extra_tokens)
        self.link_mode = link_mode

    def file_sets(self, toolchain):
        per_name = [rules_for(toolchain).library_file_names(n, toolchain) for n in self.link_names]
        # One set per flavour: [libssl.so, libcrypto.so], [libssl.a, libcrypto.a]
        return [list(flavour) for flavour in zip(*per_name)]

    def link_tokens(self, toolchain, location):
        if toolchain.compiler_family is CompilerFamily.MSVC:
            tokens = list(location.matched_files)
        else:
            tokens = list(self.link_names)
        if toolchain.is_windows:
            tokens += self.windows_extra_tokens
        return tokens

    def make_spec(self, tokens, search_paths=()):
        return LinkSpec(
            logical_name=self.logical_name,
            link_tokens=tokens,
            extra_search_paths=list(search_paths),
            defines=dict(self.defines),
            link_mode=self.link_mode,
        )

    def discover(self, toolchain, ctx, best_effort=False):
        dirs = ctx.library_search_dirs(toolchain)
        file_sets = self.file_sets(toolchain)
        location = locate_first(dirs, file_sets)
        if location is not None:
            logger.debug(f"{self.logical_name}: found {', '.join(location.matched_files)} in {location.directory}")
            return self.make_spec(self.link_tokens(toolchain, location))

        tried = [name for names in file_sets for name in names]
        if best_effort:
            return self.fallback(toolchain, ctx, tried)
        raise NotFound(self.logical_name, tried=tried, search_paths=dirs)

    def fallback(self, toolchain, ctx, tried):
        logger.warning(
            f"{self.logical_name}: none of [{', '.join(tried)}] found; "
            f"passing {', '.join(self.link_names)} to the linker unverified"
        )
        tokens = list(self.link_names)
        if toolchain.is_windows:
            tokens += self.windows_extra_tokens
        return self.make_spec(tokens)


PCRE_RESOLVER = SimpleLibraryResolver(
    "pcre", ["pcre"],
    override_env="PCRE_PRJ_FILE", override_default="local-pcre.toml",
    defines={"PCRE_STATIC": None},
    link_mode="static",
)

PCRE2_RESOLVER = SimpleLibraryResolver(
    "pcre2", ["pcre2-8"],
    override_env="PCRE2_PRJ_FILE", override_default="local-pcre2.toml",
    defines={"PCRE2_STATIC": None, "PCRE2_CODE_UNIT_WIDTH": "8"},
)
