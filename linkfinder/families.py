"""
Per compiler family behaviour.

Each family is a small rules object answering three questions: where does
the linker look for libraries, where does the preprocessor look for headers,
and how is a versioned library (Boost style) decorated on disk. Naming
tables are plain data so a new compiler release only needs a table entry.
"""
from .errors import UnsupportedToolchain
from .models import CompilerFamily

# MSVC major version ("ver_hi") -> Boost toolset tag.
MSVC_LIB_VC_TAGS = {
    "14": "vc140",
    "15": "vc141",
    "16": "vc142",
    "17": "vc143",
}

# MSVC major version -> directory suffix of Boost's prebuilt binaries,
# e.g. lib64-msvc-14.1.
MSVC_LIB_DIR_TAGS = {
    "14": "msvc-14.0",
    "15": "msvc-14.1",
    "16": "msvc-14.2",
    "17": "msvc-14.3",
}

SHARED_VARIANT = "shared"
STATIC_VARIANT = "static"


def _join_decorated(name, toolset_tag, flags, bits, version):
    decorated = f"{name}-{toolset_tag}-mt"
    if flags:
        decorated += f"-{flags}"
    return f"{decorated}-x{bits}-{version.tag()}"


class CompilerRules:
    family = None

    def library_search_dirs(self, toolchain, introspector):
        raise NotImplementedError

    def header_search_dirs(self, toolchain, introspector):
        raise NotImplementedError

    def mangle_name(self, logical_name, toolchain, version, introspector, variant=None):
        raise NotImplementedError

    def library_file_names(self, name, toolchain):
        """File names that satisfy ``-l<name>`` (or its MSVC equivalent)."""
        raise NotImplementedError


class MsvcRules(CompilerRules):
    family = CompilerFamily.MSVC

    def library_search_dirs(self, toolchain, introspector):
        return introspector.env_path_list("LIB")

    def header_search_dirs(self, toolchain, introspector):
        return introspector.env_path_list("INCLUDE")

    def vc_tag(self, toolchain):
        tag = MSVC_LIB_VC_TAGS.get(toolchain.compiler_version_tag)
        if tag is None:
            supported = ", ".join(f"vc{v}" for v in sorted(MSVC_LIB_VC_TAGS, key=int))
            raise UnsupportedToolchain(
                f"toolset not supported: msvc {toolchain.compiler_version_tag or '<unknown>'} "
                f"(must be one of {supported})"
            )
        return tag

    def lib_dir_name(self, toolchain):
        self.vc_tag(toolchain)
        return f"lib{toolchain.architecture_bits}-{MSVC_LIB_DIR_TAGS[toolchain.compiler_version_tag]}"

    def mangle_name(self, logical_name, toolchain, version, introspector, variant=None):
        # boost_system-vc141-mt-gd-x64-1_66, libboost_system-vc141-mt-sgd-x64-1_66, ...
        vc_tag = self.vc_tag(toolchain)
        flags = ""
        if variant == SHARED_VARIANT:
            name = logical_name
        else:
            name = f"lib{logical_name}"
            if toolchain.is_static:
                flags += "s"
        if toolchain.is_debug:
            flags += "gd"
        return _join_decorated(name, vc_tag, flags, toolchain.architecture_bits, version)

    def library_file_names(self, name, toolchain):
        return [f"{name}.lib"]


class GnuRules(CompilerRules):
    family = CompilerFamily.GCC

    def library_search_dirs(self, toolchain, introspector):
        return introspector.compiler_library_dirs(toolchain)

    def header_search_dirs(self, toolchain, introspector):
        return introspector.compiler_include_dirs(toolchain)

    def mangle_name(self, logical_name, toolchain, version, introspector, variant=None):
        if not toolchain.is_windows:
            return logical_name

        # MinGW builds: boost_system-mgw71-mt-sd-x64-1_66[.dll]
        gcc_tag = introspector.gcc_version_tag(toolchain)
        flags = ""
        if variant == STATIC_VARIANT and toolchain.is_static:
            flags += "s"
        if toolchain.is_debug:
            flags += "d"
        decorated = _join_decorated(logical_name, gcc_tag, flags, toolchain.architecture_bits, version)
        if variant == SHARED_VARIANT:
            decorated += ".dll"
        return decorated

    def library_file_names(self, name, toolchain):
        static_name = f"lib{name}.a"
        if toolchain.is_static:
            return [static_name]
        if toolchain.is_windows:
            return [f"lib{name}.dll.a", static_name]
        return [f"lib{name}.so", static_name]


class ClangRules(GnuRules):
    family = CompilerFamily.CLANG


_RULES = {
    CompilerFamily.MSVC: MsvcRules(),
    CompilerFamily.GCC: GnuRules(),
    CompilerFamily.CLANG: ClangRules(),
}


def rules_for(toolchain):
    try:
        return _RULES[toolchain.compiler_family]
    except KeyError:
        raise UnsupportedToolchain(f"no rules for compiler family {toolchain.compiler_family}")
