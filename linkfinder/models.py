import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from packaging.version import InvalidVersion, Version


class CompilerFamily(enum.Enum):
    MSVC = "vc"
    GCC = "gcc"
    CLANG = "clang"


class TargetOS(enum.Enum):
    WINDOWS = "windows"
    POSIX = "posix"


class RuntimeLinkage(enum.Enum):
    STATIC = "static"
    SHARED = "shared"


class RuntimeMode(enum.Enum):
    RELEASE = "release"
    DEBUG = "debug"


DEFAULT_COMPILER_COMMANDS = {
    CompilerFamily.MSVC: "cl",
    CompilerFamily.GCC: "g++",
    CompilerFamily.CLANG: "clang++",
}


@dataclass(frozen=True)
class ToolchainDescriptor:
    """
    The compiler toolchain active for one build pass.

    Instances are hashable and serve as the key of every introspection cache.
    """
    compiler_family: CompilerFamily
    compiler_version_tag: str = ""
    target_os: TargetOS = TargetOS.POSIX
    architecture_bits: int = 64
    runtime_linkage: RuntimeLinkage = RuntimeLinkage.SHARED
    runtime_mode: RuntimeMode = RuntimeMode.RELEASE
    compiler_command: str = ""

    def __post_init__(self):
        if self.architecture_bits not in (32, 64):
            raise ValueError(f"Unsupported architecture width: {self.architecture_bits}")
        if not self.compiler_command:
            object.__setattr__(
                self, "compiler_command", DEFAULT_COMPILER_COMMANDS[self.compiler_family]
            )

    @property
    def is_windows(self):
        return self.target_os is TargetOS.WINDOWS

    @property
    def is_static(self):
        return self.runtime_linkage is RuntimeLinkage.STATIC

    @property
    def is_debug(self):
        return self.runtime_mode is RuntimeMode.DEBUG

    @classmethod
    def from_dict(cls, data):
        """Build a descriptor from a ``[toolchain]`` config table."""
        family = CompilerFamily(str(data.get("compiler", "gcc")).lower())
        default_os = TargetOS.WINDOWS if family is CompilerFamily.MSVC else TargetOS.POSIX
        return cls(
            compiler_family=family,
            compiler_version_tag=str(data.get("compiler_version", "")),
            target_os=TargetOS(str(data.get("target_os", default_os.value)).lower()),
            architecture_bits=int(data.get("bits", 64)),
            runtime_linkage=RuntimeLinkage(str(data.get("runtime_linkage", "shared")).lower()),
            runtime_mode=RuntimeMode(str(data.get("runtime_mode", "release")).lower()),
            compiler_command=str(data.get("compiler_command", "")),
        )


@dataclass(frozen=True)
class VersionTriple:
    major: int
    minor: int
    patch: int

    @classmethod
    def decode(cls, value):
        # BOOST_VERSION style: MMmmmpp
        return cls(value // 100000, value // 100 % 1000, value % 100)

    @classmethod
    def from_string(cls, text):
        try:
            parsed = Version(text)
        except InvalidVersion as e:
            raise ValueError(f"Invalid version string '{text}': {e}")
        release = parsed.release + (0, 0)
        return cls(release[0], release[1], release[2])

    def encode(self):
        return self.major * 100000 + self.minor * 100 + self.patch

    def tag(self):
        """Library file suffix such as ``1_66`` or ``1_66_1``."""
        tag = f"{self.major}_{self.minor}"
        if self.patch:
            tag += f"_{self.patch}"
        return tag

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class LibraryLocation:
    directory: str
    matched_files: Tuple[str, ...]


@dataclass
class LinkSpec:
    logical_name: str
    link_tokens: List[str] = field(default_factory=list)
    extra_search_paths: List[str] = field(default_factory=list)
    defines: Dict[str, Optional[str]] = field(default_factory=dict)
    include_paths: List[str] = field(default_factory=list)
    bundled: Optional[str] = None
    link_mode: Optional[str] = None
    override: Optional[str] = None

    def to_dict(self):
        return {
            "logical_name": self.logical_name,
            "link_tokens": list(self.link_tokens),
            "extra_search_paths": list(self.extra_search_paths),
            "include_paths": list(self.include_paths),
            "defines": dict(self.defines),
            "bundled": self.bundled,
            "link_mode": self.link_mode,
            "override": self.override,
        }
