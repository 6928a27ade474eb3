from .asio import ASIO_SELECTOR, AsioSelector
from .base import BaseResolver
from .boost import BoostResolver, min_version_from_string
from .openssl import OPENSSL_RESOLVER, OpenSSLResolver, select_generation
from .platform_libs import PLATFORM_RESOLVER
from .simple import PCRE2_RESOLVER, PCRE_RESOLVER, SimpleLibraryResolver
from .zlib import ZLIB_RESOLVER, ZlibResolver

FAMILIES = ("boost", "asio", "openssl", "pcre", "pcre2", "zlib", "platform")

_FIXED = {
    "asio": ASIO_SELECTOR,
    "openssl": OPENSSL_RESOLVER,
    "pcre": PCRE_RESOLVER,
    "pcre2": PCRE2_RESOLVER,
    "zlib": ZLIB_RESOLVER,
    "platform": PLATFORM_RESOLVER,
}


def get_resolver(name, components=(), min_version=None):
    """Resolver for one library family; Boost takes its components here."""
    if name == "boost":
        if min_version is None:
            return BoostResolver(components)
        return BoostResolver(components, min_version=min_version)
    try:
        return _FIXED[name]
    except KeyError:
        raise ValueError(f"Unknown library family '{name}'. Choose from: {', '.join(FAMILIES)}")
