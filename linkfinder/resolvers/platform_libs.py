from ..models import LinkSpec
from .base import BaseResolver

WINDOWS_SOCKET_LIBS = ["wsock32", "ws2_32"]


class PlatformLibsResolver(BaseResolver):
    """System libraries every networking target needs on its platform."""

    logical_name = "platform"

    def discover(self, toolchain, ctx, best_effort=False):
        tokens = list(WINDOWS_SOCKET_LIBS) if toolchain.is_windows else []
        return LinkSpec(logical_name=self.logical_name, link_tokens=tokens)


PLATFORM_RESOLVER = PlatformLibsResolver()
