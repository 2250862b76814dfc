"""Network modules for the WAVE client."""

from .tunnel import NgrokTunnel, NgrokTunnelProvider
from .source_server import SourceServer, build_source_app

__all__ = [
    # Tunnels
    "NgrokTunnel",
    "NgrokTunnelProvider",
    # Local hosting
    "SourceServer",
    "build_source_app",
]
