"""Public tunnels for local listeners.

A tunnel provider is any object with an ``async forward(port)`` method
returning a tunnel; a tunnel exposes ``url()`` and an ``async close()``.
``NgrokTunnelProvider`` is the default implementation.
"""

import inspect
from typing import Any

import ngrok

from wave_client.utils.logging import get_logger

logger = get_logger(__name__)


class NgrokTunnel:
    """Wraps an ngrok listener."""

    def __init__(self, listener: Any):
        self._listener = listener

    def url(self) -> str:
        return self._listener.url()

    async def close(self) -> None:
        result = self._listener.close()
        if inspect.isawaitable(result):
            await result


class NgrokTunnelProvider:
    """Opens ngrok tunnels authenticated with ``NGROK_AUTHTOKEN``."""

    async def forward(self, port: int) -> NgrokTunnel:
        listener = ngrok.forward(addr=port, authtoken_from_env=True)
        # The SDK hands back an awaitable when called inside a running loop
        if inspect.isawaitable(listener):
            listener = await listener

        logger.debug("ngrok_tunnel_opened", port=port, url=listener.url())
        return NgrokTunnel(listener)
