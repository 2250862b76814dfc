"""Temporary public hosting for raw HTML.

The WAVE API only analyzes pages it can fetch. ``SourceServer`` serves one
HTML document from memory on a loopback port and publishes that port through
a tunnel so the API can reach it:

    server = SourceServer()
    try:
        url = await server.expose("<html>...</html>")
        ...  # hand ``url`` to the API
    finally:
        await server.cleanup()

One exposure per instance; use separate instances for parallel exposures.
"""

from typing import Any, Optional

from aiohttp import web

from wave_client.core.exceptions import ExposureError
from wave_client.network.tunnel import NgrokTunnelProvider
from wave_client.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "127.0.0.1"


def build_source_app(html: str) -> web.Application:
    """Application answering ``GET /`` with ``html`` and 404 elsewhere."""

    async def handle_root(request: web.Request) -> web.Response:
        return web.Response(text=html, content_type="text/html", charset="utf-8")

    app = web.Application()
    app.router.add_get("/", handle_root)
    return app


class SourceServer:
    """Local listener plus public tunnel for a single HTML payload."""

    def __init__(self, tunnel_provider: Optional[Any] = None, host: str = DEFAULT_HOST):
        self.tunnel_provider = tunnel_provider or NgrokTunnelProvider()
        self.host = host
        self._runner: Optional[web.AppRunner] = None
        self._tunnel: Optional[Any] = None
        self._url: Optional[str] = None
        self._port = 0

    async def expose(self, html: str) -> str:
        """Serve ``html`` and return the public URL it is reachable at.

        Args:
            html: Document returned for ``GET /``

        Returns:
            Public URL of the tunnel

        Raises:
            ExposureError: If the listener reports no bound address.
                Bind and tunnel errors are raised unchanged. Whatever was
                started is closed before the error propagates.
        """
        runner = web.AppRunner(build_source_app(html), access_log=None)
        await runner.setup()
        self._runner = runner

        try:
            site = web.TCPSite(runner, self.host, 0)
            await site.start()

            addresses = runner.addresses
            if not addresses:
                raise ExposureError("Failed to get server address")
            self._port = addresses[0][1]
            logger.debug("source_server_started", host=self.host, port=self._port)

            self._tunnel = await self.tunnel_provider.forward(self._port)
            self._url = self._tunnel.url()
        except BaseException:
            await self.cleanup()
            raise

        logger.info("source_exposed", port=self._port, url=self._url)
        return self._url

    async def cleanup(self) -> None:
        """Close the tunnel, then the listener. Safe to call repeatedly.

        A failure while closing the tunnel is logged and ignored; the
        listener is closed either way.
        """
        tunnel, self._tunnel = self._tunnel, None
        runner, self._runner = self._runner, None
        self._url = None
        self._port = 0

        try:
            if tunnel is not None:
                try:
                    await tunnel.close()
                except Exception as e:
                    logger.warning("tunnel_close_failed", error=str(e))
        finally:
            if runner is not None:
                await runner.cleanup()
                logger.debug("source_server_stopped")

    @property
    def url(self) -> Optional[str]:
        """Public URL of the active exposure, ``None`` when there is none."""
        return self._url

    @property
    def port(self) -> int:
        return self._port

    @property
    def is_running(self) -> bool:
        return self._runner is not None

    async def __aenter__(self) -> "SourceServer":
        return self

    async def __aexit__(self, *args) -> None:
        await self.cleanup()
