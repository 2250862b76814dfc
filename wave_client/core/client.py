"""Async client for the WAVE accessibility API.

Two entry points:
1. ``analyze`` - ask the API to fetch and evaluate a public URL
2. ``analyze_source`` - evaluate raw HTML by exposing it through a
   temporary tunnel and analyzing the tunnel URL
"""

import asyncio
import json
from enum import Enum
from typing import Optional, Dict, Any, Mapping, Union

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from wave_client.core.config import (
    AnalysisOptions,
    ClientConfig,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ResponseFormat,
)
from wave_client.core.exceptions import (
    InvalidArgumentError,
    InvalidResponseError,
    RemoteRejectionError,
    TransportFailureError,
)
from wave_client.core.models import AnalysisResult, FailurePayload, response_adapter
from wave_client.network.source_server import SourceServer
from wave_client.utils.logging import get_logger

logger = get_logger(__name__)

# Pause between opening the tunnel and calling the API. ngrok gives no
# readiness signal, so this is a fixed wait rather than a poll.
SETTLE_DELAY = 0.5

Options = Union[AnalysisOptions, Mapping[str, Any]]


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class WaveClient:
    """Client for the WAVE API.

    Usage:
        client = WaveClient(ClientConfig(api_key="..."))
        result = await client.analyze("https://example.com")
        print(result.stat("pagetitle"), result.credits_remaining)
    """

    def __init__(
        self,
        config: ClientConfig,
        tunnel_provider: Optional[Any] = None,
    ):
        if not config.api_key:
            raise InvalidArgumentError("api_key", "API key is required")

        errors = config.validate()
        if errors:
            raise InvalidArgumentError("config", f"Configuration invalid: {'; '.join(errors)}")

        self.config = config
        self.tunnel_provider = tunnel_provider

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def analyze(
        self,
        url: str,
        options: Optional[Options] = None,
    ) -> Union[AnalysisResult, str]:
        """Analyze a publicly reachable URL.

        Args:
            url: Page the API should fetch
            options: ``AnalysisOptions`` or a mapping of extra query
                parameters, sent verbatim

        Returns:
            AnalysisResult, or the raw response text when ``format`` is xml

        Raises:
            InvalidArgumentError: If ``url`` is empty
            RemoteRejectionError: If the API reports ``success: false``
            TransportFailureError: On connection errors, timeouts and
                non-2xx responses
            InvalidResponseError: If a JSON response is not an object
        """
        if not url:
            raise InvalidArgumentError("url", "URL is required")

        params = self._build_params(url, options)
        logger.info(
            "analysis_requested",
            url=url,
            format=params["format"],
            reporttype=params.get("reporttype"),
        )

        body = await self._request(params)

        if params["format"] == ResponseFormat.XML.value:
            return body

        return self._parse_json_response(body)

    async def analyze_source(
        self,
        html: str,
        options: Optional[Options] = None,
    ) -> Union[AnalysisResult, str]:
        """Analyze raw HTML.

        The document is served from a local listener behind a public tunnel
        for the duration of the call. The listener and tunnel are torn down
        whether the analysis succeeds or not.
        """
        if not isinstance(html, str) or not html:
            raise InvalidArgumentError(
                "html", "Source content is required and must be a string"
            )

        server = SourceServer(self.tunnel_provider)
        try:
            url = await server.expose(html)
            await asyncio.sleep(SETTLE_DELAY)
            return await self.analyze(url, options)
        finally:
            await server.cleanup()

    def _build_params(self, url: str, options: Optional[Options]) -> Dict[str, Any]:
        if isinstance(options, AnalysisOptions):
            extra = options.to_params()
        else:
            extra = dict(options or {})

        params: Dict[str, Any] = {
            "key": self.config.api_key,
            "url": url,
            "format": ResponseFormat.JSON.value,
        }
        params.update((k, v) for k, v in extra.items() if v is not None)

        return {k: _query_value(v) for k, v in params.items()}

    async def _request(self, params: Dict[str, Any]) -> str:
        """Issue the GET and return the body text of a 2xx response."""
        timeout = ClientTimeout(total=self.config.timeout)
        headers = {"User-Agent": self.config.user_agent}

        try:
            async with ClientSession(timeout=timeout, headers=headers) as session:
                async with session.get(self.config.request_url, params=params) as response:
                    body = await response.text(errors="replace")
                    if response.status >= 400:
                        raise self._status_error(response.status, body)
                    return body

        except asyncio.TimeoutError:
            logger.warning("analysis_timeout", timeout=self.config.timeout)
            raise TransportFailureError(
                f"timeout of {self.config.timeout}s exceeded",
                code="ETIMEDOUT",
            ) from None
        except aiohttp.ClientError as e:
            logger.warning("analysis_transport_error", error=str(e))
            raise TransportFailureError(
                str(e) or "Unknown error occurred",
                code=type(e).__name__,
            ) from e

    def _status_error(self, status: int, body: str) -> TransportFailureError:
        try:
            data: Any = json.loads(body)
        except ValueError:
            data = body or None

        message = None
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            message = data["message"]

        logger.warning("analysis_http_error", status=status)
        return TransportFailureError(
            message or f"Request failed with status code {status}",
            status_code=status,
            response=data,
        )

    def _parse_json_response(self, body: str) -> AnalysisResult:
        try:
            data = json.loads(body)
        except ValueError:
            raise InvalidResponseError(raw_response=body) from None

        if not isinstance(data, dict):
            raise InvalidResponseError(raw_response=data)

        # Never fails on an object: blocks that do not fit are kept raw.
        parsed = response_adapter.validate_python(data)

        if isinstance(parsed, FailurePayload):
            status = parsed.status
            logger.warning("analysis_rejected", code=status.code, message=status.message)
            raise RemoteRejectionError(
                str(status.message) if status.message else "API request failed",
                code=status.code,
            )

        logger.info(
            "analysis_completed",
            pageurl=parsed.stat("pageurl"),
            credits_remaining=parsed.credits_remaining,
        )
        return parsed


def create_client(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    tunnel_provider: Optional[Any] = None,
) -> WaveClient:
    """Convenience function to build a client from plain arguments."""
    return WaveClient(
        ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout),
        tunnel_provider=tunnel_provider,
    )
