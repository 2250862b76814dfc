"""wave-client: async client for the WebAIM WAVE accessibility API.

Analyzes public URLs directly, and raw HTML documents by serving them
through a temporary ngrok tunnel for the duration of the analysis.
"""

__version__ = "0.1.0"

from wave_client.core.config import ClientConfig, AnalysisOptions, ReportType, ResponseFormat
from wave_client.core.client import WaveClient, create_client
from wave_client.core.models import AnalysisResult, WaveItem
from wave_client.core.exceptions import (
    WaveException,
    InvalidArgumentError,
    RemoteRejectionError,
    TransportFailureError,
    InvalidResponseError,
    ExposureError,
)

__all__ = [
    "__version__",
    "ClientConfig",
    "AnalysisOptions",
    "ReportType",
    "ResponseFormat",
    "WaveClient",
    "create_client",
    "AnalysisResult",
    "WaveItem",
    "WaveException",
    "InvalidArgumentError",
    "RemoteRejectionError",
    "TransportFailureError",
    "InvalidResponseError",
    "ExposureError",
]
