"""Core modules for the WAVE client."""

from .config import (
    ClientConfig,
    AnalysisOptions,
    ReportType,
    ResponseFormat,
    OutputFormat,
    ReportConfig,
)
from .models import (
    AnalysisResult,
    Categories,
    ContrastDetail,
    FailurePayload,
    ResponseStatus,
    Statistics,
    WaveItem,
    WcagReference,
    CATEGORY_NAMES,
)
from .exceptions import (
    WaveException,
    InvalidArgumentError,
    RemoteRejectionError,
    TransportFailureError,
    InvalidResponseError,
    ExposureError,
)
from .client import WaveClient, create_client

__all__ = [
    # Config
    "ClientConfig",
    "AnalysisOptions",
    "ReportType",
    "ResponseFormat",
    "OutputFormat",
    "ReportConfig",
    # Models
    "AnalysisResult",
    "Categories",
    "ContrastDetail",
    "FailurePayload",
    "ResponseStatus",
    "Statistics",
    "WaveItem",
    "WcagReference",
    "CATEGORY_NAMES",
    # Exceptions
    "WaveException",
    "InvalidArgumentError",
    "RemoteRejectionError",
    "TransportFailureError",
    "InvalidResponseError",
    "ExposureError",
    # Client
    "WaveClient",
    "create_client",
]
