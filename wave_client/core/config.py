"""Configuration classes for the WAVE client."""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from enum import Enum, IntEnum

from wave_client import __version__


DEFAULT_BASE_URL = "https://wave.webaim.org/api"
DEFAULT_TIMEOUT = 30.0
REQUEST_PATH = "/request"


class ReportType(IntEnum):
    """Report depth accepted by the ``reporttype`` parameter."""

    STATISTICS = 1  # Statistics and category counts only
    ITEMS = 2  # Adds per-item counts
    SELECTORS = 3  # Adds CSS selectors for each instance
    CONTRAST = 4  # Adds contrast data for each instance


class ResponseFormat(Enum):
    """Encoding of the API response."""

    JSON = "json"
    XML = "xml"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the WAVE API."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds
    user_agent: str = f"wave-client/{__version__}"

    @property
    def request_url(self) -> str:
        return self.base_url.rstrip("/") + REQUEST_PATH

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.api_key:
            errors.append("api_key is required")

        if not self.base_url:
            errors.append("base_url is required")

        if self.timeout <= 0:
            errors.append("timeout must be positive")

        return errors


@dataclass
class AnalysisOptions:
    """Optional parameters for a single analysis request.

    Every field left as ``None`` is omitted from the query string. Keys in
    ``extra`` are sent as-is, which allows parameters this class does not
    know about.
    """

    reporttype: Optional[ReportType] = None
    format: ResponseFormat = ResponseFormat.JSON
    viewportwidth: Optional[int] = None
    viewportheight: Optional[int] = None
    evaldelay: Optional[int] = None  # milliseconds
    username: Optional[str] = None
    password: Optional[str] = None
    useragent: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"format": self.format.value}
        if self.reporttype is not None:
            params["reporttype"] = int(self.reporttype)

        for name in (
            "viewportwidth",
            "viewportheight",
            "evaldelay",
            "username",
            "password",
            "useragent",
        ):
            value = getattr(self, name)
            if value is not None:
                params[name] = value

        params.update(self.extra)
        return params


class OutputFormat(Enum):
    """Output format for rendered reports."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


@dataclass
class ReportConfig:
    """Configuration for report rendering."""

    format: OutputFormat = OutputFormat.TEXT
    output_file: Optional[str] = None  # None = stdout

    # Detail limits
    max_selectors: int = 3
    include_alerts: bool = True
    include_features: bool = True
