from typing import Optional, List, Dict, Any, Union, Literal, Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
)


CATEGORY_NAMES = ("error", "alert", "feature", "structure", "aria", "contrast")

_OPEN = ConfigDict(extra="allow")

# Smart unions pick the member matching the input type exactly, so scalars
# are never coerced and a dump gives back the payload as sent.
Number = Union[int, float, str]


def _lenient(model):
    """Type that keeps the raw value when it does not fit ``model``."""
    return Annotated[Union[model, Any], Field(union_mode="left_to_right")]


def field_value(block: Any, key: str) -> Any:
    """Read ``key`` from a validated model or from a raw mapping."""
    if isinstance(block, BaseModel):
        return getattr(block, key, None)
    if isinstance(block, dict):
        return block.get(key)
    return None


def as_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return 0


class ContrastDetail(BaseModel):
    model_config = _OPEN

    fcolor: Optional[str] = None
    bcolor: Optional[str] = None
    contrastratio: Optional[Number] = None
    fontsize: Optional[Number] = None
    fontweight: Optional[Number] = None
    bold: Optional[Union[bool, Number]] = None
    algorithm: Optional[str] = None


class WcagReference(BaseModel):
    model_config = _OPEN

    name: Optional[str] = None
    link: Optional[str] = None


class WaveItem(BaseModel):
    """A single issue type found on the page."""

    model_config = _OPEN

    id: Optional[str] = None
    description: Optional[str] = None
    count: Optional[Number] = None
    selectors: Optional[List[Any]] = None
    # reporttype 4 returns either objects or positional arrays
    contrastdata: Optional[List[Union[ContrastDetail, List[Any]]]] = None
    wcag: Optional[List[_lenient(WcagReference)]] = None


# Entries that do not fit an issue record (summary counters, free-form
# fields added by the API) are kept as raw values.
CategoryEntry = _lenient(WaveItem)


class Categories(BaseModel):
    model_config = _OPEN

    error: Optional[Dict[str, CategoryEntry]] = None
    alert: Optional[Dict[str, CategoryEntry]] = None
    feature: Optional[Dict[str, CategoryEntry]] = None
    structure: Optional[Dict[str, CategoryEntry]] = None
    aria: Optional[Dict[str, CategoryEntry]] = None
    contrast: Optional[Dict[str, CategoryEntry]] = None


class Statistics(BaseModel):
    model_config = _OPEN

    pagetitle: Optional[str] = None
    pageurl: Optional[str] = None
    time: Optional[Number] = None
    creditsremaining: Optional[Number] = None
    allitemcount: Optional[Number] = None
    totalelements: Optional[Number] = None
    waveurl: Optional[str] = None


class ResponseStatus(BaseModel):
    model_config = _OPEN

    success: Union[bool, Number] = True
    httpstatuscode: Optional[Number] = None


class FailureStatus(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: Literal[False]
    message: Any = None
    code: Any = None


class FailurePayload(BaseModel):
    """Body returned when the API refuses a request."""

    model_config = ConfigDict(extra="allow")

    status: FailureStatus


class AnalysisResult(BaseModel):
    """Accessibility report for one page.

    A missing category, or a missing issue id inside a category, means no
    issue of that kind was found. Keys absent from the payload stay absent
    and values are never coerced: ``model_dump(exclude_unset=True)`` gives
    back the payload. A block that does not fit its model (``null``, or a
    field of an unexpected type) is kept as the raw value; use ``stat`` and
    ``category`` to read either form.
    """

    model_config = ConfigDict(extra="allow")

    status: _lenient(ResponseStatus) = Field(default_factory=ResponseStatus)
    statistics: _lenient(Statistics) = Field(default_factory=Statistics)
    categories: _lenient(Categories) = Field(default_factory=Categories)

    def stat(self, key: str) -> Any:
        return field_value(self.statistics, key)

    @property
    def credits_remaining(self) -> Optional[Number]:
        return self.stat("creditsremaining")

    @property
    def report_url(self) -> Optional[str]:
        return self.stat("waveurl")

    def category(self, name: str) -> Dict[str, WaveItem]:
        """Issue records of a category, empty when the category is clean.

        Records that failed validation are returned unvalidated, with
        their raw field values.
        """
        if name not in CATEGORY_NAMES:
            raise ValueError(f"Unknown category: {name}")
        entries = field_value(self.categories, name)
        if not isinstance(entries, dict):
            return {}

        items = {}
        for key, value in entries.items():
            if isinstance(value, WaveItem):
                items[key] = value
            elif isinstance(value, dict):
                items[key] = WaveItem.model_construct(**value)
        return items

    def issue_types(self, name: str) -> int:
        return len(self.category(name))

    def instance_count(self, name: str) -> int:
        return sum(as_count(item.count) for item in self.category(name).values())

    def summary(self) -> Dict[str, int]:
        """Number of issue types per category."""
        return {name: self.issue_types(name) for name in CATEGORY_NAMES}


def _status_tag(value: Any) -> str:
    status = field_value(value, "status")
    return "failure" if field_value(status, "success") is False else "success"


WaveResponse = Annotated[
    Union[
        Annotated[AnalysisResult, Tag("success")],
        Annotated[FailurePayload, Tag("failure")],
    ],
    Discriminator(_status_tag),
]

response_adapter: TypeAdapter = TypeAdapter(WaveResponse)
