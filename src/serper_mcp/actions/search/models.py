from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_QUERY_LENGTH = 400
MAX_QUERY_WORDS = 50
MAX_NUM_RESULTS = 20
DEFAULT_NUM_RESULTS = 10


class Freshness(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# Brave-style codes still sent by older clients
FRESHNESS_ALIASES = {
    "pd": Freshness.DAY,
    "pw": Freshness.WEEK,
    "pm": Freshness.MONTH,
    "py": Freshness.YEAR,
}


class SafeSearch(str, Enum):
    OFF = "off"
    MODERATE = "moderate"
    STRICT = "strict"


def query_problem(query: Any) -> Optional[str]:
    """Return why `query` is unusable, or None when it is acceptable."""
    if not isinstance(query, str):
        return "Query must be a string"
    if not query.strip():
        return "Query parameter is required and must be a non-empty string"
    if len(query) > MAX_QUERY_LENGTH:
        return f"Query too long (max {MAX_QUERY_LENGTH} characters)"
    if len(query.split()) > MAX_QUERY_WORDS:
        return f"Query too long (max {MAX_QUERY_WORDS} words)"
    return None


class SearchOptions(BaseModel):
    """Arguments of a search tool call with defaults applied."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    query: str
    num_results: int = Field(default=DEFAULT_NUM_RESULTS, description="Requested result count; clamped when sent")
    country: str = "US"
    search_lang: str = "en"
    ui_lang: str = "en-US"
    freshness: Optional[Freshness] = None
    safesearch: SafeSearch = SafeSearch.MODERATE
    summary: bool = False

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_values(cls, data: Any) -> Any:
        # null or "" means "use the default", same as leaving the field out
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None and v != ""}
        return data

    @field_validator("query")
    @classmethod
    def _check_query(cls, value: str) -> str:
        problem = query_problem(value)
        if problem:
            raise ValueError(problem)
        return value.strip()

    @field_validator("num_results")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        return max(1, value)

    @field_validator("freshness", mode="before")
    @classmethod
    def _resolve_freshness_alias(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return FRESHNESS_ALIASES.get(value, value)
        return value

    @field_validator("safesearch", mode="before")
    @classmethod
    def _lower_safesearch(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class SearchResult(BaseModel):
    """One entry of a Serper result array. Which fields are set depends on the search type."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    title: Optional[str] = None
    link: Optional[str] = None
    snippet: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    source: Optional[str] = None
    channel: Optional[str] = None
    duration: Optional[str] = None
    date: Optional[str] = None
    price: Optional[str] = None
    rating: Optional[str] = None
