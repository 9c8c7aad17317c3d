from typing import Any, Dict

from ..models import SearchType
from .models import MAX_NUM_RESULTS, Freshness, SafeSearch, SearchOptions

TIME_RANGES = {
    Freshness.DAY: "qdr:d",
    Freshness.WEEK: "qdr:w",
    Freshness.MONTH: "qdr:m",
    Freshness.YEAR: "qdr:y",
}

# moderate is the API default and is never sent
SAFE_FILTERS = {
    SafeSearch.STRICT: "active",
    SafeSearch.OFF: "off",
}

def build_request_body(query: str, search_type: SearchType, options: SearchOptions) -> Dict[str, Any]:
    """Maps a search call onto the Serper request body."""
    request_body: Dict[str, Any] = {
        "q": query.strip(),
        "num": max(1, min(options.num_results, MAX_NUM_RESULTS)),
        "gl": options.country,
        "hl": options.ui_lang,
        "lr": f"lang_{options.search_lang}",
    }

    if search_type.type_selector:
        request_body["type"] = search_type.type_selector

    if options.freshness:
        request_body["tbs"] = TIME_RANGES[options.freshness]

    if options.safesearch in SAFE_FILTERS:
        request_body["safe"] = SAFE_FILTERS[options.safesearch]

    if options.summary:
        request_body["summary"] = True

    return request_body
