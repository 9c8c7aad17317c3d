from typing import Optional, Tuple

from mcp.types import Tool

from ..search.models import DEFAULT_NUM_RESULTS, MAX_NUM_RESULTS, MAX_QUERY_LENGTH, MAX_QUERY_WORDS

NUM_RESULTS = {
    "type": "number",
    "description": f"Number of results to return (1-{MAX_NUM_RESULTS}, default: {DEFAULT_NUM_RESULTS})",
    "minimum": 1,
    "maximum": MAX_NUM_RESULTS,
    "default": DEFAULT_NUM_RESULTS,
}
COUNTRY = {"type": "string", "description": 'Country code (default: "US")', "default": "US"}
SEARCH_LANG = {"type": "string", "description": 'Search language (default: "en")', "default": "en"}
UI_LANG = {"type": "string", "description": 'UI language (default: "en-US")', "default": "en-US"}
FRESHNESS = {
    "type": "string",
    "description": 'Time filter: "day", "week", "month" or "year"',
    "enum": ["day", "week", "month", "year"],
}
SAFESEARCH = {
    "type": "string",
    "description": "Content filtering",
    "enum": ["off", "moderate", "strict"],
    "default": "moderate",
}
SUMMARY = {"type": "boolean", "description": "Enable AI summarization (default: false)", "default": False}


def _schema(query_description: str, **properties) -> dict:
    return {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": query_description},
            **properties,
        },
        "required": ["query"],
    }


DEFAULT_TOOLS: Tuple[Tool, ...] = (
    Tool(
        name="search_web",
        description="Search the web using Serper API (Google search results)",
        inputSchema=_schema(
            f"The search query to execute (max {MAX_QUERY_LENGTH} chars, {MAX_QUERY_WORDS} words)",
            num_results=NUM_RESULTS,
            country=COUNTRY,
            search_lang=SEARCH_LANG,
            ui_lang=UI_LANG,
            freshness=FRESHNESS,
            safesearch=SAFESEARCH,
            summary=SUMMARY,
        ),
    ),
    Tool(
        name="search_images",
        description="Search for images using Serper API",
        inputSchema=_schema(
            "The image search query",
            num_results=NUM_RESULTS,
            country=COUNTRY,
            search_lang=SEARCH_LANG,
        ),
    ),
    Tool(
        name="search_videos",
        description="Search for videos using Serper API",
        inputSchema=_schema(
            "The video search query",
            num_results=NUM_RESULTS,
            country=COUNTRY,
            search_lang=SEARCH_LANG,
        ),
    ),
    Tool(
        name="search_news",
        description="Search for news articles using Serper API",
        inputSchema=_schema(
            "The news search query",
            num_results=NUM_RESULTS,
            country=COUNTRY,
            search_lang=SEARCH_LANG,
            freshness=FRESHNESS,
        ),
    ),
    Tool(
        name="search_shopping",
        description="Search for products and shopping results using Serper API",
        inputSchema=_schema(
            "The shopping search query",
            num_results=NUM_RESULTS,
            country=COUNTRY,
            search_lang=SEARCH_LANG,
        ),
    ),
)

def get_default_tools() -> Tuple[Tool, ...]:
    """
    The search tools this server exposes, in listing order.
    """
    return DEFAULT_TOOLS

def get_tool(name: str) -> Optional[Tool]:
    return next((tool for tool in DEFAULT_TOOLS if tool.name == name), None)
