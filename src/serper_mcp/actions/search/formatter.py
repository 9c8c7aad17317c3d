from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from ...logger import log
from ..models import SearchType
from .models import SearchResult

NO_RESULTS = "No search results found."


def _web_lines(result: SearchResult) -> List[str]:
    lines = [f"**URL:** {result.link or 'Unknown'}"]
    if result.snippet:
        lines.append(f"**Snippet:** {result.snippet}")
    return lines

def _image_lines(result: SearchResult) -> List[str]:
    lines = [
        f"**Image URL:** {result.image_url or 'Unknown'}",
        f"**Source:** {result.source or 'Unknown'}",
    ]
    if result.link:
        lines.append(f"**Page:** {result.link}")
    return lines

def _video_lines(result: SearchResult) -> List[str]:
    lines = [
        f"**Channel:** {result.channel or 'Unknown'}",
        f"**Duration:** {result.duration or 'Unknown'}",
    ]
    if result.link:
        lines.append(f"**URL:** {result.link}")
    return lines

def _news_lines(result: SearchResult) -> List[str]:
    lines = [
        f"**Source:** {result.source or 'Unknown'}",
        f"**Published:** {result.date or 'Unknown'}",
    ]
    if result.link:
        lines.append(f"**URL:** {result.link}")
    if result.snippet:
        lines.append(f"**Snippet:** {result.snippet}")
    return lines

def _shopping_lines(result: SearchResult) -> List[str]:
    lines = [
        f"**Price:** {result.price or 'Price not available'}",
        f"**Source:** {result.source or 'Unknown'}",
    ]
    if result.link:
        lines.append(f"**URL:** {result.link}")
    if result.rating:
        lines.append(f"**Rating:** {result.rating}/5")
    return lines

RENDERERS: Dict[SearchType, Callable[[SearchResult], List[str]]] = {
    SearchType.WEB: _web_lines,
    SearchType.IMAGES: _image_lines,
    SearchType.VIDEOS: _video_lines,
    SearchType.NEWS: _news_lines,
    SearchType.SHOPPING: _shopping_lines,
}


def _parse_result(item: Any) -> Optional[SearchResult]:
    if not isinstance(item, dict):
        return None
    try:
        return SearchResult.model_validate(item)
    except ValidationError as e:
        log.debug(f"Skipping malformed search result: {e}")
        return None

def _echoed_query(response: Dict[str, Any]) -> str:
    params = response.get("searchParameters")
    if isinstance(params, dict) and params.get("q"):
        return str(params["q"])
    return "Unknown query"


def format_results(response: Dict[str, Any], max_results: int, search_type: SearchType) -> str:
    """
    Render a Serper response as Markdown.

    Shows at most `max_results` entries of the array that belongs to
    `search_type` and notes how many were left out. Missing fields fall back
    to placeholders, so this never raises on odd upstream data.
    """
    output = f'## {search_type.display_name} Search Results for "{_echoed_query(response)}"\n\n'

    results = response.get(search_type.result_key)
    if not isinstance(results, list) or not results:
        return output + NO_RESULTS

    render = RENDERERS[search_type]
    shown = 0
    for item in results[:max_results]:
        result = _parse_result(item)
        if result is None:
            continue
        shown += 1
        lines = [f"### {shown}. {result.title or 'Untitled'}", *render(result)]
        output += "\n".join(lines) + "\n\n"

    if len(results) > max_results:
        output += f"*Showing {max_results} of {len(results)} total results.*\n"

    return output


def format_server_info(info: Dict[str, Any]) -> str:
    """Human-readable block for the `--info` CLI flag."""
    lines = [
        f"**{info['name']} v{info['version']}**",
        "",
        f"**Search Types:** {', '.join(t.capitalize() for t in info['search_types'])}",
        f"**Transports:** {', '.join(info['transports'])}",
        "**Features:**",
        *(f"- {feature}" for feature in info["features"]),
    ]
    return "\n".join(lines) + "\n"
