from typing import Dict

from .models import SearchType
from .tool_calls.get_tools import get_default_tools

def get_action_registry() -> Dict[str, SearchType]:
    """Tool name -> search type it runs."""
    registry = {
        "search_web": SearchType.WEB,
        "search_images": SearchType.IMAGES,
        "search_videos": SearchType.VIDEOS,
        "search_news": SearchType.NEWS,
        "search_shopping": SearchType.SHOPPING,
    }

    unregistered = [tool.name for tool in get_default_tools() if tool.name not in registry]
    if unregistered:
        raise RuntimeError(f"Tools without a search type: {', '.join(unregistered)}")

    return registry
