from enum import Enum
from typing import Optional, Protocol


class SearchType(str, Enum):
    WEB = "web"
    IMAGES = "images"
    VIDEOS = "videos"
    NEWS = "news"
    SHOPPING = "shopping"

    @property
    def result_key(self) -> str:
        """Key of the result array in a Serper response."""
        return RESULT_KEYS[self]

    @property
    def type_selector(self) -> Optional[str]:
        """Value of the `type` request field; web search sends none."""
        return TYPE_SELECTORS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


RESULT_KEYS = {
    SearchType.WEB: "organic",
    SearchType.IMAGES: "images",
    SearchType.VIDEOS: "videos",
    SearchType.NEWS: "news",
    SearchType.SHOPPING: "shopping",
}

TYPE_SELECTORS = {
    SearchType.WEB: None,
    SearchType.IMAGES: "image",
    SearchType.VIDEOS: "video",
    SearchType.NEWS: "news",
    SearchType.SHOPPING: "shopping",
}


class SearchClient(Protocol):
    async def search(self, query: str, search_type: SearchType, options) -> dict:
        ...
