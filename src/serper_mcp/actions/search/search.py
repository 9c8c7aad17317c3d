from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ...errors import InvalidParamsError
from ...logger import log
from ..models import SearchClient, SearchType
from .formatter import format_results
from .models import SearchOptions

def parse_search_options(arguments: Optional[Mapping[str, Any]]) -> SearchOptions:
    try:
        return SearchOptions.model_validate(dict(arguments or {}))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}" for err in e.errors()
        )
        raise InvalidParamsError(f"Invalid arguments: {details}") from e

async def search_handler(client: SearchClient, search_type: SearchType, arguments: Optional[Mapping[str, Any]]) -> str:
    """
    Run one search tool call and return the formatted report.

    Raises:
        InvalidParamsError: if the arguments cannot be turned into options
        SerperAPIError: if the upstream request fails
    """
    options = parse_search_options(arguments)

    log.info(
        "Searching Serper",
        extra={"search_type": search_type.value, "num_results": options.num_results},
    )
    search_results = await client.search(options.query, search_type, options)

    return format_results(search_results, options.num_results, search_type)
