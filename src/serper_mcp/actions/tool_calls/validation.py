from typing import Any, Mapping, Optional

from ...errors import InvalidParamsError
from ..search.models import query_problem
from .get_tools import get_tool

def validate_tool_args(tool_name: str, args: Optional[Mapping[str, Any]]) -> None:
    """
    Reject a tool call before any request is built.

    Raises:
        InvalidParamsError: for an unknown tool, a missing required argument
            or an empty or oversized query
    """
    tool = get_tool(tool_name)
    if tool is None:
        raise InvalidParamsError(f"Unknown tool: {tool_name}")

    args = args or {}
    for required in tool.inputSchema.get("required", []):
        if required not in args:
            raise InvalidParamsError(f"Missing required parameter: {required}")

    if "query" in args:
        problem = query_problem(args["query"])
        if problem:
            raise InvalidParamsError(problem)
