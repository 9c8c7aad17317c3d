from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData


def ok(data: dict = None):
    return data or dict()


def error(message: str = "error", code: int = INTERNAL_ERROR, data: dict = None) -> McpError:
    return McpError(
        ErrorData(
            code=code,
            message=message,
            data=data,
        )
    )

def invalid_params(message: str) -> McpError:
    return error(message=message, code=INVALID_PARAMS)

def internal_error(message: str) -> McpError:
    return error(message=message, code=INTERNAL_ERROR)