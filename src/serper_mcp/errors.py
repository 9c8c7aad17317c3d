from typing import Optional


class SerperMCPError(Exception):
    """Base class for errors raised by the Serper MCP server."""


class ConfigurationError(SerperMCPError):
    """Startup configuration is missing or invalid."""


class InvalidParamsError(SerperMCPError):
    """A tool call was rejected before reaching the Serper API."""


class SerperAPIError(SerperMCPError):
    """
    The Serper API could not be reached or answered with a failure.

    `status_code` is None for transport failures (DNS, connect, read timeout).
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, status_code: int, body: str) -> "SerperAPIError":
        return cls(f"Serper API error ({status_code}): {body}", status_code=status_code, body=body)
