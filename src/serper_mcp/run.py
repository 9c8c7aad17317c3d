import argparse
import asyncio
import sys
from typing import List, Optional

from . import __version__
from .actions.search.formatter import format_server_info
from .api.serper import SerperClient
from .config import LOG_LEVELS, load_settings
from .errors import ConfigurationError
from .logger import configure_logging, log
from .server import TRANSPORTS, SerperMCPServer, get_server_info

EPILOG = """\
Environment Variables:
  SERPER_API_KEY              Your Serper API key (required)
  SERPER_API_URL              Serper API base URL
  SERPER_MCP_TRANSPORT        Transport mode ("stdio" or "http")
  SERPER_MCP_PORT             HTTP server port
  SERPER_MCP_HOST             HTTP server host
  SERPER_MCP_LOG_LEVEL        Logging level

Examples:
  serper-mcp
  serper-mcp --transport http --port 3000
"""

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serper-mcp",
        description="Serper search MCP server (web, images, videos, news, shopping)",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--transport", choices=TRANSPORTS, help="Transport mode (default: stdio)")
    parser.add_argument("--port", type=int, help="HTTP server port (default: 8080)")
    parser.add_argument("--host", type=str, help='HTTP server host (default: "0.0.0.0")')
    parser.add_argument("--log-level", type=str.lower, choices=LOG_LEVELS, help='Logging level (default: "info")')
    parser.add_argument("--api-key", type=str, help="Serper API key")
    parser.add_argument("--check-key", action="store_true", help="Validate the API key against Serper and exit")
    parser.add_argument("--info", action="store_true", help="Show server information and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

async def check_api_key(api_key: str, base_url: str) -> bool:
    async with SerperClient(api_key, base_url=base_url) as client:
        return await client.validate_api_key()

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.info:
        sys.stdout.write(format_server_info(get_server_info()))
        return 0

    try:
        settings = load_settings({
            "api_key": args.api_key,
            "transport": args.transport,
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
        })
    except ConfigurationError as e:
        configure_logging()
        log.error(f"Failed to start server: {e}")
        return 1

    configure_logging(settings.SERPER_MCP_LOG_LEVEL)

    if args.check_key:
        valid = asyncio.run(check_api_key(settings.SERPER_API_KEY, settings.SERPER_API_URL))
        log.info("Serper API key is valid" if valid else "Serper API key was rejected")
        return 0 if valid else 1

    try:
        asyncio.run(SerperMCPServer(settings).run())
    except KeyboardInterrupt:
        log.info("Serper MCP server stopped")
    except Exception as e:
        log.error(f"Failed to start server: {e}", exc_info=True)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
