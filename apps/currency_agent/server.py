from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from packages.core.config import load_env_file
from packages.core.currency import ConversionError, convert_currency, format_conversion
from packages.core.logging_config import configure_logging
from packages.core.observability import init_tracing


SERVER_NAME = "Currency Converter MCP Server"
SERVER_VERSION = "1.0.0"
TOOL_NAME = "ConvertCurrency"
TOOL_DESCRIPTION = "Convert amount from one currency to another currency"

_logger = logging.getLogger("agent_lab.currency_agent")


class ConvertCurrencyArgs(BaseModel):
    # "from" is a keyword, so the wire names are aliases
    model_config = ConfigDict(populate_by_name=True)

    amount: float = Field(description="Amount to convert, e.g: 100, 200")
    from_currency: str = Field(alias="from", description="source currency code e.g: USD")
    to_currency: str = Field(alias="to", description="target currency code e.g: INR")


def _text(text: str) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=text)]


server = Server(SERVER_NAME, version=SERVER_VERSION)


@server.list_tools()
async def list_tools() -> List[types.Tool]:
    return [
        types.Tool(
            name=TOOL_NAME,
            description=TOOL_DESCRIPTION,
            inputSchema=ConvertCurrencyArgs.model_json_schema(by_alias=True),
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
    if name != TOOL_NAME:
        raise ValueError(f"Unknown tool: {name}")
    try:
        args = ConvertCurrencyArgs.model_validate(arguments or {})
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        error = ConversionError(
            kind="invalid_arguments",
            message=f"Invalid arguments: {details}",
            currency="",
        )
        return _text(format_conversion(error))
    try:
        result = await asyncio.to_thread(
            convert_currency, args.amount, args.from_currency, args.to_currency
        )
    except Exception as exc:
        _logger.exception("convert_currency_failed args=%s", arguments)
        result = ConversionError(kind="unexpected", message=str(exc), currency=args.from_currency)
    if isinstance(result, ConversionError):
        _logger.info("conversion_error kind=%s currency=%s", result.kind, result.currency)
    return _text(format_conversion(result))


async def serve() -> None:
    async with stdio_server() as (read_stream, write_stream):
        _logger.info("mcp_server_connected name=%r", SERVER_NAME)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    load_env_file()
    configure_logging(destination="stderr")
    init_tracing("agent-lab.currency-mcp")
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass
    except Exception:
        _logger.exception("mcp_server_start_failed name=%r", SERVER_NAME)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
