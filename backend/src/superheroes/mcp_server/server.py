"""Expose superhero lookup through the Model Context Protocol."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from superheroes.config import get_data_path
from superheroes.repositories.hero_repository import HeroRepository
from superheroes.services.hero_service import HeroService
from superheroes.services.presenters import hero_to_markdown

logger = logging.getLogger(__name__)

SERVER_NAME = "superheroes-mcp"
TOOL_NAME = "get_superhero"

app = Server(SERVER_NAME)

hero_service: HeroService | None = None


def get_hero_service() -> HeroService:
    global hero_service
    if hero_service is None:
        hero_service = HeroService(HeroRepository(get_data_path()))
    return hero_service


@app.list_tools()
async def handle_list_tools() -> list[Tool]:
    return [
        Tool(
            name=TOOL_NAME,
            description="Get superhero details by name or id",
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Name of the superhero (optional)",
                    },
                    "id": {
                        "type": "string",
                        "description": "ID of the superhero (optional)",
                    },
                },
            },
        )
    ]


@app.call_tool()
async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Run a tool call. Errors propagate and are reported as tool errors."""
    if name != TOOL_NAME:
        raise ValueError(f"Unknown tool: {name}")

    arguments = arguments or {}
    hero = get_hero_service().lookup(
        name=arguments.get("name"),
        hero_id=arguments.get("id"),
    )
    return [TextContent(type="text", text=hero_to_markdown(hero))]


async def run(data_path: Path | None = None) -> None:
    global hero_service
    if data_path is not None:
        hero_service = HeroService(HeroRepository(data_path))

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Superhero MCP Server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Superheroes MCP server (stdio)")
    parser.add_argument(
        "--data-path",
        type=Path,
        default=None,
        help="Path to superheroes.json (defaults to the configured dataset)",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=args.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(args.data_path))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
