"""MCP server exposing the terraform CLI to MCP clients.

Usage:
    # Run terraform in the current directory
    terraform-mcp

    # Pin a working directory and binary
    terraform-mcp --working-dir ./infra --terraform-bin /usr/local/bin/terraform

    # With Claude Code
    claude mcp add terraform -- terraform-mcp --working-dir ~/infra

Environment:
    TERRAFORM_WORKING_DIR, TERRAFORM_BIN and TERRAFORM_TIMEOUT provide the
    defaults for the matching flags.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from terraform_mcp.adapter import TerraformAdapter
from terraform_mcp.config import AdapterConfig
from terraform_mcp.errors import ConfigurationError

logger = logging.getLogger(__name__)

SERVER_NAME = "terraform-mcp"


class TerraformTool(Tool):
    """A catalog tool served over MCP.

    Arguments are passed through unvalidated; the adapter and terraform
    itself report anything wrong with them.
    """

    adapter: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        result = await self.adapter.invoke(self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def create_server(adapter: TerraformAdapter) -> FastMCP:
    """Create a FastMCP server with one tool per catalog entry."""
    mcp = FastMCP(SERVER_NAME)
    for descriptor in adapter.list_tools():
        mcp.add_tool(
            TerraformTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.input_schema,
                adapter=adapter,
            )
        )
    return mcp


def build_config(args: argparse.Namespace) -> AdapterConfig:
    """Create config from the environment, overridden by CLI args."""
    config = AdapterConfig.from_env()

    if args.working_dir:
        config = replace(config, working_dir=Path(args.working_dir))
    if args.terraform_bin:
        config = replace(config, terraform_bin=args.terraform_bin)
    if args.timeout is not None:
        config = replace(config, timeout=args.timeout)

    return config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="MCP server for the Terraform CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use the current directory
  terraform-mcp

  # Explicit working directory, 10 minute limit per command
  terraform-mcp --working-dir ./infra --timeout 600

  # Add to Claude Code
  claude mcp add terraform -- terraform-mcp --working-dir ~/infra
        """,
    )

    parser.add_argument(
        "--working-dir",
        help="Base directory for terraform commands (default: $TERRAFORM_WORKING_DIR or cwd)",
    )
    parser.add_argument(
        "--terraform-bin",
        help="Terraform executable (default: $TERRAFORM_BIN or terraform)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds before a terraform command is killed (default: no limit)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    # stdout carries the MCP stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ConfigurationError as e:
        parser.error(str(e))

    adapter = TerraformAdapter(config)
    mcp = create_server(adapter)

    logger.info(
        "Terraform MCP server running (working dir: %s, binary: %s)",
        config.working_dir,
        config.terraform_bin,
    )

    # Run MCP server (stdio transport by default)
    mcp.run()


if __name__ == "__main__":
    main()
