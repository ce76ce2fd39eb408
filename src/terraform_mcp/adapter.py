"""Terraform adapter: the dispatch table behind every MCP tool."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from terraform_mcp import files
from terraform_mcp.catalog import (
    FILE_KIND,
    TerraformToolDefinition,
    load_default_catalog,
)
from terraform_mcp.command_builder import TerraformCommandBuilder
from terraform_mcp.config import AdapterConfig
from terraform_mcp.errors import (
    TerraformExecutionError,
    TerraformMCPError,
    TerraformTimeoutError,
    ToolCallError,
    ToolNotFoundError,
)
from terraform_mcp.runner import run_terraform
from terraform_mcp.tool_types import CommandResult, ToolDescriptor, ToolResult

logger = logging.getLogger(__name__)

FORMATTING_OK = "Formatting OK"


def format_output(policy: str, result: CommandResult) -> str:
    """Combine captured streams according to a tool's output policy."""
    if policy == "prefer_stdout":
        return result.stdout or result.stderr
    if policy == "format_check":
        if result.ok:
            return FORMATTING_OK + (f"\n{result.stdout}" if result.stdout else "")
        return result.stdout + result.stderr
    return result.stdout + result.stderr


class TerraformAdapter:
    """Adapter exposing the terraform CLI as a fixed set of tools.

    Each call either runs terraform once in a child process or performs
    one file operation. No state is kept between calls.

    Usage:
        adapter = TerraformAdapter(AdapterConfig(working_dir=Path("./infra")))
        descriptors = adapter.list_tools()
        text = await adapter.call_tool("tf_plan", {"var": {"region": "eu-west-1"}})
        result = await adapter.invoke("tf_unknown", {})  # ToolResult(is_error=True)
    """

    def __init__(
        self,
        config: AdapterConfig | None = None,
        definitions: list[TerraformToolDefinition] | None = None,
    ) -> None:
        """Initialize adapter.

        Args:
            config: Adapter configuration. Loaded from the environment if None.
            definitions: Tool definitions. The packaged catalog if None.
        """
        self.config = config if config is not None else AdapterConfig.from_env()

        if definitions is None:
            definitions = load_default_catalog()

        self._definitions: dict[str, TerraformToolDefinition] = {d.name: d for d in definitions}
        self._builders: dict[str, TerraformCommandBuilder] = {
            d.name: TerraformCommandBuilder(d) for d in definitions if d.kind != FILE_KIND
        }
        self._file_handlers: dict[str, Callable[[str, Path, Mapping[str, Any]], str]] = {
            "list_files": self._list_files,
            "read_file": self._read_file,
            "write_file": self._write_file,
        }
        self._descriptors = [d.descriptor() for d in definitions]

    def list_tools(self) -> list[ToolDescriptor]:
        """List the tool catalog, in catalog order."""
        return list(self._descriptors)

    def get_definition(self, name: str) -> TerraformToolDefinition:
        """Look up a tool definition.

        Raises:
            ToolNotFoundError: If the tool is not in the catalog.
        """
        if name not in self._definitions:
            raise ToolNotFoundError(name, list(self._definitions.keys()))
        return self._definitions[name]

    def describe(self, tool_name: str) -> dict[str, str]:
        """Get parameter descriptions for a tool.

        Returns:
            Dict mapping parameter names to descriptions.

        Raises:
            ToolNotFoundError: If the tool is not in the catalog.
        """
        properties = self.get_definition(tool_name).input_schema()["properties"]
        return {name: prop.get("description", "") for name, prop in properties.items()}

    def build_command(self, name: str, args: Mapping[str, Any]) -> list[str]:
        """Build the terraform argument list a call would run.

        Raises:
            ToolNotFoundError: If the tool is unknown.
            ToolCallError: If the tool is a file tool or the arguments are unusable.
        """
        tool_def = self.get_definition(name)
        builder = self._builders.get(name)
        if builder is None:
            raise ToolCallError(name, dict(args), ValueError(f"'{name}' does not run terraform"))
        try:
            return builder.build(args)
        except ValueError as e:
            raise ToolCallError(tool_def.name, dict(args), cause=e) from e

    async def call_tool(self, name: str, args: Mapping[str, Any] | None = None) -> str:
        """Run a tool and return its text output.

        Args:
            name: Tool name.
            args: Tool arguments.

        Returns:
            The tool's text output. A non-zero terraform exit still returns
            the captured text.

        Raises:
            ToolNotFoundError: If the tool is unknown.
            ToolCallError: If the arguments cannot be used.
            TerraformExecutionError: If terraform cannot be launched.
            TerraformTimeoutError: If terraform exceeds the configured timeout.
            TerraformFileNotFoundError: If tf_read_file targets a missing file.
            FileOperationError: If a file tool hits any other OS error.
        """
        args = args or {}
        tool_def = self.get_definition(name)

        dir = args.get("dir")
        if dir is not None and not isinstance(dir, str):
            raise ToolCallError(name, dict(args), ValueError("Parameter 'dir' must be a string"))
        cwd = self.config.resolve_dir(dir)

        if tool_def.kind == FILE_KIND:
            return self._file_handlers[tool_def.handler](name, cwd, args)

        cmd = self.build_command(name, args)

        try:
            result = await run_terraform(
                cmd,
                cwd=cwd,
                terraform_bin=self.config.terraform_bin,
                timeout=self.config.timeout,
            )
        except TimeoutError:
            logger.warning("%s timed out after %ss in %s", name, self.config.timeout, cwd)
            raise TerraformTimeoutError(name, self.config.timeout or 0.0) from None
        except OSError as e:
            raise TerraformExecutionError(name, e) from e

        return format_output(tool_def.output, result)

    async def invoke(self, name: str, args: Mapping[str, Any] | None = None) -> ToolResult:
        """Run a tool, converting adapter errors into an error-flagged result."""
        try:
            return ToolResult(text=await self.call_tool(name, args))
        except TerraformMCPError as e:
            return ToolResult(text=f"Error: {e}", is_error=True)

    def _list_files(self, name: str, cwd: Path, args: Mapping[str, Any]) -> str:
        names = files.list_terraform_files(cwd)
        return "\n".join(names) if names else files.NO_FILES_MESSAGE

    def _read_file(self, name: str, cwd: Path, args: Mapping[str, Any]) -> str:
        return files.read_file(cwd, self._require(args, name, "file_path"))

    def _write_file(self, name: str, cwd: Path, args: Mapping[str, Any]) -> str:
        file_path = self._require(args, name, "file_path")
        content = self._require(args, name, "content")
        path = files.write_file(cwd, file_path, content)
        return f"File written: {path}"

    @staticmethod
    def _require(args: Mapping[str, Any], tool_name: str, param: str) -> str:
        value = args.get(param)
        if value is None:
            raise ToolCallError(
                tool_name, dict(args), ValueError(f"Required parameter '{param}' is missing")
            )
        return str(value)
