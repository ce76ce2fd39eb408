"""Error types for terraform-mcp.

All errors inherit from TerraformMCPError so the MCP layer can catch them
at a single point and turn them into error-flagged responses.
"""

from typing import Any


class TerraformMCPError(Exception):
    """Base class for all terraform-mcp errors."""

    pass


class ToolNotFoundError(TerraformMCPError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, tool_name: str, available_tools: list[str] | None = None) -> None:
        self.tool_name = tool_name
        self.available_tools = available_tools or []
        super().__init__(f"Unknown tool: {tool_name}")


class ToolCallError(TerraformMCPError):
    """Raised when a tool's arguments cannot be turned into a call."""

    def __init__(
        self,
        tool_name: str,
        tool_args: dict[str, Any],
        cause: Exception,
    ) -> None:
        self.tool_name = tool_name
        self.tool_args = tool_args  # Named tool_args to avoid collision with Exception.args
        self.cause = cause
        super().__init__(f"Tool '{tool_name}' failed: {cause}")


class TerraformExecutionError(TerraformMCPError):
    """Raised when the terraform binary cannot be launched."""

    def __init__(self, tool_name: str, cause: Exception) -> None:
        self.tool_name = tool_name
        self.cause = cause
        super().__init__(f"Tool '{tool_name}' failed to run terraform: {cause}")


class TerraformTimeoutError(TerraformMCPError):
    """Raised when a terraform invocation exceeds the configured timeout."""

    def __init__(self, tool_name: str, timeout_seconds: float) -> None:
        self.tool_name = tool_name
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Tool '{tool_name}' timed out after {timeout_seconds}s")


class TerraformFileNotFoundError(TerraformMCPError):
    """Raised when a file requested through tf_read_file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class FileOperationError(TerraformMCPError):
    """Raised when a file tool fails (permissions, missing directory, decoding)."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access '{path}': {reason}")


class ConfigurationError(TerraformMCPError):
    """Error in configuration (invalid binary name, bad timeout)."""

    pass
