"""terraform-mcp: the Terraform CLI as MCP tools."""

from terraform_mcp.adapter import TerraformAdapter
from terraform_mcp.config import AdapterConfig

# All errors
from terraform_mcp.errors import (
    ConfigurationError,
    FileOperationError,
    TerraformExecutionError,
    TerraformFileNotFoundError,
    TerraformMCPError,
    TerraformTimeoutError,
    ToolCallError,
    ToolNotFoundError,
)

# Core types
from terraform_mcp.tool_types import CommandResult, ToolDescriptor, ToolResult

__version__ = "0.1.0"

__all__ = [
    # Core
    "TerraformAdapter",
    "AdapterConfig",
    # Types
    "ToolDescriptor",
    "ToolResult",
    "CommandResult",
    # Errors
    "TerraformMCPError",
    "ToolNotFoundError",
    "ToolCallError",
    "TerraformExecutionError",
    "TerraformTimeoutError",
    "TerraformFileNotFoundError",
    "FileOperationError",
    "ConfigurationError",
]
