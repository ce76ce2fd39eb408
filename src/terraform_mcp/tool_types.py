"""Records passed between the catalog, the adapter and the MCP layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolDescriptor:
    """A tool as advertised to MCP clients.

    Fixed at process start. ``input_schema`` is a JSON-schema object with
    only the keys a client needs (type, description, required).
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    def parameter_names(self) -> list[str]:
        """Names of the declared input properties, in declaration order."""
        return list(self.input_schema.get("properties", {}))

    def __repr__(self) -> str:
        params = ", ".join(self.parameter_names())
        return f"{self.name}({params}): {self.description}"


@dataclass(frozen=True)
class CommandResult:
    """Captured output of one terraform child process."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ToolResult:
    """Text returned to the caller plus the error flag."""

    text: str
    is_error: bool = False
