"""Tool catalog parsing.

The catalog is a YAML document listing every tool the server exposes. Each
entry carries the client-facing schema and the rules used to turn
arguments into terraform command-line tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from terraform_mcp.tool_types import ToolDescriptor

TERRAFORM_KIND = "terraform"
FILE_KIND = "file"

OUTPUT_POLICIES = frozenset({"combined", "prefer_stdout", "format_check"})
FILE_HANDLERS = frozenset({"list_files", "read_file", "write_file"})

# Keys used only for command building; never advertised to clients.
_INTERNAL_KEYS = frozenset({"flag", "name", "required"})


@dataclass
class TerraformToolDefinition:
    """Definition of one catalog tool with its schema and argument rules."""

    name: str
    description: str
    kind: str = TERRAFORM_KIND
    command: tuple[str, ...] = ()
    schema: dict[str, Any] = field(default_factory=dict)
    output: str = "combined"
    handler: str | None = None

    @property
    def options(self) -> dict[str, dict[str, Any]]:
        return self.schema.get("options") or {}

    @property
    def positional(self) -> list[dict[str, Any]]:
        return self.schema.get("positional") or []

    def input_schema(self) -> dict[str, Any]:
        """Build the JSON schema advertised to MCP clients."""
        properties: dict[str, Any] = {}
        required: list[str] = []

        for opt_name, opt_spec in self.options.items():
            properties[opt_name] = _public_property(opt_spec)
            if opt_spec.get("required", False):
                required.append(opt_name)

        for pos in self.positional:
            properties[pos["name"]] = _public_property(pos)
            if pos.get("required", False):
                required.append(pos["name"])

        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema(),
        )


def _public_property(spec: dict[str, Any]) -> dict[str, Any]:
    prop = {k: v for k, v in spec.items() if k not in _INTERNAL_KEYS}
    prop.setdefault("type", "string")
    return prop


def parse_tool_dict(data: dict[str, Any]) -> TerraformToolDefinition:
    """Parse a single catalog entry into a TerraformToolDefinition.

    Raises:
        KeyError: If the entry has no name.
        ValueError: If the entry is inconsistent (unknown kind, output policy
            or handler, or a terraform tool without a command).
    """
    name = data["name"]
    kind = data.get("kind", TERRAFORM_KIND)
    command = tuple(str(token) for token in data.get("command", []))
    output = data.get("output", "combined")
    handler = data.get("handler")
    schema = data.get("schema") or {}

    if kind == TERRAFORM_KIND:
        if not command:
            raise ValueError(f"Tool '{name}' has no command defined")
        if output not in OUTPUT_POLICIES:
            raise ValueError(f"Tool '{name}' has unknown output policy '{output}'")
    elif kind == FILE_KIND:
        if handler not in FILE_HANDLERS:
            raise ValueError(f"Tool '{name}' has unknown file handler '{handler}'")
    else:
        raise ValueError(f"Tool '{name}' has unknown kind '{kind}'")

    for pos in schema.get("positional") or []:
        if "name" not in pos:
            raise ValueError(f"Tool '{name}' has a positional parameter without a name")

    return TerraformToolDefinition(
        name=name,
        description=data.get("description", ""),
        kind=kind,
        command=command,
        schema=schema,
        output=output,
        handler=handler,
    )


def parse_catalog(data: dict[str, Any]) -> list[TerraformToolDefinition]:
    """Parse a whole catalog document.

    Raises:
        ValueError: If the document has no tools or repeats a tool name.
    """
    entries = (data or {}).get("tools") or []
    if not entries:
        raise ValueError("Catalog defines no tools")

    definitions: list[TerraformToolDefinition] = []
    seen: set[str] = set()
    for entry in entries:
        tool_def = parse_tool_dict(entry)
        if tool_def.name in seen:
            raise ValueError(f"Tool '{tool_def.name}' is defined more than once")
        seen.add(tool_def.name)
        definitions.append(tool_def)
    return definitions


def parse_catalog_yaml(path: Path) -> list[TerraformToolDefinition]:
    """Parse a catalog YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f)

    return parse_catalog(data)


def load_default_catalog() -> list[TerraformToolDefinition]:
    """Load the catalog shipped with the package."""
    text = resources.files("terraform_mcp").joinpath("catalog.yaml").read_text(encoding="utf-8")
    return parse_catalog(yaml.safe_load(text))
