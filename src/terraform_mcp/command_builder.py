"""Argument-to-token translation for terraform tools."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from terraform_mcp.catalog import TerraformToolDefinition


def format_value(value: Any) -> str:
    """Render an argument value the way terraform expects it on the command line.

    Lists and dicts are emitted as JSON, which terraform parses as HCL.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value)
    return str(value)


class TerraformCommandBuilder:
    """Build terraform argument lists from a tool definition + arguments.

    Handles:
    - Boolean flags (true -> include flag, false -> omit)
    - String options (-flag=value, omitted when empty)
    - Object options (-flag=key=value, one token per entry)
    - Positional arguments, appended last in declared order

    The executable itself is not part of the result; the runner adds it.
    """

    def __init__(self, tool_def: TerraformToolDefinition) -> None:
        self.tool_def = tool_def

    def build(self, args: Mapping[str, Any]) -> list[str]:
        """Build the terraform argument list.

        Args:
            args: Arguments dictionary. Unknown keys are ignored.

        Returns:
            Argument list, starting with the tool's base command tokens.

        Raises:
            ValueError: If an object option is given something other than a mapping.
        """
        cmd = list(self.tool_def.command)

        # Add options first
        for opt_name, opt_spec in self.tool_def.options.items():
            flag = opt_spec.get("flag")
            if flag is None or opt_name not in args:
                continue

            value = args[opt_name]
            opt_type = opt_spec.get("type", "string")

            if opt_type == "boolean":
                if value:
                    cmd.append(flag)
            elif opt_type == "object":
                if value is None:
                    continue
                if not isinstance(value, Mapping):
                    raise ValueError(f"Parameter '{opt_name}' must be an object of key/value pairs")
                for key, item in value.items():
                    cmd.append(f"{flag}={key}={format_value(item)}")
            else:  # string
                if value is not None and value != "":
                    cmd.append(f"{flag}={format_value(value)}")

        # Add positional arguments last
        for pos in self.tool_def.positional:
            value = args.get(pos["name"])
            if value is not None and value != "":
                cmd.append(format_value(value))

        return cmd
