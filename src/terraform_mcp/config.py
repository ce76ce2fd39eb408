"""Configuration for the terraform adapter."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from terraform_mcp.errors import ConfigurationError

WORKING_DIR_ENV = "TERRAFORM_WORKING_DIR"
TERRAFORM_BIN_ENV = "TERRAFORM_BIN"
TIMEOUT_ENV = "TERRAFORM_TIMEOUT"


def _parse_timeout(raw: str | None) -> float | None:
    """Parse a timeout string in seconds. Empty means no timeout."""
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"timeout must be a number of seconds, got: {raw!r}") from None


@dataclass(frozen=True)
class AdapterConfig:
    """Configuration for TerraformAdapter.

    Attributes:
        working_dir: Base directory for terraform commands and file tools.
            Used whenever a call does not pass its own ``dir``.
            Defaults to the process's current directory.
        terraform_bin: Executable to run. Resolved on PATH when not absolute.
        timeout: Seconds to wait for a single terraform invocation.
            None means wait indefinitely.
    """

    working_dir: Path = field(default_factory=Path.cwd)
    terraform_bin: str = "terraform"
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        object.__setattr__(self, "working_dir", Path(self.working_dir))

        if not self.terraform_bin or not self.terraform_bin.strip():
            raise ConfigurationError("terraform_bin cannot be empty or whitespace-only")

        if self.timeout is not None and self.timeout <= 0.0:
            raise ConfigurationError(f"timeout must be positive or None, got: {self.timeout}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AdapterConfig:
        """Load configuration from environment variables.

        Reads TERRAFORM_WORKING_DIR, TERRAFORM_BIN and TERRAFORM_TIMEOUT.
        Unset or empty variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        config = cls()

        if working_dir := env.get(WORKING_DIR_ENV):
            config = replace(config, working_dir=Path(working_dir))
        if terraform_bin := env.get(TERRAFORM_BIN_ENV):
            config = replace(config, terraform_bin=terraform_bin)
        timeout = _parse_timeout(env.get(TIMEOUT_ENV))
        if timeout is not None:
            config = replace(config, timeout=timeout)

        return config

    def resolve_dir(self, dir: str | None) -> Path:
        """Return the directory a call should run in.

        Relative paths are taken relative to ``working_dir``.
        """
        return self.working_dir / dir if dir else self.working_dir
