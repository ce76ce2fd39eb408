"""Subprocess execution of the terraform binary."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from terraform_mcp.tool_types import CommandResult

logger = logging.getLogger(__name__)


async def run_terraform(
    args: Sequence[str],
    cwd: Path | str,
    terraform_bin: str = "terraform",
    timeout: float | None = None,
) -> CommandResult:
    """Run terraform once and capture its output.

    A non-zero exit code is not an error here; callers decide what to do
    with it.

    Args:
        args: Arguments following the executable.
        cwd: Working directory for the child process.
        terraform_bin: Executable to launch.
        timeout: Seconds to wait before killing the child. None waits forever.

    Raises:
        OSError: If the executable or working directory cannot be used.
        TimeoutError: If the timeout elapses. The child has been killed and reaped.
        asyncio.CancelledError: If the calling task is cancelled. The child is
            killed and reaped first.
    """
    logger.debug("Running %s %s in %s", terraform_bin, " ".join(args), cwd)

    # create_subprocess_exec passes arguments as-is (no shell interpretation)
    process = await asyncio.create_subprocess_exec(
        terraform_bin,
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd),
    )

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except (TimeoutError, asyncio.CancelledError):
        process.kill()
        await process.wait()
        raise

    logger.debug("%s %s exited with %s", terraform_bin, args[0] if args else "", process.returncode)

    return CommandResult(
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
        returncode=process.returncode if process.returncode is not None else 0,
    )
