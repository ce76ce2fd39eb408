"""Test fixtures for terraform-mcp."""

import stat
from pathlib import Path

import pytest

from terraform_mcp import AdapterConfig, TerraformAdapter

# Stand-in for the terraform binary. Prints its working directory and each
# argument on its own line. Behavior is steered through environment
# variables, which the child inherits:
#   FAKE_TF_STDOUT  replaces the normal stdout
#   FAKE_TF_QUIET   suppresses the normal stdout
#   FAKE_TF_STDERR  written to stderr
#   FAKE_TF_EXIT    exit code
#   FAKE_TF_SLEEP   sleep this many seconds instead of doing anything
#   FAKE_TF_PIDFILE write the process id here before sleeping
FAKE_TERRAFORM_SCRIPT = """#!/bin/sh
if [ -n "$FAKE_TF_SLEEP" ]; then
    if [ -n "$FAKE_TF_PIDFILE" ]; then
        echo $$ > "$FAKE_TF_PIDFILE"
    fi
    exec sleep "$FAKE_TF_SLEEP"
fi
if [ -n "$FAKE_TF_STDOUT" ]; then
    printf '%s' "$FAKE_TF_STDOUT"
elif [ -z "$FAKE_TF_QUIET" ]; then
    echo "cwd=$(pwd)"
    for arg in "$@"; do
        echo "arg=$arg"
    done
fi
if [ -n "$FAKE_TF_STDERR" ]; then
    printf '%s' "$FAKE_TF_STDERR" >&2
fi
exit "${FAKE_TF_EXIT:-0}"
"""

@pytest.fixture(autouse=True)
def _clean_fake_terraform_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the fake binary and config."""
    for var in (
        "FAKE_TF_STDOUT",
        "FAKE_TF_STDERR",
        "FAKE_TF_EXIT",
        "FAKE_TF_SLEEP",
        "FAKE_TF_QUIET",
        "FAKE_TF_PIDFILE",
        "TERRAFORM_WORKING_DIR",
        "TERRAFORM_BIN",
        "TERRAFORM_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_terraform(tmp_path: Path) -> Path:
    """Executable fake terraform script."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "terraform"
    script.write_text(FAKE_TERRAFORM_SCRIPT)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Terraform working directory with a small configuration."""
    work = tmp_path / "infra"
    work.mkdir()
    (work / "main.tf").write_text('resource "null_resource" "example" {}\n')
    (work / "variables.tf").write_text('variable "region" {\n  type = string\n}\n')
    (work / "prod.tfvars").write_text('region = "eu-west-1"\n')
    (work / "README.md").write_text("# infra\n")
    return work


@pytest.fixture
def config(workdir: Path, fake_terraform: Path) -> AdapterConfig:
    return AdapterConfig(working_dir=workdir, terraform_bin=str(fake_terraform))


@pytest.fixture
def adapter(config: AdapterConfig) -> TerraformAdapter:
    """Adapter wired to the fake terraform binary and the temp working dir."""
    return TerraformAdapter(config)


@pytest.fixture
def catalog_yaml(tmp_path: Path) -> Path:
    """A small custom catalog file."""
    path = tmp_path / "catalog.yaml"
    path.write_text("""
tools:
  - name: tf_version
    description: Get Terraform version
    command: [version]
    output: prefer_stdout
    schema:
      options:
        dir:
          type: string
          description: Working directory

  - name: tf_state_mv
    description: Move resource in state
    command: [state, mv]
    schema:
      options:
        dir:
          type: string
      positional:
        - name: source
          type: string
          required: true
        - name: destination
          type: string
          required: true

  - name: tf_read_file
    description: Read a Terraform file
    kind: file
    handler: read_file
    schema:
      options:
        file_path:
          type: string
          required: true
""")
    return path
