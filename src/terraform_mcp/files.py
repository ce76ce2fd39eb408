"""Direct filesystem operations for Terraform configuration files."""

from __future__ import annotations

from pathlib import Path

from terraform_mcp.errors import FileOperationError, TerraformFileNotFoundError

TERRAFORM_FILE_SUFFIXES = (".tf", ".tfvars", ".tfstate")

NO_FILES_MESSAGE = "No Terraform files found"


def resolve_path(base_dir: Path, file_path: str) -> Path:
    """Resolve ``file_path`` against ``base_dir`` into an absolute path."""
    return (Path(base_dir) / file_path).resolve()


def list_terraform_files(directory: Path) -> list[str]:
    """Names of entries in ``directory`` with a Terraform suffix, sorted.

    Raises:
        FileOperationError: If the directory cannot be listed.
    """
    try:
        names = [entry.name for entry in Path(directory).iterdir()]
    except OSError as e:
        raise FileOperationError(str(directory), e.strerror or str(e)) from e

    return sorted(name for name in names if name.endswith(TERRAFORM_FILE_SUFFIXES))


def read_file(base_dir: Path, file_path: str) -> str:
    """Read a whole file as UTF-8.

    Raises:
        TerraformFileNotFoundError: If the file does not exist.
        FileOperationError: If the file exists but cannot be read.
    """
    path = resolve_path(base_dir, file_path)
    if not path.exists():
        raise TerraformFileNotFoundError(str(path))

    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileOperationError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileOperationError(str(path), e.strerror or str(e)) from e


def write_file(base_dir: Path, file_path: str, content: str) -> Path:
    """Write ``content`` to a file, replacing any existing content.

    Returns:
        The absolute path written.

    Raises:
        FileOperationError: If the file cannot be written.
    """
    path = resolve_path(base_dir, file_path)
    try:
        path.write_bytes(content.encode("utf-8"))
    except OSError as e:
        raise FileOperationError(str(path), e.strerror or str(e)) from e
    return path
