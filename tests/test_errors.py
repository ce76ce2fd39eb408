"""Tests for error types."""

import pytest

from terraform_mcp import (
    ConfigurationError,
    FileOperationError,
    TerraformExecutionError,
    TerraformFileNotFoundError,
    TerraformMCPError,
    TerraformTimeoutError,
    ToolCallError,
    ToolNotFoundError,
)


class TestErrorHierarchy:
    """All errors inherit from TerraformMCPError."""

    @pytest.mark.parametrize(
        "err",
        [
            ToolNotFoundError("tf_console"),
            ToolCallError("tf_plan", {"var": "x"}, ValueError("bad")),
            TerraformExecutionError("tf_init", FileNotFoundError("terraform")),
            TerraformTimeoutError("tf_apply", 30.0),
            TerraformFileNotFoundError("/srv/infra/main.tf"),
            FileOperationError("/srv/infra", "Permission denied"),
            ConfigurationError("bad"),
        ],
    )
    def test_inheritance(self, err: Exception) -> None:
        assert isinstance(err, TerraformMCPError)
        assert isinstance(err, Exception)


class TestToolNotFoundError:
    def test_message(self) -> None:
        err = ToolNotFoundError("tf_console")
        assert str(err) == "Unknown tool: tf_console"
        assert err.tool_name == "tf_console"
        assert err.available_tools == []

    def test_available_tools(self) -> None:
        err = ToolNotFoundError("tf_console", ["tf_plan", "tf_apply"])
        assert err.available_tools == ["tf_plan", "tf_apply"]


class TestToolCallError:
    def test_attributes(self) -> None:
        cause = ValueError("Parameter 'var' must be an object")
        err = ToolCallError("tf_plan", {"var": "a=1"}, cause)

        assert err.tool_name == "tf_plan"
        assert err.tool_args == {"var": "a=1"}
        assert err.cause is cause
        assert "tf_plan" in str(err)
        assert "must be an object" in str(err)


class TestTerraformErrors:
    def test_execution_error(self) -> None:
        cause = FileNotFoundError(2, "No such file or directory", "terraform")
        err = TerraformExecutionError("tf_init", cause)

        assert err.cause is cause
        assert "tf_init" in str(err)
        assert "No such file or directory" in str(err)

    def test_timeout_error(self) -> None:
        err = TerraformTimeoutError("tf_apply", 30.0)

        assert err.timeout_seconds == 30.0
        assert str(err) == "Tool 'tf_apply' timed out after 30.0s"


class TestFileErrors:
    def test_file_not_found(self) -> None:
        err = TerraformFileNotFoundError("/srv/infra/main.tf")

        assert err.path == "/srv/infra/main.tf"
        assert str(err) == "File not found: /srv/infra/main.tf"

    def test_file_operation_error(self) -> None:
        err = FileOperationError("/srv/infra", "Permission denied")

        assert err.reason == "Permission denied"
        assert "/srv/infra" in str(err)
