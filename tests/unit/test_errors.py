"""Unit tests for the exception hierarchy."""

from ephemeral_pg.models.errors import (
    CommandFailedError,
    ContainerCommandError,
    ContainerStartError,
    EphemeralPgException,
    ErrorDetail,
    ErrorType,
    InvalidOutputError,
    PortParseError,
)


class TestHierarchy:
    """Test every error shares the package base class."""

    def test_gateway_errors(self):
        assert issubclass(InvalidOutputError, ContainerCommandError)
        assert issubclass(CommandFailedError, ContainerCommandError)
        assert issubclass(ContainerCommandError, EphemeralPgException)

    def test_launch_errors(self):
        assert issubclass(PortParseError, EphemeralPgException)
        assert issubclass(ContainerStartError, EphemeralPgException)


class TestMessages:
    """Test error messages and types."""

    def test_invalid_output(self):
        error = InvalidOutputError(command="docker ps")
        assert error.error_type == ErrorType.INVALID_OUTPUT
        assert "utf-8" in str(error)

    def test_command_failed(self):
        error = CommandFailedError(command="docker stop abc", exit_code=125)
        assert error.exit_code == 125
        assert "125" in error.message
        assert "docker stop abc" in error.message

    def test_command_failed_details(self):
        """Test the exit status is carried as a structured detail."""
        error = CommandFailedError(command="docker rm abc", exit_code=1)
        assert error.to_dict()["details"] == [
            {
                "field": "exit_code",
                "message": "Process exited with status 1",
                "code": "nonzero_exit",
            }
        ]

    def test_port_parse(self):
        error = PortParseError(output="")
        assert error.error_type == ErrorType.PORT_PARSE_FAILURE
        assert "docker daemon" in str(error)

    def test_start_failed(self):
        error = ContainerStartError(image="postgres:16")
        assert error.error_type == ErrorType.START_FAILED
        assert "postgres:16" in error.message


class TestToDict:
    """Test structured serialization."""

    def test_without_details(self):
        data = PortParseError(output="").to_dict()
        assert data == {
            "error": "Failed to parse exposed ports, is your docker daemon running?",
            "error_type": "port_parse_failure",
        }

    def test_with_details(self):
        error = EphemeralPgException(
            "bad value",
            details=[ErrorDetail(field="postgres_image", message="empty")],
        )
        data = error.to_dict()
        assert data["error_type"] == "internal"
        assert data["details"] == [{"field": "postgres_image", "message": "empty"}]
