"""Error types and exception classes for ephemeral-pg."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ErrorType(str, Enum):
    """Error type enumeration."""

    INVALID_OUTPUT = "invalid_output"
    COMMAND_FAILED = "command_failed"
    PORT_PARSE_FAILURE = "port_parse_failure"
    START_FAILED = "start_failed"
    INTERNAL = "internal"


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: Optional[str] = Field(None, description="Name of the offending value")
    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(None, description="Machine-readable error code")


# Custom Exception Classes


class EphemeralPgException(Exception):
    """Base exception for ephemeral-pg."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL,
        details: Optional[List[ErrorDetail]] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured logs."""
        data: Dict[str, Any] = {
            "error": self.message,
            "error_type": self.error_type.value,
        }
        if self.details:
            data["details"] = [d.model_dump(exclude_none=True) for d in self.details]
        return data


class ContainerCommandError(EphemeralPgException):
    """A Docker CLI invocation could not be used."""


class InvalidOutputError(ContainerCommandError):
    """Command output was not valid UTF-8 text."""

    def __init__(self, command: str, message: Optional[str] = None, **kwargs):
        self.command = command
        super().__init__(
            message=message or "Command output was invalid format (non utf-8)",
            error_type=ErrorType.INVALID_OUTPUT,
            **kwargs,
        )


class CommandFailedError(ContainerCommandError):
    """Command exited with a non-zero status."""

    def __init__(self, command: str, exit_code: int, **kwargs):
        self.command = command
        self.exit_code = exit_code
        kwargs.setdefault(
            "details",
            [
                ErrorDetail(
                    field="exit_code",
                    message=f"Process exited with status {exit_code}",
                    code="nonzero_exit",
                )
            ],
        )
        super().__init__(
            message=f"Command '{command}' exited with status {exit_code}",
            error_type=ErrorType.COMMAND_FAILED,
            **kwargs,
        )


class PortParseError(EphemeralPgException):
    """No host endpoint could be read from the port query output."""

    def __init__(self, output: str = "", **kwargs):
        self.output = output
        super().__init__(
            message="Failed to parse exposed ports, is your docker daemon running?",
            error_type=ErrorType.PORT_PARSE_FAILURE,
            **kwargs,
        )


class ContainerStartError(EphemeralPgException):
    """The start command did not report a container id."""

    def __init__(self, image: str, **kwargs):
        self.image = image
        super().__init__(
            message=f"Failed to start container from image '{image}', is your docker daemon running?",
            error_type=ErrorType.START_FAILED,
            **kwargs,
        )
