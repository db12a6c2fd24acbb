"""Docker CLI command execution.

Commands run synchronously via ``subprocess``. Every call blocks the calling
thread until the process exits and no timeout is applied, so async callers
should go through ``run_in_executor``.
"""

import subprocess
from typing import List, Optional, Tuple

import structlog

from ...models.errors import CommandFailedError, ErrorDetail, InvalidOutputError

logger = structlog.get_logger(__name__)


class ContainerExecutor:
    """Runs command lines against the host and decodes their stdout.

    A command line is split on whitespace into a program and its arguments.
    There is no shell quoting; tokens are passed through as-is.
    """

    def run(self, command_line: str) -> str:
        """Run a command and return its stripped stdout.

        If the process cannot be spawned at all the result is an empty
        string rather than an error, so the failure shows up in whichever
        step first needs real output.

        Args:
            command_line: Whitespace-separated program and arguments

        Returns:
            Decoded stdout with surrounding whitespace removed

        Raises:
            InvalidOutputError: stdout was not valid UTF-8
        """
        _, stdout = self._execute(command_line)
        return stdout

    def run_for_effect(self, command_line: str) -> None:
        """Run a command for its side effect, discarding output.

        Raises:
            InvalidOutputError: stdout was not valid UTF-8
            CommandFailedError: the process exited with a non-zero status
        """
        exit_code, _ = self._execute(command_line)
        if exit_code:
            raise CommandFailedError(command=command_line, exit_code=exit_code)

    def _execute(self, command_line: str) -> Tuple[Optional[int], str]:
        args = self._split(command_line)
        if not args:
            logger.debug("Empty command line, nothing to run")
            return None, ""

        try:
            proc = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            logger.debug("Failed to spawn command", command=command_line, error=str(e))
            return None, ""

        if proc.returncode:
            logger.debug(
                "Command exited with non-zero status",
                command=command_line,
                exit_code=proc.returncode,
            )

        return proc.returncode, self._decode_output(command_line, proc.stdout)

    @staticmethod
    def _split(command_line: str) -> List[str]:
        return command_line.split()

    def _decode_output(self, command_line: str, output: bytes) -> str:
        try:
            return output.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            logger.error(
                "Failed to parse command output",
                command=command_line,
                error=str(e),
            )
            raise InvalidOutputError(
                command=command_line,
                details=[ErrorDetail(field="stdout", message=str(e), code="invalid_utf8")],
            ) from e
