"""Post-pass invoking an external code formatter on the artifact."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, List, Sequence

from .config import DEFAULT_FORMATTER_COMMAND, POLICY_LENIENT, POLICY_STRICT, FormatterConfig
from .logging import get_logger

Runner = Callable[[List[str]], "subprocess.CompletedProcess[str]"]


class FormatterError(RuntimeError):
    """Raised under the strict policy when the formatter does not succeed."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class Formatter:
    """Runs the configured formatter command against a single file."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_FORMATTER_COMMAND,
        *,
        policy: str = POLICY_STRICT,
        runner: Runner | None = None,
    ) -> None:
        if not command:
            raise ValueError("Formatter command must not be empty")
        if policy not in (POLICY_STRICT, POLICY_LENIENT):
            raise ValueError(f"Unknown formatter policy: {policy}")
        self.command = list(command)
        self.policy = policy
        self._runner = runner or self._default_runner
        self.logger = get_logger("formatter")

    @classmethod
    def from_config(cls, config: FormatterConfig, *, runner: Runner | None = None) -> "Formatter":
        return cls(config.command, policy=config.policy, runner=runner)

    @property
    def strict(self) -> bool:
        return self.policy == POLICY_STRICT

    def format(self, path: Path) -> None:
        """Format ``path`` in place, raising FormatterError only under the strict policy."""
        args = [*self.command, str(path)]
        try:
            completed = self._runner(args)
        except OSError as exc:
            if self.strict:
                raise FormatterError(f"Unable to run '{self.command[0]}': {exc}") from exc
            self.logger.debug("Formatter %s unavailable, leaving %s as emitted", self.command[0], path)
            return

        if completed.returncode == 0:
            return
        if self.strict:
            raise FormatterError(
                f"{self.command[0]} exited with status {completed.returncode} on {path}\n"
                f"stdout:\n{completed.stdout}\nstderr:\n{completed.stderr}",
                returncode=completed.returncode,
                stdout=completed.stdout,
                stderr=completed.stderr,
            )
        self.logger.debug(
            "Ignoring %s exit status %d for %s", self.command[0], completed.returncode, path
        )

    @staticmethod
    def _default_runner(args: List[str]) -> "subprocess.CompletedProcess[str]":
        return subprocess.run(
            args,
            check=False,
            capture_output=True,
            text=True,
        )


__all__ = ["Formatter", "FormatterError"]
