"""Tests for metricsgen.formatter."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from metricsgen.config import FormatterConfig
from metricsgen.formatter import Formatter, FormatterError
from tests._fixtures.crate_builder import RecordingRunner


def _missing_executable(args: List[str]):
    raise FileNotFoundError(2, "No such file or directory", args[0])


def test_format_invokes_command_with_artifact_path(tmp_path: Path) -> None:
    runner = RecordingRunner()
    target = tmp_path / "metrics.rs"

    Formatter(["rustfmt", "--edition", "2021"], runner=runner).format(target)

    assert runner.calls == [["rustfmt", "--edition", "2021", str(target)]]


def test_strict_policy_surfaces_tool_output(tmp_path: Path) -> None:
    runner = RecordingRunner(returncode=1, stdout="partial\n", stderr="error: expected `;`\n")

    with pytest.raises(FormatterError) as excinfo:
        Formatter(runner=runner).format(tmp_path / "metrics.rs")

    error = excinfo.value
    assert error.returncode == 1
    assert error.stdout == "partial\n"
    assert error.stderr == "error: expected `;`\n"
    assert "error: expected `;`" in str(error)


def test_strict_policy_fails_when_tool_is_missing(tmp_path: Path) -> None:
    with pytest.raises(FormatterError, match="rustfmt"):
        Formatter(runner=_missing_executable).format(tmp_path / "metrics.rs")


def test_lenient_policy_ignores_failures(tmp_path: Path) -> None:
    runner = RecordingRunner(returncode=101, stderr="boom")
    formatter = Formatter(policy="lenient", runner=runner)

    formatter.format(tmp_path / "metrics.rs")
    Formatter(policy="lenient", runner=_missing_executable).format(tmp_path / "metrics.rs")

    assert len(runner.calls) == 1


def test_from_config_uses_command_and_policy() -> None:
    runner = RecordingRunner()
    formatter = Formatter.from_config(
        FormatterConfig(command=["fmt-tool", "-q"], policy="lenient"), runner=runner
    )

    assert formatter.command == ["fmt-tool", "-q"]
    assert formatter.strict is False


def test_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError):
        Formatter(policy="sometimes")
