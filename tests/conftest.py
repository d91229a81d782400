from __future__ import annotations

from pathlib import Path

import pytest

from metricsgen.formatter import Formatter
from tests._fixtures.crate_builder import CrateBuilder, RecordingRunner


@pytest.fixture
def crate_builder(tmp_path: Path) -> CrateBuilder:
    """Provide a reusable crate builder rooted at the pytest tmp_path."""
    return CrateBuilder(tmp_path)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def quiet_formatter(recording_runner: RecordingRunner) -> Formatter:
    """Strict formatter that never launches a real process."""
    return Formatter(runner=recording_runner)
