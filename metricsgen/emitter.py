"""Rendering of the metrics registry artifact."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from .logging import get_logger

STRUCT_NAME = "MetricsRecorder"
STATIC_NAME = "METRICS_RECORDER"
TEMPLATE_NAME = "metrics.rs.j2"


class ArtifactWriteError(RuntimeError):
    """Raised when the generated artifact cannot be written."""


class RegistryEmitter:
    """Renders one atomic field per counter name plus the singleton instance."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.logger = get_logger("emitter")

    def render(self, names: Sequence[str]) -> str:
        """Return the artifact text for ``names`` in the order given."""
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            names=list(names),
            struct_name=STRUCT_NAME,
            static_name=STATIC_NAME,
        )

    def write(self, names: Sequence[str], output: Path) -> Path:
        """Render ``names`` and replace whatever is at ``output``."""
        text = self.render(names)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8", newline="\n")
        except OSError as exc:
            raise ArtifactWriteError(f"Unable to write metrics artifact {output}: {exc}") from exc
        self.logger.debug("Wrote %d counters to %s", len(names), output)
        return output


__all__ = ["ArtifactWriteError", "RegistryEmitter", "STATIC_NAME", "STRUCT_NAME"]
