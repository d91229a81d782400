"""Pipeline orchestration for the scan and explicit-name generation modes."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .collector import NameCollector, canonical_names
from .config import ConfigError, GeneratorConfig, load_config
from .emitter import RegistryEmitter
from .fileset import FileSetResolver
from .formatter import Formatter
from .logging import get_logger
from .models import is_counter_name
from .scanner import InvocationScanner

RERUN_DIRECTIVE = "cargo:rerun-if-changed={}/"


class Orchestrator:
    """Coordinates resolver, scanner, collector, emitter and formatter."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        resolver: FileSetResolver | None = None,
        scanner: InvocationScanner | None = None,
        emitter: RegistryEmitter | None = None,
        formatter: Formatter | None = None,
        *,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.resolver = resolver or FileSetResolver()
        self.scanner = scanner or InvocationScanner()
        self.emitter = emitter or RegistryEmitter()
        self.formatter = formatter
        self.stdout = stdout
        self.logger = get_logger("orchestrator")

    def generate_from_scan(
        self, root: str | Path | None = None, *, out_dir: Path | None = None
    ) -> Path:
        """Scan the source tree under ``root`` and regenerate the registry from it.

        ``root`` defaults to the injected config's root, else the current directory.
        """
        if root is None:
            root = self.config.root if self.config is not None else "."
        root_path = Path(root).expanduser().resolve()
        if not root_path.is_dir():
            raise ConfigError(f"Crate root is not a directory: {root}")
        config = self._load_config(root_path)
        self._emit_rerun_directive(config)
        output = self._output_path(config, out_dir)

        files = self.resolver.resolve(config.source_glob, root_path)
        self.logger.debug("Scanning %d source files under %s", len(files), root_path)

        collector = NameCollector()
        collector.extend(self.scanner.scan_files(files))
        names = collector.names()
        self.logger.info("Discovered %d counters in %d files", len(names), len(files))

        return self._generate(names, config, output)

    def generate_from_names(
        self,
        names: Iterable[str],
        *,
        out_dir: Path | None = None,
        root: str | Path = ".",
    ) -> Path:
        """Regenerate the registry from a caller-supplied name collection.

        Order and duplicates in ``names`` are irrelevant; the artifact only
        depends on the distinct names. Names that are not identifiers are
        rejected with ValueError before anything is written.
        """
        ordered = canonical_names(names)
        invalid = [name for name in ordered if not is_counter_name(name)]
        if invalid:
            raise ValueError(f"Invalid counter names: {', '.join(repr(n) for n in invalid)}")

        config = self._load_config(Path(root).expanduser().resolve())
        output = self._output_path(config, out_dir)
        return self._generate(ordered, config, output)

    def _generate(self, names: List[str], config: GeneratorConfig, output: Path) -> Path:
        self.emitter.write(names, output)
        formatter = self.formatter or Formatter.from_config(config.formatter)
        formatter.format(output)
        self.logger.info("Metrics registry written to %s", output)
        return output

    def _load_config(self, root: Path) -> GeneratorConfig:
        if self.config is not None:
            return self.config
        return load_config(root)

    @staticmethod
    def _output_path(config: GeneratorConfig, out_dir: Path | None) -> Path:
        directory = Path(out_dir) if out_dir is not None else config.resolve_out_dir()
        return directory / config.output_file

    def _emit_rerun_directive(self, config: GeneratorConfig) -> None:
        stream = self.stdout or sys.stdout
        print(RERUN_DIRECTIVE.format(config.source_dir.rstrip("/")), file=stream)


def generate_from_scan(
    root: str | Path | None = None,
    *,
    out_dir: Path | None = None,
    config: GeneratorConfig | None = None,
) -> Path:
    """Default mode: scan ``root`` and write the registry artifact."""
    return Orchestrator(config=config).generate_from_scan(root, out_dir=out_dir)


def generate_from_names(
    names: Iterable[str],
    *,
    out_dir: Path | None = None,
    config: GeneratorConfig | None = None,
) -> Path:
    """Explicit mode: write the registry artifact for exactly ``names``."""
    return Orchestrator(config=config).generate_from_names(names, out_dir=out_dir)


__all__ = ["Orchestrator", "RERUN_DIRECTIVE", "generate_from_names", "generate_from_scan"]
