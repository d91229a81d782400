"""Glob expansion of the source tree into a concrete file list."""

from __future__ import annotations

import glob
import os
import stat
from pathlib import Path
from typing import List

from .config import ConfigError
from .logging import get_logger

_RECURSIVE = "**"


def validate_pattern(pattern: str) -> None:
    """Raise ConfigError when ``pattern`` is not a well-formed glob."""
    if not pattern:
        raise ConfigError("Glob pattern must not be empty")

    for component in pattern.replace("\\", "/").split("/"):
        if _RECURSIVE in component and component != _RECURSIVE:
            raise ConfigError(
                f"Invalid glob pattern {pattern!r}: '**' must be a whole path component"
            )

    index = 0
    while index < len(pattern):
        if pattern[index] == "[":
            close = _find_class_end(pattern, index)
            if close < 0:
                raise ConfigError(
                    f"Invalid glob pattern {pattern!r}: unclosed character class at {index}"
                )
            index = close
        index += 1


def _find_class_end(pattern: str, start: int) -> int:
    index = start + 1
    if index < len(pattern) and pattern[index] == "!":
        index += 1
    # a ']' directly after the opening bracket is a literal member
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    return pattern.find("]", index)


class FileSetResolver:
    """Expands a glob pattern into the source files it matches."""

    def __init__(self) -> None:
        self.logger = get_logger("fileset")

    def resolve(self, pattern: str, root: Path | str = ".") -> List[Path]:
        """Return regular files matching ``pattern`` relative to ``root``.

        The result order follows filesystem enumeration and carries no meaning.
        Entries that vanish or cannot be inspected during enumeration are skipped.
        """
        validate_pattern(pattern)
        root_path = Path(root)

        files: List[Path] = []
        for entry in glob.iglob(
            pattern, root_dir=root_path, recursive=True, include_hidden=True
        ):
            path = root_path / entry
            try:
                mode = os.stat(path).st_mode
            except OSError as exc:
                self.logger.debug("Skipping unresolvable entry %s: %s", path, exc)
                continue
            if stat.S_ISREG(mode):
                files.append(path)

        self.logger.debug("Pattern %s matched %d files under %s", pattern, len(files), root_path)
        return files


__all__ = ["FileSetResolver", "validate_pattern"]
