"""Text scanning for counter macro invocations."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Pattern

from .logging import get_logger
from .models import IDENTIFIER, InvocationSite, OperationKind, is_counter_name

# keyword, at most one newline, optional indentation, identifier, then `,` `)` or newline
_NAME_PATTERN = r"\(\n?\s*(" + IDENTIFIER + r")[),\n]"


def _compile_patterns() -> Dict[OperationKind, Pattern[str]]:
    return {
        kind: re.compile(r"(?<!\w)" + re.escape(kind.keyword) + _NAME_PATTERN)
        for kind in OperationKind
    }


PATTERNS: Dict[OperationKind, Pattern[str]] = _compile_patterns()


class InvocationScanner:
    """Finds counter names referenced by any of the recognised invocation forms."""

    def __init__(self, patterns: Dict[OperationKind, Pattern[str]] | None = None) -> None:
        self.patterns = dict(patterns if patterns is not None else PATTERNS)
        self.logger = get_logger("scanner")

    def scan_text(self, text: str, source: str = "<text>") -> Iterator[InvocationSite]:
        """Yield one site per pattern match in ``text``."""
        for kind, pattern in self.patterns.items():
            for match in pattern.finditer(text):
                name = match.group(1)
                if not is_counter_name(name):
                    self.logger.debug("Ignoring %s(%s) in %s: not a usable field name", kind.keyword, name, source)
                    continue
                yield InvocationSite(kind=kind, name=name, source=source)

    def scan_file(self, path: Path) -> List[InvocationSite]:
        """Return sites found in ``path``; unreadable files contribute nothing."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.debug("Skipping unreadable file %s: %s", path, exc)
            return []
        return list(self.scan_text(text, source=str(path)))

    def scan_files(self, paths: Iterable[Path]) -> Iterator[InvocationSite]:
        for path in paths:
            yield from self.scan_file(path)


__all__ = ["InvocationScanner", "PATTERNS"]
