"""Core data models shared across metricsgen components."""

import re
from dataclasses import dataclass
from enum import Enum

# letter or underscore, then letters, digits and underscores
IDENTIFIER = r"[^\W\d]\w*"

_IDENTIFIER_RE = re.compile(IDENTIFIER)

# strict and reserved Rust keywords, which cannot name a struct field
RUST_KEYWORDS = frozenset(
    {
        "as", "async", "await", "break", "const", "continue", "crate", "dyn",
        "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
        "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
        "self", "Self", "static", "struct", "super", "trait", "true", "type",
        "unsafe", "use", "where", "while",
        "abstract", "become", "box", "do", "final", "macro", "override",
        "priv", "try", "typeof", "unsized", "virtual", "yield",
    }
)


class OperationKind(Enum):
    """Counter access forms recognised in source text, keyed by macro keyword."""

    FETCH_HANDLE = "get_counter!"
    INCREMENT_BY = "increment_metric!"
    INCREMENT_BY_ONE = "tick_metric!"
    SET_TO = "set_metric!"
    RESET_TO_ZERO = "reset_metric!"
    LOAD = "load_metric!"

    @property
    def keyword(self) -> str:
        return self.value


@dataclass(frozen=True)
class InvocationSite:
    """A single counter reference found while scanning one file."""

    kind: OperationKind
    name: str
    source: str


def is_counter_name(value: str) -> bool:
    """Return True when ``value`` is usable as a registry field name."""
    if value == "_" or value in RUST_KEYWORDS:
        return False
    return _IDENTIFIER_RE.fullmatch(value) is not None
