"""Configuration loading for metricsgen (.metricsgen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".metricsgen.yml"

DEFAULT_SOURCE_DIR = "src"
DEFAULT_SOURCE_GLOB = "src/**/*.rs"
DEFAULT_OUTPUT_FILE = "metrics.rs"
DEFAULT_OUT_DIR_ENV = "OUT_DIR"
DEFAULT_FORMATTER_COMMAND = ("rustfmt",)

POLICY_STRICT = "strict"
POLICY_LENIENT = "lenient"
_POLICIES = {POLICY_STRICT, POLICY_LENIENT}


class ConfigError(RuntimeError):
    """Raised when the build configuration is unusable."""


@dataclass
class FormatterConfig:
    """External formatter invocation settings."""

    command: List[str] = field(default_factory=lambda: list(DEFAULT_FORMATTER_COMMAND))
    policy: str = POLICY_STRICT


@dataclass
class GeneratorConfig:
    """Represents the settings defined in .metricsgen.yml."""

    root: Path
    source_dir: str = DEFAULT_SOURCE_DIR
    source_glob: str = DEFAULT_SOURCE_GLOB
    output_file: str = DEFAULT_OUTPUT_FILE
    out_dir_env: str = DEFAULT_OUT_DIR_ENV
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    def resolve_out_dir(self, environ: Mapping[str, str] | None = None) -> Path:
        """Return the build output directory named by ``out_dir_env``."""
        env = os.environ if environ is None else environ
        value = env.get(self.out_dir_env)
        if not value:
            raise ConfigError(
                f"Environment variable {self.out_dir_env} is not set; "
                "it must name the build output directory"
            )
        return Path(value)


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GeneratorConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    formatter_data = _as_dict(data.get("formatter"))
    formatter = FormatterConfig()
    if formatter_data:
        command = _as_command(formatter_data.get("command"))
        if command:
            formatter.command = command
        policy = _as_str(formatter_data.get("policy"))
        if policy is not None:
            policy = policy.strip().lower()
            if policy not in _POLICIES:
                raise ConfigError(
                    f"formatter.policy must be one of {sorted(_POLICIES)}, got {policy!r}"
                )
            formatter.policy = policy

    return GeneratorConfig(
        root=root,
        source_dir=_as_str(data.get("source_dir")) or DEFAULT_SOURCE_DIR,
        source_glob=_as_str(data.get("source_glob")) or DEFAULT_SOURCE_GLOB,
        output_file=_as_str(data.get("output_file")) or DEFAULT_OUTPUT_FILE,
        out_dir_env=_as_str(data.get("out_dir_env")) or DEFAULT_OUT_DIR_ENV,
        formatter=formatter,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_command(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "FormatterConfig",
    "GeneratorConfig",
    "POLICY_LENIENT",
    "POLICY_STRICT",
    "load_config",
]
