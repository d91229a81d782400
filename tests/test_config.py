"""Tests for metricsgen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from metricsgen.config import ConfigError, FormatterConfig, GeneratorConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GeneratorConfig)
    assert config.root == tmp_path.resolve()
    assert config.source_dir == "src"
    assert config.source_glob == "src/**/*.rs"
    assert config.output_file == "metrics.rs"
    assert config.out_dir_env == "OUT_DIR"
    assert config.formatter == FormatterConfig(command=["rustfmt"], policy="strict")


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".metricsgen.yml"
    config_file.write_text(
        """
source_dir: "crates/core/src"
source_glob: "crates/core/src/**/*.rs"
output_file: "counters.rs"
out_dir_env: "GEN_DIR"
formatter:
  command: ["rustfmt", "--edition", "2021"]
  policy: "Lenient"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.source_dir == "crates/core/src"
    assert config.source_glob == "crates/core/src/**/*.rs"
    assert config.output_file == "counters.rs"
    assert config.out_dir_env == "GEN_DIR"
    assert config.formatter.command == ["rustfmt", "--edition", "2021"]
    assert config.formatter.policy == "lenient"


def test_load_config_splits_string_command(tmp_path: Path) -> None:
    (tmp_path / ".metricsgen.yml").write_text(
        "formatter:\n  command: rustfmt --quiet\n", encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.formatter.command == ["rustfmt", "--quiet"]
    assert config.formatter.policy == "strict"


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".metricsgen.yml").write_text("\n# nothing here\n", encoding="utf-8")

    assert load_config(tmp_path).source_glob == "src/**/*.rs"


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "source_glob: [unterminated\n",
        "formatter:\n  policy: sometimes\n",
    ],
)
def test_load_config_rejects_bad_files(tmp_path: Path, content: str) -> None:
    (tmp_path / ".metricsgen.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_resolve_out_dir_reads_named_variable(tmp_path: Path) -> None:
    config = GeneratorConfig(root=tmp_path, out_dir_env="GEN_DIR")

    assert config.resolve_out_dir({"GEN_DIR": str(tmp_path / "out")}) == tmp_path / "out"


@pytest.mark.parametrize("environ", [{}, {"OUT_DIR": ""}])
def test_resolve_out_dir_requires_variable(tmp_path: Path, environ: dict[str, str]) -> None:
    with pytest.raises(ConfigError, match="OUT_DIR"):
        GeneratorConfig(root=tmp_path).resolve_out_dir(environ)


def test_resolve_out_dir_defaults_to_process_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("OUT_DIR", str(tmp_path))

    assert GeneratorConfig(root=tmp_path).resolve_out_dir() == tmp_path


def test_load_config_rejects_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / ".metricsgen.yml").write_bytes(b"source_dir: \xff\n")

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(tmp_path)
