"""Command-line entry used by host builds to run the generator as a process."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_common_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    verbose_kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    out_dir_kwargs: dict[str, object] = {
        "type": Path,
        "help": "Directory for the generated artifact (defaults to $OUT_DIR).",
    }
    log_file_kwargs: dict[str, object] = {
        "type": Path,
        "help": "Also write logs to this file.",
    }
    if suppress_default:
        verbose_kwargs["default"] = argparse.SUPPRESS
        out_dir_kwargs["default"] = argparse.SUPPRESS
        log_file_kwargs["default"] = argparse.SUPPRESS
    else:
        verbose_kwargs["default"] = False
        out_dir_kwargs["default"] = None
        log_file_kwargs["default"] = None
    parser.add_argument("-v", "--verbose", **verbose_kwargs)
    parser.add_argument("--out-dir", **out_dir_kwargs)
    parser.add_argument("--log-file", **log_file_kwargs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metricsgen",
        description="Generate the atomic metrics registry from counter macro usages.",
    )
    _add_common_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan the crate sources for counter names and regenerate the registry.",
    )
    _add_common_options(scan_parser, suppress_default=True)
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the crate root (defaults to current directory).",
    )

    names_parser = subparsers.add_parser(
        "names",
        help="Regenerate the registry from an explicit list of counter names.",
    )
    _add_common_options(names_parser, suppress_default=True)
    names_parser.add_argument("names", nargs="*", help="Counter names to declare.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for metricsgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    out_dir = getattr(args, "out_dir", None)

    try:
        if args.command == "scan":
            orchestrator.generate_from_scan(args.path, out_dir=out_dir)
        elif args.command == "names":
            orchestrator.generate_from_names(args.names, out_dir=out_dir)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (RuntimeError, ValueError) as exc:
        parser.exit(1, f"metricsgen {args.command} failed: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
