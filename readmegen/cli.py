"""CLI entrypoints for readmegen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import ConfigError, ReadmeGenError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands repeat the options with SUPPRESS so they may follow the command
    # without clobbering a value given before it.
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase console log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also append DEBUG-level logs for the run to this file.",
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate README files for Drupal modules from a static code scan.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate-readme",
        help="Scan a module and write an AI-generated README.md into it.",
    )
    _add_logging_options(generate_parser, suppress_default=True)
    generate_parser.add_argument("module_path", help="Path to the module root.")
    generate_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .readmegen.yml file (defaults to ./.readmegen.yml when present).",
    )
    generate_parser.add_argument("--model", default=None, help="Override the configured model.")
    generate_parser.add_argument(
        "--max-tokens",
        type=_positive_int,
        default=None,
        help="Override the completion token budget.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generation prompt without calling the backend or writing files.",
    )

    scan_parser = subparsers.add_parser(
        "scan",
        help="Print the structured module summary as JSON.",
    )
    _add_logging_options(scan_parser, suppress_default=True)
    scan_parser.add_argument("module_path", help="Path to the module root.")
    scan_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the summary to this file instead of stdout.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(1, f"readmegen logging failed: cannot open {args.log_file}: {exc}\n")

    if args.command == "generate-readme":
        _run_generate(parser, args)
    elif args.command == "scan":
        _run_scan(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.dry_run:
        orchestrator = Orchestrator()
    else:
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            parser.exit(1, f"readmegen {exc.stage} failed: {exc}\n")
        orchestrator = Orchestrator.from_config(config)

    result = orchestrator.run(
        args.module_path,
        model=args.model,
        max_tokens=args.max_tokens,
        dry_run=bool(args.dry_run),
    )
    if not result.ok:
        parser.exit(
            1,
            f"readmegen {result.stage} failed: {result.error}\nRun with --verbose for more details.\n",
        )
    if args.dry_run:
        print(result.prompt, end="")
        return
    print(f"README created at {_relativize(result.path)}")


def _run_scan(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        summary = Orchestrator().summarize(args.module_path)
    except ReadmeGenError as exc:
        parser.exit(1, f"readmegen {exc.stage} failed: {exc}\n")

    if args.output is None:
        print(summary, end="")
        return
    try:
        args.output.write_text(summary, encoding="utf-8")
    except OSError as exc:
        parser.exit(1, f"readmegen output failed: {exc}\n")
    print(f"Module summary written to {_relativize(args.output)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
