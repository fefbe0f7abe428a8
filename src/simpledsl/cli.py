"""Command-line token dump for SimpleDSL sources."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from simpledsl.errors import LexError
from simpledsl.tokens import Token, TokenKind


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    skip_whitespace: bool
    strict: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="simpledsl",
        description="Scan a SimpleDSL source file and print its tokens",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover simpledsl.toml)",
    )
    p.add_argument(
        "--skip-whitespace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Leave whitespace tokens out of the listing",
    )
    p.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail on the first unknown character",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "simpledsl.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    skip_whitespace = False
    strict = False
    cfg_scanner = config.get("scanner")
    if isinstance(cfg_scanner, dict):
        cfg_skip = cfg_scanner.get("skip_whitespace")
        if isinstance(cfg_skip, bool):
            skip_whitespace = cfg_skip
        cfg_strict = cfg_scanner.get("strict")
        if isinstance(cfg_strict, bool):
            strict = cfg_strict
    if args.skip_whitespace is not None:
        skip_whitespace = args.skip_whitespace
    if args.strict is not None:
        strict = args.strict

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        skip_whitespace=skip_whitespace,
        strict=strict,
    )


def format_token(tok: Token) -> str:
    """One listing line: ``line:col KIND [text]``."""
    pos = tok.span.start
    line = f"{pos.line}:{pos.column} {tok.kind.name}"
    if tok.text:
        line += f" {tok.text}"
    elif tok.kind in (TokenKind.UNKNOWN, TokenKind.WHITESPACE):
        line += f" {tok.raw!r}"
    return line


def scan_file(options: CliOptions) -> str:
    """Read and scan a source file, returning the token listing."""
    from simpledsl.scanner import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source, skip_whitespace=options.skip_whitespace, strict=options.strict)
    return "".join(format_token(tok) + "\n" for tok in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    try:
        listing = scan_file(options)
        if options.output_file:
            options.output_file.write_text(listing, encoding="utf-8")
        else:
            sys.stdout.write(listing)
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
