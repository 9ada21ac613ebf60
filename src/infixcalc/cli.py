"""Command-line interface for infixcalc."""

from __future__ import annotations

import argparse
import math
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from infixcalc.errors import PipelineError

QUIT_COMMAND = "!q"
CONFIG_NAME = "infixcalc.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    expressions: list[str]
    prompt: str
    result_format: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="infixcalc",
        description="Evaluate infix arithmetic expressions",
    )
    p.add_argument(
        "input",
        nargs="?",
        help="File with one expression per line (default: interactive prompt)",
    )
    p.add_argument(
        "-e",
        "--expr",
        action="append",
        default=[],
        metavar="EXPR",
        help="Expression to evaluate (repeatable)",
    )
    p.add_argument("--prompt", default=None, help='Interactive prompt (default: "> ")')
    p.add_argument(
        "--format",
        default=None,
        metavar="SPEC",
        help="Python format spec for results (default: shortest display)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens and postfix to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, Path("."))
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file: {exc}") from exc

    prompt = "> "
    cfg_prompt = config.get("prompt")
    if isinstance(cfg_prompt, str):
        prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    result_format = ""
    cfg_format = config.get("format")
    if isinstance(cfg_format, str):
        result_format = cfg_format
    if args.format is not None:
        result_format = args.format
    # Reject unusable specs before any expression is read
    try:
        format(1.0, result_format)
    except ValueError as exc:
        raise ValueError(f"invalid format spec {result_format!r}: {exc}") from exc

    debug = config.get("debug") is True or args.debug

    return CliOptions(
        input_file=Path(args.input) if args.input else None,
        expressions=list(args.expr),
        prompt=prompt,
        result_format=result_format,
        debug=debug,
    )


def format_result(value: float, spec: str = "") -> str:
    """Render a result; an empty spec prints integral values without a fraction."""
    if spec:
        return format(value, spec)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def run_line(line: str, options: CliOptions) -> float:
    """Evaluate one line, dumping intermediate sequences when debugging."""
    from infixcalc.debug import dump_tokens
    from infixcalc.evaluator import evaluate
    from infixcalc.lexer import tokenize
    from infixcalc.postfix import to_postfix

    tokens = tokenize(line)
    if options.debug:
        dump_tokens("tokens:", tokens, line)
    postfix = to_postfix(tokens, line)
    if options.debug:
        dump_tokens("postfix:", postfix, line)
    return evaluate(line, postfix)


def run_batch(
    lines: list[str],
    options: CliOptions,
    filename: str,
    out: TextIO,
    err: TextIO,
) -> int:
    """Evaluate each non-blank line. Returns 1 if any line failed, else 0."""
    status = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            value = run_line(line, options)
        except PipelineError as exc:
            print(exc.format(filename, lineno), file=err)
            status = 1
            continue
        print(format_result(value, options.result_format), file=out)
    return status


def repl_loop(
    options: CliOptions,
    inp: TextIO | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Read-evaluate-print until the quit command or EOF."""
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    while True:
        out.write(options.prompt)
        out.flush()
        raw = inp.readline()
        if not raw:
            out.write("\n")
            break
        line = raw.rstrip("\r\n")
        if line.strip() == QUIT_COMMAND:
            break
        if not line.strip():
            continue
        try:
            value = run_line(line, options)
        except PipelineError as exc:
            print(exc.format("<stdin>"), file=err)
            continue
        print(format_result(value, options.result_format), file=out)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    status = 0
    if options.expressions:
        status = run_batch(options.expressions, options, "<expr>", sys.stdout, sys.stderr)

    if options.input_file is not None:
        try:
            text = options.input_file.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
            return 2
        lines = text.splitlines()
        status = max(
            status, run_batch(lines, options, str(options.input_file), sys.stdout, sys.stderr)
        )

    if not options.expressions and options.input_file is None:
        repl_loop(options)

    return status
