# main.py
from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO

from config import is_settings_line, load_config, setup
from debug import COMPONENTS, Debug
from errors import ConfigurationError, EnigmaError
from machine import Machine

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches for the command-line front end."""

    block: int = 5                  # display group size
    debug: List[str] = field(default_factory=list)
    log_file: Path | None = None


# ────────────────────────────────────────────────────────────────────────
#  1. Message helpers
# ────────────────────────────────────────────────────────────────────────


def format_message(msg: str, block: int = 5) -> str:
    """Drop spaces and regroup MSG into blocks of BLOCK symbols."""
    text = msg.replace(" ", "")
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def process(machine: Machine, lines: Iterable[str], block: int = 5) -> Iterator[str]:
    """Yield the converted, grouped form of every message line.

    The first line must be a settings line; later settings lines
    reconfigure MACHINE for the messages that follow them.
    """
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if is_settings_line(line):
            setup(machine, line)
            configured = True
            continue
        if not configured:
            raise ConfigurationError("Input must start with a settings line")
        yield format_message(machine.convert_message(line), block)


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor machine")
    p.add_argument("config", metavar="CONFIG", help="Machine description file.")
    p.add_argument("input", metavar="INPUT", nargs="?", help="Message file (default: stdin).")
    p.add_argument("output", metavar="OUTPUT", nargs="?", help="Result file (default: stdout).")
    p.add_argument("--block", type=int, default=5, help="Output group size. Default: 5")
    p.add_argument(
        "--debug", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT",
        help=f"Log a component at DEBUG level (repeatable): {', '.join(COMPONENTS)}",
    )
    p.add_argument("--log-file", dest="log_file", type=Path, help="Also write debug log to FILE.")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    if args.block <= 0:
        raise ConfigurationError("--block must be positive")
    return Config(block=args.block, debug=list(args.debug), log_file=args.log_file)


def run(cfg: Config, config_path: str, source: TextIO, sink: TextIO) -> None:
    if cfg.log_file:
        Debug.configure(log_to=str(cfg.log_file))
    debug.enable(*cfg.debug)

    machine = load_config(config_path)
    for out in process(machine, source, cfg.block):
        print(out, file=sink)


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        cfg = build_config(args)
        with ExitStack() as stack:
            source = stack.enter_context(open(args.input, encoding="utf-8")) if args.input else sys.stdin
            sink = stack.enter_context(open(args.output, "w", encoding="utf-8")) if args.output else sys.stdout
            run(cfg, args.config, source, sink)
    except (EnigmaError, UnicodeDecodeError, OSError) as excp:
        sys.exit(f"Error: {excp}")


if __name__ == "__main__":
    main()
