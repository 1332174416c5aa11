"""CLI for TexPass: generate one or more passwords for a given purpose."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import PasswordConfig, PURPOSES, load_config
from .generator import generate_passwords


def _setup_logging(err_console: Console) -> None:
    log = logging.getLogger("texpass")
    log.setLevel(logging.INFO)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))


def build_parser(defaults: Optional[dict] = None) -> argparse.ArgumentParser:
    d = defaults or load_config()
    parser = argparse.ArgumentParser(
        prog="texpass",
        description="A secure password generator with various options for different purposes",
    )
    parser.add_argument("-l", "--length", type=int, default=d["length"], help="Password length (minimum 8)")
    parser.add_argument(
        "-p", "--purpose", default=d["purpose"],
        help="Password purpose: " + ", ".join(PURPOSES),
    )
    parser.add_argument("-e", "--exclude", default=d["exclude"], help="Custom special characters to exclude")
    parser.add_argument("--no-lowercase", action="store_true", help="Exclude lowercase letters")
    parser.add_argument("--no-uppercase", action="store_true", help="Exclude uppercase letters")
    parser.add_argument("--no-numbers", action="store_true", help="Exclude numbers")
    parser.add_argument("--no-special", action="store_true", help="Exclude special characters")
    parser.add_argument("-c", "--count", type=int, default=d["count"], help="How many passwords to generate")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> PasswordConfig:
    return PasswordConfig(
        length=args.length,
        purpose=args.purpose,
        exclude=args.exclude,
        lowercase=not args.no_lowercase,
        uppercase=not args.no_uppercase,
        numbers=not args.no_numbers,
        special=not args.no_special,
        count=args.count,
    )


def cmd_generate(config: PasswordConfig, console: Console) -> None:
    for pw in generate_passwords(config):
        # passwords contain brackets; never let rich read them as markup
        console.print(pw, markup=False, emoji=False, highlight=False, soft_wrap=True)

    if config.count > 1:
        console.print(f"\nGenerated [bold]{config.count}[/bold] passwords for purpose: {escape(config.purpose)}")
        console.print(f"Length: {config.length} characters")


def main(argv: Optional[List[str]] = None) -> None:
    console = Console(highlight=False)
    err_console = Console(stderr=True)
    _setup_logging(err_console)

    args = build_parser().parse_args(argv)
    cmd_generate(config_from_args(args), console)


if __name__ == "__main__":
    main()
