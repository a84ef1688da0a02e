from pathlib import Path
from typing import Protocol
import argparse

from pycompdb.__version__ import __version__


class ArgsConfig(Protocol):
    config: Path
    output: str
    verbose: bool
    command: bool


def args_parse(argv: list[str]) -> ArgsConfig:
    parser = argparse.ArgumentParser(
        prog="pycompdb",
        description="Generates a compilation database for multi workspace C/C++ projects",
        epilog="",
    )
    parser.add_argument("config", type=Path, help="project configuration (TOML or JSON)")
    parser.add_argument(
        "output",
        type=str,
        help="output file, or a directory that receives 'compile_commands.json'",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--command",
        action="store_true",
        help="write a 'command' string instead of an 'arguments' list",
    )
    parser.add_argument("--version", action="version", version=__version__)

    return parser.parse_args(argv)  # type: ignore
