from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv

from .io import MenuIO
from .menu import NEWLINE_DELIMITER, NUL_DELIMITER, print_all, render, run_menu
from .registry import (
    DEFAULT_EDITOR,
    EDIT_KEY,
    LauncherError,
    assign_default_keys,
    build_edit_entry,
    load,
)

DEFAULT_CONFIG_PATH = ".ctrl_e.yml"

LOG = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zlelaunch",
        description=(
            "Show a one-key menu of shell commands read from a YAML file "
            "and print the chosen command."
        ),
    )
    parser.add_argument(
        "config",
        nargs="?",
        metavar="CONFIG_PATH",
        default=_env_str("ZLELAUNCH_CONFIG") or DEFAULT_CONFIG_PATH,
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--print0",
        "--zero",
        dest="delimiter",
        action="store_const",
        const=NUL_DELIMITER,
        help="print every command NUL-terminated instead of showing the menu",
    )
    mode.add_argument(
        "--print",
        dest="delimiter",
        action="store_const",
        const=NEWLINE_DELIMITER,
        help="print every command newline-terminated instead of showing the menu",
    )
    mode.add_argument(
        "--list",
        action="store_true",
        help="print the key and command of every entry without reading a key",
    )

    parser.add_argument(
        "--no-edit",
        action="store_true",
        default=_env_bool("ZLELAUNCH_NO_EDIT", default=False),
        help=f"do not add the '{EDIT_KEY}' entry that opens the config in $EDITOR",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None, io: MenuIO | None = None) -> int:
    try:
        _autoload_dotenv()
        parser = build_parser()
    except ValueError as exc:
        print(f"zlelaunch: configuration error: {exc}", file=sys.stderr)
        return 2

    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose)

    try:
        return run(args, io or MenuIO())
    except LauncherError as exc:
        LOG.debug("launcher failed: %s", exc.as_metadata())
        print(f"zlelaunch: {exc}", file=sys.stderr)
        return 1


def run(args: argparse.Namespace, io: MenuIO) -> int:
    reserved = () if args.no_edit else (EDIT_KEY,)
    config = load(args.config, reserved=reserved)

    if args.delimiter is not None:
        io.write(print_all(config.entries, args.delimiter))
        return 0

    entries = assign_default_keys(config.entries, reserved=reserved)
    if not args.no_edit:
        editor = _env_str("EDITOR") or DEFAULT_EDITOR
        entries = (*entries, build_edit_entry(config.source, editor))

    if args.list:
        listing = render(entries)
        if listing:
            io.write(f"{listing}\n")
        return 0

    return run_menu(io, entries)


def _configure_logging(*, verbose: bool = False) -> None:
    root = logging.getLogger()
    if root.handlers:
        if verbose:
            root.setLevel(logging.DEBUG)
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )


def _autoload_dotenv() -> None:
    dotenv_path = find_dotenv(filename=".env", usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path, encoding="utf-8")


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _env_bool(name: str, *, default: bool) -> bool:
    raw = _env_str(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"environment variable {name} is not a valid boolean: {raw}")
