from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from .io import MenuIO
from .registry import Entry

LOG = logging.getLogger(__name__)

NUL_DELIMITER = "\0"
NEWLINE_DELIMITER = "\n"
CONTINUATION_INDENT = "    "

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
KEY_STYLE = "\x1b[33m\x1b[1m"
RESET_STYLE = "\x1b[0m"
CLEAR_LINE = "\x1b[2K"
CURSOR_PREV_LINE = "\x1b[F"
CURSOR_COLUMN_ONE = "\x1b[G"


@dataclass(frozen=True, slots=True)
class MenuView:
    text: str
    line_count: int


@dataclass(frozen=True, slots=True)
class ReadResult:
    value: str | None = None
    exit_code: int | None = None


def _require_key(entry: Entry) -> str:
    if entry.key is None:
        raise ValueError(f"Entry has no key: {entry.command!r}")
    return entry.key


def _indent_continuation(command: str) -> str:
    return command.replace("\n", "\n" + CONTINUATION_INDENT)


def render(entries: Sequence[Entry]) -> str:
    return "\n".join(
        f"{_require_key(entry)} {_indent_continuation(entry.command)}"
        for entry in entries
    )


def render_menu(entries: Sequence[Entry]) -> MenuView:
    """Build the interactive menu shown on stderr.

    ``line_count`` includes the continuation lines of multi-line commands so
    that ``erase_menu`` can remove exactly what was drawn.
    """
    parts = [HIDE_CURSOR]
    line_count = 0
    for entry in entries:
        key = _require_key(entry)
        line_count += entry.command.count("\n") + 1
        parts.append(
            f"\n {KEY_STYLE}{key}{RESET_STYLE} {_indent_continuation(entry.command)}"
        )
    return MenuView(text="".join(parts), line_count=line_count)


def erase_menu(line_count: int) -> str:
    # the cursor sits on the last drawn line; walk up clearing each one
    clear_upwards = (CLEAR_LINE + CURSOR_PREV_LINE) * max(line_count - 1, 0)
    return f"{clear_upwards}{CLEAR_LINE}{CURSOR_COLUMN_ONE}{SHOW_CURSOR}"


def select_by_key(entries: Sequence[Entry], pressed: str) -> str | None:
    return next((entry.command for entry in entries if entry.key == pressed), None)


def print_all(entries: Sequence[Entry], delimiter: str = NUL_DELIMITER) -> str:
    return "".join(f"{entry.command}{delimiter}" for entry in entries)


def run_menu(io: MenuIO, entries: Sequence[Entry]) -> int:
    view = render_menu(entries)
    io.draw(view.text)

    read_result = _safe_read_key(io)
    io.draw(erase_menu(view.line_count))
    if read_result.exit_code is not None:
        LOG.debug("no key read, exiting with code %d", read_result.exit_code)
        return read_result.exit_code

    pressed = read_result.value or ""
    command = select_by_key(entries, pressed)
    if command is None:
        LOG.debug("no entry bound to key %r", pressed)
        return 0

    LOG.debug("key %r selected %r", pressed, command)
    io.write(f"{command}\n")
    return 0


def _safe_read_key(io: MenuIO) -> ReadResult:
    try:
        return ReadResult(value=io.read_key())
    except EOFError:
        return ReadResult(exit_code=0)
    except KeyboardInterrupt:
        return ReadResult(exit_code=130)
