from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from zlelaunch.cli.io import MenuIO
from zlelaunch.cli.menu import SHOW_CURSOR, run_menu
from zlelaunch.cli.registry import Entry

ENTRIES = (
    Entry(command="cargo test", key="a"),
    Entry(command="cargo clippy", key="c"),
    Entry(command="vim .ctrl_e.yml", key="z"),
)


def _build_menu_io(
    key: str | BaseException,
    out: list[str],
    err: list[str],
) -> MenuIO:
    def _read_key() -> str:
        if isinstance(key, BaseException):
            raise key
        return key

    return MenuIO(read_key_func=_read_key, out_func=out.append, err_func=err.append)


def test_pressed_key_prints_command_on_stdout() -> None:
    out: list[str] = []
    err: list[str] = []

    exit_code = run_menu(_build_menu_io("c", out, err), ENTRIES)

    assert exit_code == 0
    assert out == ["cargo clippy\n"]


def test_menu_is_drawn_on_stderr_then_erased() -> None:
    out: list[str] = []
    err: list[str] = []

    _ = run_menu(_build_menu_io("a", out, err), ENTRIES)

    assert len(err) == 2
    assert "cargo clippy" in err[0]
    assert err[1].endswith(SHOW_CURSOR)
    assert err[1].count("\x1b[F") == 2


def test_unbound_key_prints_nothing() -> None:
    out: list[str] = []
    err: list[str] = []

    exit_code = run_menu(_build_menu_io("q", out, err), ENTRIES)

    assert exit_code == 0
    assert out == []


def test_eof_on_stdin_returns_zero_and_erases_menu() -> None:
    out: list[str] = []
    err: list[str] = []

    exit_code = run_menu(_build_menu_io(EOFError(), out, err), ENTRIES)

    assert exit_code == 0
    assert out == []
    assert err[-1].endswith(SHOW_CURSOR)


def test_keyboardinterrupt_returns_130() -> None:
    out: list[str] = []
    err: list[str] = []

    exit_code = run_menu(_build_menu_io(KeyboardInterrupt(), out, err), ENTRIES)

    assert exit_code == 130
    assert out == []
