from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import Callable

ReadKeyFunc = Callable[[], str]
WriteFunc = Callable[[str], None]


def _stdin_read_key() -> str:
    stream = getattr(sys, "stdin", None)
    reader = getattr(stream, "read", None)
    if not callable(reader):
        raise EOFError("stdin is not readable")
    char = reader(1)
    if not char:
        raise EOFError("no key on stdin")
    return str(char)


def _stdout_write(text: str) -> None:
    _ = sys.stdout.write(text)
    sys.stdout.flush()


def _stderr_write(text: str) -> None:
    _ = sys.stderr.write(text)
    sys.stderr.flush()


@dataclass(slots=True)
class MenuIO:
    """Terminal access for the launcher.

    The menu is drawn on stderr because stdout is captured by the shell and
    must only ever carry the selected command.
    """

    read_key_func: ReadKeyFunc = _stdin_read_key
    out_func: WriteFunc = _stdout_write
    err_func: WriteFunc = _stderr_write

    def read_key(self) -> str:
        return self.read_key_func()

    def write(self, text: str) -> None:
        self.out_func(text)

    def draw(self, text: str) -> None:
        self.err_func(text)
