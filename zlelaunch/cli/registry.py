from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
import logging
from pathlib import Path
import shlex
from typing import cast

import yaml

LOG = logging.getLogger(__name__)

# Dvorak home row first, then outwards.
KEY_ALPHABET = "aoeuhtnsidpyfgcrlqjkxbmwvz"
EDIT_KEY = "z"
DEFAULT_EDITOR = "vim"


class LauncherError(RuntimeError):
    code: str
    context: dict[str, object]

    def __init__(
        self,
        message: str,
        *,
        code: str,
        context: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context = dict(context or {})

    def as_metadata(self) -> dict[str, object]:
        return {
            "code": self.code,
            "message": str(self),
            "context": self.context,
        }


class ConfigError(LauncherError):
    pass


class ConfigNotFoundError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class EntryError(LauncherError):
    pass


class KeyExhaustionError(LauncherError):
    pass


@dataclass(frozen=True, slots=True)
class Entry:
    command: str
    key: str | None = None


@dataclass(frozen=True, slots=True)
class MenuConfig:
    source: Path
    entries: tuple[Entry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)


def load(path: str | Path, *, reserved: Iterable[str] = ()) -> MenuConfig:
    """Read a launcher file and return its entries in file order.

    Keys listed in ``reserved`` are treated as already taken, so an explicit
    entry key that collides with one of them falls back to a default key.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(
            f"config file not found: {config_path}",
            code="config_not_found",
            context={"path": str(config_path)},
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(
            f"failed to read {config_path}: {exc}",
            code="config_parse_error",
            context={"path": str(config_path)},
        ) from exc

    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as exc:
        raise ConfigParseError(
            f"invalid YAML in {config_path}: {exc}",
            code="config_parse_error",
            context={"path": str(config_path)},
        ) from exc

    entries = parse_entries(documents, reserved=reserved)
    LOG.debug("loaded %d entries from %s", len(entries), config_path)
    return MenuConfig(source=config_path, entries=tuple(entries))


def parse_entries(
    documents: Iterable[object],
    *,
    reserved: Iterable[str] = (),
) -> list[Entry]:
    entries: list[Entry] = []
    taken = set(reserved)
    index = 0
    for document_index, document in enumerate(documents):
        # an empty document (or a bare "---") contributes nothing
        if document is None:
            continue
        if not isinstance(document, list):
            raise ConfigParseError(
                f"expected a list of entries in document {document_index}, "
                f"found {type(document).__name__}",
                code="config_parse_error",
                context={"document": document_index},
            )

        for item in cast(list[object], document):
            entry = _parse_entry(index, item)
            if entry.key is not None:
                if entry.key in taken:
                    LOG.warning(
                        "key %r at index %d is already taken, assigning a default key",
                        entry.key,
                        index,
                    )
                    entry = replace(entry, key=None)
                else:
                    taken.add(entry.key)
            entries.append(entry)
            index += 1

    return entries


def _parse_entry(index: int, item: object) -> Entry:
    if isinstance(item, str):
        return Entry(command=_require_command(index, item))

    if not isinstance(item, dict):
        raise EntryError(
            f"expected string or mapping at index {index}, found {item!r}",
            code="entry_shape_error",
            context={"index": index},
        )

    mapping = cast(dict[object, object], item)
    if "command" not in mapping:
        raise EntryError(
            f'missing required key "command" at index {index}, found {item!r}',
            code="entry_shape_error",
            context={"index": index},
        )
    command_obj = mapping["command"]
    if not isinstance(command_obj, str):
        raise EntryError(
            f'"command" at index {index} must be a string, found {command_obj!r}',
            code="entry_shape_error",
            context={"index": index},
        )
    command = _require_command(index, command_obj)

    key_obj = mapping.get("key")
    if key_obj is None:
        return Entry(command=command)
    if not isinstance(key_obj, str) or len(key_obj) != 1:
        raise EntryError(
            f'"key" at index {index} must be a single character, found {key_obj!r}',
            code="entry_shape_error",
            context={"index": index},
        )
    return Entry(command=command, key=key_obj)


def _require_command(index: int, raw: str) -> str:
    # block scalars keep their trailing newline
    command = raw.rstrip()
    if not command:
        raise EntryError(
            f"empty command at index {index}",
            code="entry_shape_error",
            context={"index": index},
        )
    return command


def assign_default_keys(
    entries: Sequence[Entry],
    reserved: Iterable[str] = (),
) -> tuple[Entry, ...]:
    """Give every entry without a key the next free letter of KEY_ALPHABET.

    Explicit keys and ``reserved`` keys are never handed out. Entries are
    visited in declaration order, so the result is deterministic.
    """
    taken = set(reserved)
    taken.update(entry.key for entry in entries if entry.key is not None)
    free_keys = iter([char for char in KEY_ALPHABET if char not in taken])

    assigned: list[Entry] = []
    for index, entry in enumerate(entries):
        if entry.key is not None:
            assigned.append(entry)
            continue
        key = next(free_keys, None)
        if key is None:
            raise KeyExhaustionError(
                f"no free key left for entry at index {index}: {entry.command!r}",
                code="key_exhaustion",
                context={"index": index, "alphabet": KEY_ALPHABET},
            )
        assigned.append(replace(entry, key=key))

    return tuple(assigned)


def build_edit_entry(config_path: str | Path, editor: str = DEFAULT_EDITOR) -> Entry:
    return Entry(command=f"{editor} {shlex.quote(str(config_path))}", key=EDIT_KEY)
