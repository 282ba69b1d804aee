"""YAML-configured command launcher for zsh.

Add to .zshrc:

    ctrl_e_menu() { zle -U "$(read -ek | zlelaunch .ctrl_e.yml)
    " }
    zle -N ctrl_e_menu
    bindkey '^e' ctrl_e_menu

The config file is a list where each entry is either a command string or a
mapping with ``command`` and an optional single-character ``key``:

    - cargo test --examples --frozen
    - key: c
      command: cargo clippy --no-deps
"""

from .cli.registry import (
    KEY_ALPHABET,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    Entry,
    EntryError,
    KeyExhaustionError,
    LauncherError,
    MenuConfig,
    assign_default_keys,
    load,
)
from .cli.menu import print_all, render, select_by_key

__all__ = [
    "KEY_ALPHABET",
    "Entry",
    "MenuConfig",
    "LauncherError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "EntryError",
    "KeyExhaustionError",
    "load",
    "assign_default_keys",
    "render",
    "select_by_key",
    "print_all",
]
