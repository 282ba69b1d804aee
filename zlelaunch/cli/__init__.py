from .io import MenuIO
from .menu import (
    MenuView,
    erase_menu,
    print_all,
    render,
    render_menu,
    run_menu,
    select_by_key,
)
from .registry import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    Entry,
    EntryError,
    KeyExhaustionError,
    LauncherError,
    MenuConfig,
    assign_default_keys,
    build_edit_entry,
    load,
    parse_entries,
)

__all__ = [
    "MenuIO",
    "MenuView",
    "Entry",
    "MenuConfig",
    "LauncherError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "EntryError",
    "KeyExhaustionError",
    "load",
    "parse_entries",
    "assign_default_keys",
    "build_edit_entry",
    "render",
    "render_menu",
    "erase_menu",
    "select_by_key",
    "print_all",
    "run_menu",
]
