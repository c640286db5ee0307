"""Plain-text ``yal.conf`` loading and the immutable run configuration.

The file holds ``key=value`` lines with ``#`` comments. All access is
defensive: a missing, unreadable, or malformed file and any unknown key or
value fall back to built-in defaults without reporting anything.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_FILENAME = "yal.conf"

COLUMN_ICON = "icon"
COLUMN_PERMISSIONS = "permissions"
COLUMN_OWNER = "owner"
COLUMN_GROUP = "group"
COLUMN_MODIFIED = "modified"
COLUMN_NAME = "name"

COLUMN_VOCABULARY: tuple[str, ...] = (
    COLUMN_ICON,
    COLUMN_PERMISSIONS,
    COLUMN_OWNER,
    COLUMN_GROUP,
    COLUMN_MODIFIED,
    COLUMN_NAME,
)
DEFAULT_COLUMN_ORDER = COLUMN_VOCABULARY

TRUE_WORDS = frozenset({"true", "yes", "1", "on", "enabled"})

# Columns that ``long_format = false`` suppresses.
_LONG_FORMAT_COLUMNS = frozenset({COLUMN_PERMISSIONS, COLUMN_OWNER, COLUMN_GROUP, COLUMN_MODIFIED})


@dataclass(frozen=True)
class Config:
    """Display toggles and column order for one listing run.

    ``column_order`` may contain identifiers outside ``COLUMN_VOCABULARY``;
    they are kept here and skipped by the renderer.
    """

    show_icons: bool = True
    show_permissions: bool = True
    show_owner: bool = True
    show_group: bool = True
    show_modified: bool = True
    use_fuzzy_time: bool = True
    column_format: bool = True
    sort_dirs_first: bool = True
    show_hidden: bool = False
    long_format: bool = True
    column_order: tuple[str, ...] = DEFAULT_COLUMN_ORDER

    def column_enabled(self, column: str) -> bool:
        """Return whether ``column`` should be rendered; unknown ids are not."""
        if column in _LONG_FORMAT_COLUMNS and not self.long_format:
            return False
        toggles = {
            COLUMN_ICON: self.show_icons,
            COLUMN_PERMISSIONS: self.show_permissions,
            COLUMN_OWNER: self.show_owner,
            COLUMN_GROUP: self.show_group,
            COLUMN_MODIFIED: self.show_modified,
            COLUMN_NAME: True,
        }
        return toggles.get(column, False)

    def visible_columns(self) -> tuple[str, ...]:
        """Enabled known columns in configured order."""
        return tuple(column for column in self.column_order if self.column_enabled(column))


BOOLEAN_KEYS = frozenset(f.name for f in fields(Config) if f.name != "column_order")


def parse_bool(value: str) -> bool:
    """Case-insensitive boolean parse; anything unrecognized is ``False``."""
    return value.strip().lower() in TRUE_WORDS


def parse_column_order(value: str) -> tuple[str, ...]:
    """Split a comma-separated column list, dropping blank items.

    Identifiers are lower-cased but not validated.
    """
    return tuple(item.strip().lower() for item in value.split(",") if item.strip())


def parse_config_text(text: str, base: Config | None = None) -> Config:
    """Apply ``key=value`` lines from ``text`` on top of ``base`` (or defaults)."""
    overrides: dict[str, object] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key in BOOLEAN_KEYS:
            overrides[key] = parse_bool(value)
        elif key == "column_order":
            overrides[key] = parse_column_order(value)
    return replace(base or Config(), **overrides)


def config_search_paths() -> list[Path]:
    """Return candidate config files in lookup order, without duplicates.

    The platform config directory honours ``$XDG_CONFIG_HOME`` on Linux and
    falls back to ``~/.config``.
    """
    candidates = [Path(user_config_dir()) / CONFIG_FILENAME]
    home = os.environ.get("HOME")
    home_path = Path(home) if home else Path.home()
    candidates.append(home_path / ".config" / CONFIG_FILENAME)
    candidates.append(home_path / f".{CONFIG_FILENAME}")
    candidates.append(Path.cwd() / CONFIG_FILENAME)

    unique: list[Path] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


def find_config_path() -> Path | None:
    """Return the first existing config file, or ``None``."""
    for candidate in config_search_paths():
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            continue
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path`` or the first discovered file.

    Returns defaults when no file is found or it cannot be read or decoded.
    """
    config_path = path if path is not None else find_config_path()
    if config_path is None:
        return Config()
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return Config()
    return parse_config_text(text)


__all__ = [
    "CONFIG_FILENAME",
    "COLUMN_ICON",
    "COLUMN_PERMISSIONS",
    "COLUMN_OWNER",
    "COLUMN_GROUP",
    "COLUMN_MODIFIED",
    "COLUMN_NAME",
    "COLUMN_VOCABULARY",
    "DEFAULT_COLUMN_ORDER",
    "Config",
    "parse_bool",
    "parse_column_order",
    "parse_config_text",
    "config_search_paths",
    "find_config_path",
    "load_config",
]
