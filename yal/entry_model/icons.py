"""File-type glyphs keyed by directory flag and filename extension."""

from __future__ import annotations

from types import MappingProxyType

DIRECTORY_ICON = "📁"
HIDDEN_ICON = "👻"
DEFAULT_ICON = "📄"

_CONFIG_OR_BINARY_ICON = "⚙️"

_ICON_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("🦀", ("rs",)),
    ("🐍", ("py",)),
    ("⚡", ("js", "ts")),
    ("🌐", ("html", "htm")),
    ("🎨", ("css",)),
    ("📊", ("json",)),
    ("📝", ("md", "markdown")),
    ("📄", ("txt",)),
    ("📕", ("pdf",)),
    ("📦", ("zip", "tar", "gz", "rar")),
    ("🖼️", ("jpg", "jpeg", "png", "gif", "bmp", "svg")),
    ("🎵", ("mp3", "wav", "flac", "ogg")),
    ("🎬", ("mp4", "mkv", "avi", "mov")),
    (_CONFIG_OR_BINARY_ICON, ("exe", "bin")),
    (_CONFIG_OR_BINARY_ICON, ("toml", "yaml", "yml", "ini", "conf")),
)

EXTENSION_ICONS = MappingProxyType(
    {extension: icon for icon, extensions in _ICON_GROUPS for extension in extensions}
)


def file_extension(name: str) -> str:
    """Return the lower-cased text after the last dot, or ``""``.

    A leading dot does not begin an extension, so ``.bashrc`` has none while
    ``.config.toml`` has ``toml``.
    """
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot + 1 :].lower()


def classify(name: str, is_dir: bool) -> str:
    """Map an entry to exactly one display glyph.

    Order: directory, known extension, hidden name, generic file.
    """
    if is_dir:
        return DIRECTORY_ICON
    icon = EXTENSION_ICONS.get(file_extension(name))
    if icon is not None:
        return icon
    if name.startswith("."):
        return HIDDEN_ICON
    return DEFAULT_ICON


__all__ = [
    "DIRECTORY_ICON",
    "HIDDEN_ICON",
    "DEFAULT_ICON",
    "EXTENSION_ICONS",
    "file_extension",
    "classify",
]
