"""Application catalog models.

This module defines the fixed catalog of desktop applications that winkit
can install, keyed by a short user-facing identifier.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A single installable application.

    Attributes:
        key: Short identifier, unique within the catalog (e.g. 'chrome').
        package_id: Identifier the package manager uses (e.g. 'Google.Chrome').
        display_name: Human-readable application name.
    """

    key: str
    package_id: str
    display_name: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.key:
            msg = "Catalog key cannot be empty"
            raise ValueError(msg)
        if not self.package_id:
            msg = f"Package identifier cannot be empty (key '{self.key}')"
            raise ValueError(msg)
        if not self.display_name:
            msg = f"Display name cannot be empty (key '{self.key}')"
            raise ValueError(msg)


class Catalog:
    """Immutable, ordered collection of catalog entries.

    Iteration order is the declaration order, which is also the order in
    which selected entries are installed.

    Example:
        >>> catalog = Catalog([CatalogEntry("vlc", "VideoLAN.VLC", "VLC")])
        >>> catalog["vlc"].package_id
        'VideoLAN.VLC'
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        by_key: dict[str, CatalogEntry] = {}
        for entry in entries:
            if entry.key in by_key:
                msg = f"Duplicate catalog key: {entry.key}"
                raise ValueError(msg)
            by_key[entry.key] = entry
        self._entries = by_key

    def __getitem__(self, key: str) -> CatalogEntry:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def keys(self) -> tuple[str, ...]:
        """Return all catalog keys in catalog order."""
        return tuple(self._entries)

    def unknown_keys(self, keys: Iterable[str]) -> list[str]:
        """Return the given keys that are not part of this catalog, sorted."""
        return sorted(k for k in set(keys) if k not in self._entries)


DEFAULT_CATALOG = Catalog(
    [
        # Browsers
        CatalogEntry("chrome", "Google.Chrome", "Google Chrome"),
        CatalogEntry("firefox", "Mozilla.Firefox", "Mozilla Firefox"),
        CatalogEntry("brave", "Brave.Brave", "Brave Browser"),
        # Gaming
        CatalogEntry("steam", "Valve.Steam", "Steam"),
        CatalogEntry("epic", "EpicGames.EpicGamesLauncher", "Epic Games Launcher"),
        CatalogEntry("discord", "Discord.Discord", "Discord"),
        # Media
        CatalogEntry("spotify", "Spotify.Spotify", "Spotify"),
        CatalogEntry("vlc", "VideoLAN.VLC", "VLC media player"),
        CatalogEntry("obs", "OBSProject.OBSStudio", "OBS Studio"),
        # Utilities
        CatalogEntry("7zip", "7zip.7zip", "7-Zip"),
        CatalogEntry("notepadpp", "Notepad++.Notepad++", "Notepad++"),
        CatalogEntry("zoom", "Zoom.Zoom", "Zoom"),
        # Development
        CatalogEntry("vscode", "Microsoft.VisualStudioCode", "Visual Studio Code"),
        CatalogEntry("git", "Git.Git", "Git"),
        CatalogEntry("python", "Python.Python.3.12", "Python 3.12"),
    ]
)
