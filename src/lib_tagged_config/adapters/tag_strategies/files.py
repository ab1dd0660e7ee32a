"""File-backed tag strategies.

Purpose
-------
Persist the environment tag of a machine in a small text file so operators can
switch environments without touching application configuration.

Contents
--------
* :class:`PathFileSettings` – pins the tag storage file to an explicit path.
* :class:`DefaultFileSettings` – places the file in the per-user configuration
  directory following platform conventions.
* :class:`FileTagStrategy` – base class providing
  :meth:`FileTagStrategy.ensure_storage_ready`.
* :class:`TextFileTagStrategy` – reads the trimmed file contents as the tag.

System Role
-----------
The only strategies that mutate the filesystem, and only to create the
directory and an empty file when they are missing.
"""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Mapping

from ...application.ports import FileSettings
from ...domain.errors import FileSettingsNotSet, NotFound
from ...observability import log_debug, log_info

TAG_FILE_NAME: Final[str] = "environment_tag.txt"


@dataclass(frozen=True)
class PathFileSettings:
    """File settings pointing at an explicit tag storage file.

    Examples
    --------
    >>> PathFileSettings('/srv/app/tag.txt').tag_storage_file_path.name
    'tag.txt'
    """

    path: str | Path

    @property
    def tag_storage_file_path(self) -> Path:
        return Path(self.path)


class DefaultFileSettings:
    """Resolve the tag storage file inside the per-user configuration directory.

    Why
    ----
    Mirrors the user-level directory conventions on each platform so the tag
    file lives next to other user configuration.

    Locations
    ---------
    * Linux: ``$XDG_CONFIG_HOME/<slug>/environment_tag.txt`` (``~/.config``
      when unset).
    * macOS: ``~/Library/Application Support/<vendor>/<app>/environment_tag.txt``.
    * Windows: ``%APPDATA%/<vendor>/<app>/environment_tag.txt``.

    Examples
    --------
    >>> settings = DefaultFileSettings(
    ...     vendor="Acme", app="Demo", slug="demo",
    ...     env={"XDG_CONFIG_HOME": "/cfg"}, platform="linux",
    ... )
    >>> settings.tag_storage_file_path.as_posix()
    '/cfg/demo/environment_tag.txt'
    """

    def __init__(
        self,
        *,
        vendor: str,
        app: str,
        slug: str,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
        file_name: str = TAG_FILE_NAME,
    ) -> None:
        self.vendor = vendor
        self.application = app
        self.slug = slug
        self.env = {**os.environ, **(env or {})}
        self.platform = platform or sys.platform
        self.file_name = file_name

    @property
    def tag_storage_file_path(self) -> Path:
        return self._user_directory() / self.file_name

    def _user_directory(self) -> Path:
        if self.platform == "darwin":
            home_default = Path.home() / "Library/Application Support"
            home_root = Path(self.env.get("LIB_TAGGED_CONFIG_MAC_HOME_ROOT", home_default))
            return home_root / self.vendor / self.application
        if self.platform.startswith("win"):
            appdata = Path(
                self.env.get("LIB_TAGGED_CONFIG_APPDATA", self.env.get("APPDATA", Path.home() / "AppData" / "Roaming"))
            )
            return appdata / self.vendor / self.application
        xdg = self.env.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
        return base / self.slug


class FileTagStrategy(ABC):
    """Base class for tag strategies backed by a storage file.

    Subclasses call :meth:`ensure_storage_ready` before touching the file.
    """

    def __init__(self, file_settings: FileSettings | None = None) -> None:
        self.file_settings = file_settings

    @abstractmethod
    def get_tag(self) -> str:
        """Return the current environment tag."""

    @property
    def storage_path(self) -> Path:
        if self.file_settings is None:
            raise FileSettingsNotSet()
        return Path(self.file_settings.tag_storage_file_path)

    def ensure_storage_ready(self) -> Path:
        """Create the parent directory and the storage file when missing.

        Idempotent: existing directories and files are left untouched.

        Raises
        ------
        FileSettingsNotSet
            When no file settings were supplied.
        NotFound
            When the storage path exists but is not a regular file.
        """

        path = self.storage_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists() and not path.is_file():
            raise NotFound(f"Tag storage path {path} exists but is not a regular file")
        if not path.exists():
            path.touch(exist_ok=True)
            log_info("tag_storage_created", source=type(self).__name__, key=None, path=str(path))
        return path


class TextFileTagStrategy(FileTagStrategy):
    """Read the environment tag from a plain text file.

    The file content is trimmed; an empty file yields ``""``.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> strategy = TextFileTagStrategy(PathFileSettings(Path(tmp.name) / "env" / "tag.txt"))
    >>> strategy.get_tag()
    ''
    >>> strategy.store_tag("QA")
    >>> strategy.get_tag()
    'QA'
    >>> tmp.cleanup()
    """

    def get_tag(self) -> str:
        path = self.ensure_storage_ready()
        tag = path.read_text(encoding="utf-8-sig").strip()
        log_debug("tag_file_read", source=type(self).__name__, key=None, path=str(path), empty=not tag)
        return tag

    def store_tag(self, tag: str) -> None:
        """Write *tag* into the storage file, replacing previous content."""

        path = self.ensure_storage_ready()
        path.write_text(tag.strip(), encoding="utf-8")
        log_info("tag_stored", source=type(self).__name__, key=None, path=str(path), tag=tag.strip())

    def __repr__(self) -> str:
        return f"TextFileTagStrategy({self.file_settings!r})"
