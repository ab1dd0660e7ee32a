"""Structured store file loaders.

Purpose
-------
Convert on-disk store documents into Python mappings. Loaders are small
wrappers around ``tomllib`` / ``json`` / ``yaml`` so error handling and
observability live in one place. YAML is read with ``yaml.BaseLoader``: store
values are strings, so scalars such as ``NO``, ``0755`` or ``1.10`` keep their
spelling instead of turning into booleans and numbers.

Contents
--------
* :class:`BaseFileLoader` – shared helpers for reading files and validating
  mapping outputs.
* :class:`TOMLFileLoader` / :class:`JSONFileLoader` / :class:`YAMLFileLoader`.
* :func:`loader_for` – pick a loader from a file suffix.

System Role
-----------
Invoked by :class:`lib_tagged_config.adapters.stores.file.FileConfigurationStore`
on every store access.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Mapping

import yaml

from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error


class BaseFileLoader:
    """Common utilities shared by the structured file loaders."""

    format_name = "unknown"

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when the file is missing.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b"[app_settings]")
        >>> tmp.close()
        >>> BaseFileLoader()._read(tmp.name)[:4]
        b'[app'
        >>> Path(tmp.name).unlink()
        """

        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Configuration store file not found: {path}")
        payload = file_path.read_bytes()
        log_debug("store_file_read", source="file", key=None, path=path, size=len(payload))
        return payload

    @staticmethod
    def _ensure_mapping(data: object, *, path: str) -> Mapping[str, object]:
        """Ensure *data* behaves like a mapping, otherwise raise ``InvalidFormat``.

        Examples
        --------
        >>> BaseFileLoader._ensure_mapping({"key": 1}, path="demo")
        {'key': 1}
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        return data

    def _invalid(self, path: str, exc: Exception) -> InvalidFormat:
        log_error("config_file_invalid", source="file", key=None, path=path, format=self.format_name, error=str(exc))
        return InvalidFormat(f"Invalid {self.format_name.upper()} in {path}: {exc}")


class TOMLFileLoader(BaseFileLoader):
    """Load TOML documents using the standard library parser."""

    format_name = "toml"

    def load(self, path: str) -> Mapping[str, object]:
        """Return mapping extracted from TOML file at *path*.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', suffix='.toml', delete=False, encoding='utf-8')
        >>> _ = tmp.write('[app_settings]\\n"Dev.Setting" = "x"')
        >>> tmp.close()
        >>> TOMLFileLoader().load(tmp.name)["app_settings"]
        {'Dev.Setting': 'x'}
        >>> Path(tmp.name).unlink()
        """

        try:
            data = tomllib.loads(self._read(path).decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise self._invalid(path, exc) from exc
        return self._ensure_mapping(data, path=path)


class JSONFileLoader(BaseFileLoader):
    """Load JSON documents."""

    format_name = "json"

    def load(self, path: str) -> Mapping[str, object]:
        try:
            data = json.loads(self._read(path))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise self._invalid(path, exc) from exc
        return self._ensure_mapping(data, path=path)


class YAMLFileLoader(BaseFileLoader):
    """Load YAML documents without type resolution; an empty document is ``{}``.

    Examples
    --------
    >>> from tempfile import NamedTemporaryFile
    >>> tmp = NamedTemporaryFile('w', suffix='.yaml', delete=False, encoding='utf-8')
    >>> _ = tmp.write('app_settings:\\n  Dev.Country: NO\\n  Dev.Mode: 0755\\n')
    >>> tmp.close()
    >>> YAMLFileLoader().load(tmp.name)["app_settings"]
    {'Dev.Country': 'NO', 'Dev.Mode': '0755'}
    >>> Path(tmp.name).unlink()
    """

    format_name = "yaml"

    def load(self, path: str) -> Mapping[str, object]:
        try:
            data = yaml.load(self._read(path), Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise self._invalid(path, exc) from exc
        if data is None:
            data = {}
        return self._ensure_mapping(data, path=path)


_FILE_LOADERS: dict[str, BaseFileLoader] = {
    ".toml": TOMLFileLoader(),
    ".json": JSONFileLoader(),
    ".yaml": YAMLFileLoader(),
    ".yml": YAMLFileLoader(),
}


def loader_for(path: str | Path) -> TOMLFileLoader | JSONFileLoader | YAMLFileLoader:
    """Return the loader registered for the suffix of *path*.

    Raises
    ------
    InvalidFormat
        When the suffix is not one of ``.toml``, ``.json``, ``.yaml``, ``.yml``.

    Examples
    --------
    >>> type(loader_for("settings.YML")).__name__
    'YAMLFileLoader'
    """

    suffix = Path(path).suffix.lower()
    try:
        return _FILE_LOADERS[suffix]  # type: ignore[return-value]
    except KeyError:
        raise InvalidFormat(f"Unsupported configuration store format {suffix or '<none>'!r} for {path}") from None
