"""Key-value sources."""

from __future__ import annotations

from .default import AppSettingsSource, ConnectionStringsSource, MappingSource

__all__ = ["AppSettingsSource", "ConnectionStringsSource", "MappingSource"]
