"""Host configuration stores."""

from __future__ import annotations

from .file import FileConfigurationStore
from .memory import InMemoryConfigurationStore

__all__ = ["FileConfigurationStore", "InMemoryConfigurationStore"]
