"""Qualified-key composition.

The qualified key is the literal ``<tag>.<key>`` string looked up in a
key-value collection. The separator is never escaped, so a tag or key that
contains ``.`` can collide with another pair (``"A.B" + "C"`` and
``"A" + "B.C"`` both yield ``"A.B.C"``).
"""

from __future__ import annotations

from typing import Final, Mapping

SEPARATOR: Final[str] = "."


def qualify_key(tag: str, key: str) -> str:
    """Return ``tag`` and ``key`` joined by :data:`SEPARATOR`.

    Examples
    --------
    >>> qualify_key("Dev", "Setting")
    'Dev.Setting'
    """

    return f"{tag}{SEPARATOR}{key}"


def strip_tag(tag: str, collection: Mapping[str, str]) -> dict[str, str]:
    """Return the entries of *collection* belonging to *tag*, without the prefix.

    Order of the incoming collection is preserved.

    Examples
    --------
    >>> strip_tag("Dev", {"Dev.a": "1", "QA.a": "2", "Dev.b": "3"})
    {'a': '1', 'b': '3'}
    """

    prefix = qualify_key(tag, "")
    return {key[len(prefix) :]: value for key, value in collection.items() if key.startswith(prefix)}
