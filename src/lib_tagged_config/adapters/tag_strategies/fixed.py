"""Tag strategy returning a value fixed in code."""

from __future__ import annotations


class FixedTagStrategy:
    """Return the tag supplied at construction time.

    Useful for tests, scripts, and applications that decide their environment
    at startup.

    Examples
    --------
    >>> FixedTagStrategy("Dev").get_tag()
    'Dev'
    """

    def __init__(self, tag: str) -> None:
        self._tag = tag

    @property
    def tag(self) -> str:
        return self._tag

    def get_tag(self) -> str:
        return self._tag

    def __repr__(self) -> str:
        return f"FixedTagStrategy({self._tag!r})"
