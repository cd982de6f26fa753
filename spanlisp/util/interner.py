"""String interner mapping names to compact integer handles."""

from __future__ import annotations

import logging
from typing import NewType

logger = logging.getLogger(__name__)

Name = NewType("Name", int)


class Interner:
    """Bidirectional table between text and Name handles.

    Handles are issued in order starting at 0 and are never reused or removed,
    so a Name stays valid for as long as the interner that issued it.
    """

    __slots__ = ("_names", "_strings")

    def __init__(self):
        self._names: dict[str, Name] = {}
        self._strings: list[str] = []

    def intern(self, text: str) -> Name:
        name = self._names.get(text)
        if name is None:
            name = Name(len(self._strings))
            self._strings.append(text)
            self._names[text] = name
            logger.debug("interned %r as %d", text, name)
        return name

    def resolve(self, name: Name) -> str:
        """Return the text for `name`.

        Raises KeyError if `name` was not issued by this interner.
        """
        if not 0 <= name < len(self._strings):
            raise KeyError(name)
        return self._strings[name]

    def __contains__(self, text: str) -> bool:
        return text in self._names

    def __len__(self) -> int:
        return len(self._strings)
