"""Runtime environment for spanlisp.

Bindings live in a Stack of Env frames. The bottom frame is global and lives
for the whole session; `let` pushes a frame for the extent of its body and the
frame is popped again however evaluation leaves it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from spanlisp import LispValue
from spanlisp.util.interner import Name

logger = logging.getLogger(__name__)


class Env:
    """A single frame: Name -> value, last write wins."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[Name, LispValue] | None = None):
        self.vars: dict[Name, LispValue] = dict(bindings or {})

    def insert(self, name: Name, value: LispValue) -> None:
        self.vars[name] = value

    def get(self, name: Name) -> Optional[LispValue]:
        return self.vars.get(name)

    def __contains__(self, name: Name) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)


class Stack:
    """Non-empty stack of frames; lookups walk from the top down."""

    __slots__ = ("frames",)

    def __init__(self, global_frame: Env):
        self.frames: list[Env] = [global_frame]

    @classmethod
    def new_global(cls) -> Stack:
        return cls(Env())

    @property
    def depth(self) -> int:
        return len(self.frames)

    @property
    def global_frame(self) -> Env:
        return self.frames[0]

    @contextmanager
    def push(self, frame: Env) -> Iterator[Stack]:
        """Enter `frame` for the duration of the `with` block."""
        self.frames.append(frame)
        logger.debug("pushed frame, depth %d", len(self.frames))
        try:
            yield self
        finally:
            popped = self.frames.pop()
            if popped is not frame:
                raise RuntimeError("environment frames popped out of order")
            logger.debug("popped frame, depth %d", len(self.frames))

    def insert(self, name: Name, value: LispValue) -> None:
        """Bind `name` in the topmost frame."""
        self.frames[-1].insert(name, value)

    def update(self, bindings: Mapping[Name, LispValue]) -> None:
        for name, value in bindings.items():
            self.insert(name, value)

    def get(self, name: Name) -> Optional[LispValue]:
        """Return the innermost binding of `name`, or None if it is unbound."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame.vars[name]
        return None
