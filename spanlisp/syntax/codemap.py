"""Source text and span tracking.

A Source owns one line of input. Spans are half-open `[lo, hi)` index ranges
into that text; every token, syntax node and error carries one so that
diagnostics can point back at the characters responsible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Span:
    lo: int
    hi: int

    def __post_init__(self):
        if self.lo > self.hi:
            raise ValueError(f"invalid span [{self.lo}, {self.hi})")

    def __len__(self) -> int:
        return self.hi - self.lo

    def to(self, other: Span) -> Span:
        """Span running from the start of this span to the end of `other`."""
        return Span(min(self.lo, other.lo), max(self.hi, other.hi))

    def contains(self, other: Span) -> bool:
        return self.lo <= other.lo and other.hi <= self.hi


@dataclass(frozen=True)
class Spanned(Generic[T]):
    span: Span
    node: T


class Source:
    """One line of user input."""

    __slots__ = ("_text", "start")

    def __init__(self, text: str, start: int = 0):
        self._text = text
        self.start = start

    def __getitem__(self, span: Span) -> str:
        return self._text[span.lo - self.start : span.hi - self.start]

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"Source({self._text!r})"

    def as_str(self) -> str:
        return self._text

    def eof_span(self) -> Span:
        end = self.start + len(self._text)
        return Span(end, end)
