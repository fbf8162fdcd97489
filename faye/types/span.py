"""Source text and spans into it.

Every token, node and error carries a Span: a half-open offset range into a
shared, immutable Source. Offsets index the Python string holding the text, so
a multi-byte character occupies a single offset and slicing is always exact.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import NamedTuple, Optional


class Location(NamedTuple):
    """A 0-based (line, column) pair."""

    line: int
    column: int


class Source:
    """Original text plus its name and precomputed line ends."""

    __slots__ = ("name", "contents", "lines")

    def __init__(self, contents: str, name: Optional[str] = None):
        self.name: Optional[str] = name
        self.contents: str = contents
        # offset of every newline, then the end of the text
        self.lines: list[int] = [i for i, c in enumerate(contents) if c == "\n"]
        self.lines.append(len(contents))

    def location(self, offset: int) -> Location:
        line = bisect_left(self.lines, offset)
        start = self.lines[line - 1] + 1 if line > 0 else 0
        return Location(line, offset - start)

    def get_line(self, line: int) -> str:
        end = self.lines[line]
        start = self.lines[line - 1] + 1 if line > 0 else 0
        return self.contents[start:end]

    def __repr__(self) -> str:
        return f"Source(name={self.name!r}, length={len(self.contents)})"


class Span:
    __slots__ = ("start", "end", "source")

    def __init__(self, start: int, end: int, source: Source):
        self.start = start
        self.end = end
        self.source = source

    @classmethod
    def empty(cls, source: Source, offset: int = 0) -> Span:
        return cls(offset, offset, source)

    @property
    def text(self) -> str:
        return self.source.contents[self.start:self.end]

    def location(self) -> Location:
        return self.source.location(self.start)

    def end_location(self) -> Location:
        return self.source.location(self.end)

    def same_source(self, other: Span) -> bool:
        return self.source is other.source

    def join(self, other: Span) -> Span:
        """New span from the start of this one to the end of `other`."""
        assert self.same_source(other), "cannot join spans of different sources"
        return Span(self.start, other.end, self.source)

    def extend(self, other: Span) -> None:
        assert self.same_source(other), "cannot extend a span with another source"
        self.end = other.end

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Span)
            and self.same_source(other)
            and self.start == other.start
            and self.end == other.end
        )

    def __hash__(self) -> int:
        return hash((id(self.source), self.start, self.end))

    def __repr__(self) -> str:
        return f"Span({self.start}..{self.end})"
