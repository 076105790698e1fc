from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line and character, counted in Unicode scalar values."""

    line: int = 0
    character: int = 0


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open [start, end) span of document text."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class CharPos:
    """A character with its position and its offset within its own line."""

    char: str
    position: Position
    offset: int


@dataclass(frozen=True, slots=True)
class Word:
    """A spell-checkable run of word characters and the range it covers."""

    text: str
    range: Range

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "range": {
                "start": {
                    "line": self.range.start.line,
                    "character": self.range.start.character,
                },
                "end": {
                    "line": self.range.end.line,
                    "character": self.range.end.character,
                },
            },
        }
