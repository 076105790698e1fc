from __future__ import annotations

from typing import Iterator, List

import regex

from .models import CharPos, Position, Range, Word

WORD_CHAR_PATTERN = regex.compile(r"[\p{Alphabetic}']")


def is_word_char(char: str) -> bool:
    """Return True for Unicode alphabetic characters and the apostrophe."""
    return WORD_CHAR_PATTERN.fullmatch(char) is not None


def split_lines(text: str) -> List[str]:
    """Split text on ``\\n`` and ``\\r\\n`` the way editors number lines.

    Terminators are stripped and a trailing terminator does not open an
    extra empty line, so ``""`` has no lines and ``"a\\n"`` has one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CharPosStream:
    """Forward-only cursor over the characters of a document.

    Each produced ``CharPos`` carries the (line, character) position of the
    character and its offset within the line that was current when it was
    produced. Line terminators are never produced.
    """

    def __init__(self, lines: List[str]) -> None:
        if not lines:
            raise ValueError("CharPosStream requires at least one line.")
        self._lines = lines
        self._line_index = 0
        self._offset = 0
        self._character = 0
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str) -> CharPosStream | None:
        """Return a stream over ``text`` or ``None`` when it has no lines."""
        lines = split_lines(text)
        if not lines:
            return None
        return cls(lines)

    @property
    def current_line(self) -> str:
        return self._lines[self._line_index]

    @property
    def line_index(self) -> int:
        return self._line_index

    def next_char(self) -> CharPos | None:
        """Produce the next character, moving across lines as they run out."""
        while not self._exhausted:
            line = self._lines[self._line_index]
            if self._offset < len(line):
                charpos = CharPos(
                    char=line[self._offset],
                    position=Position(self._line_index, self._character),
                    offset=self._offset,
                )
                self._offset += 1
                self._character += 1
                return charpos
            if self._line_index + 1 >= len(self._lines):
                self._exhausted = True
                break
            self._line_index += 1
            self._offset = 0
            self._character = 0
        return None

    def __iter__(self) -> Iterator[CharPos]:
        return self

    def __next__(self) -> CharPos:
        charpos = self.next_char()
        if charpos is None:
            raise StopIteration
        return charpos


class WordTokenizer:
    """Split a document into words, one ``advance`` at a time.

    A word is a maximal run of word characters on a single line. Once
    ``advance`` returns ``None`` the tokenizer stays exhausted; build a new
    one to scan again.
    """

    def __init__(self, stream: CharPosStream) -> None:
        self._stream = stream
        # Character read while closing the previous word on a line change.
        self._pending: CharPos | None = None
        self._current: Word | None = None
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str) -> WordTokenizer | None:
        """Return a tokenizer over ``text`` or ``None`` when it has no lines."""
        stream = CharPosStream.from_text(text)
        if stream is None:
            return None
        return cls(stream)

    @property
    def current(self) -> Word | None:
        """The word produced by the last ``advance`` call."""
        return self._current

    def advance(self) -> Word | None:
        """Produce the next word, or ``None`` once the text is exhausted."""
        if self._exhausted:
            return None

        begin = self._next_char()
        while begin is not None and not is_word_char(begin.char):
            begin = self._next_char()
        if begin is None:
            self._exhausted = True
            self._current = None
            return None

        anchor_line = self._stream.current_line
        anchor_index = self._stream.line_index
        end = begin
        while True:
            charpos = self._next_char()
            if charpos is None:
                break
            if charpos.position.line != anchor_index:
                # A line break always ends the word.
                self._pending = charpos
                break
            if not is_word_char(charpos.char):
                break
            end = charpos

        self._current = Word(
            text=anchor_line[begin.offset : end.offset + len(end.char)],
            range=Range(
                start=begin.position,
                end=Position(end.position.line, end.position.character + 1),
            ),
        )
        return self._current

    def _next_char(self) -> CharPos | None:
        if self._pending is not None:
            charpos, self._pending = self._pending, None
            return charpos
        return self._stream.next_char()

    def __iter__(self) -> Iterator[Word]:
        return self

    def __next__(self) -> Word:
        word = self.advance()
        if word is None:
            raise StopIteration
        return word


def tokenize_words(text: str) -> List[Word]:
    """Tokenize text into words with line/character ranges."""
    tokenizer = WordTokenizer.from_text(text)
    if tokenizer is None:
        return []
    return list(tokenizer)
