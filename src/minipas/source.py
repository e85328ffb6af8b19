from __future__ import annotations

from .errors import Diagnostic, Diagnostics
from .spans import Position, START


END_OF_INPUT = "\0"


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class SourceCursor:
    """Character cursor over normalized program text.

    `line`/`column` are 0-based and always describe the current character.
    Lexical diagnostics go to the shared `Diagnostics` sink.
    """

    def __init__(self, text: str, diagnostics: Diagnostics | None = None) -> None:
        self.text = normalize_newlines(text)
        self.lines = self.text.split("\n")
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.offset = 0
        self.line = 0
        self.column = 0
        self._last = START

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    @property
    def current_char(self) -> str:
        if self.at_end:
            return END_OF_INPUT
        return self.text[self.offset]

    def peek(self, n: int = 1) -> str:
        j = self.offset + n
        if j >= len(self.text):
            return END_OF_INPUT
        return self.text[j]

    @property
    def position(self) -> Position:
        return Position(line=self.line, column=self.column)

    def advance(self) -> None:
        if self.at_end:
            return
        self._last = self.position
        if self.text[self.offset] == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        self.offset += 1

    def record_error(self, code: int, message: str | None = None, *, at: Position | None = None) -> Diagnostic:
        if at is None:
            # Past the end, point at the last character that existed.
            at = self._last if self.at_end else self.position
        return self.diagnostics.report(code, at, message)
