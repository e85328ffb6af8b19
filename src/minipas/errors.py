from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .spans import Position


ERROR_MESSAGES: dict[int, str] = {
    203: "integer constant out of range",
    301: "unterminated string literal",
    302: "invalid character",
    304: "unterminated comment",
    401: "program name expected",
    402: "'begin' expected",
    403: "'.' expected",
    404: "unexpected token",
    405: "type expected",
    406: "standard type expected",
    407: "'end' of record expected",
    408: "'end' of compound statement expected",
    409: "identifier or number expected",
    410: "statement expected",
    411: "constant expected",
}

UNKNOWN_ERROR = "unknown error"


def default_message(code: int) -> str:
    return ERROR_MESSAGES.get(code, UNKNOWN_ERROR)


@dataclass(slots=True)
class Diagnostic:
    """One reported problem. line/column are 1-based.

    `number` is the 1-based rank after the final (line, column) sort and is
    reassigned by `Diagnostics.finalize()`.
    """

    line: int
    column: int
    code: int
    number: int
    message: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: error {self.code}: {self.message}"


class Diagnostics:
    """Append-only diagnostic sink shared by the scanner and the parser of one run."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def report(self, code: int, at: Position, message: str | None = None) -> Diagnostic:
        diag = Diagnostic(
            line=at.line + 1,
            column=at.column + 1,
            code=code,
            number=len(self._items) + 1,
            message=message if message is not None else default_message(code),
        )
        self._items.append(diag)
        return diag

    def finalize(self) -> list[Diagnostic]:
        """Sort by (line, column) and renumber 1..N; returns the sorted list."""
        ordered = sorted(self._items, key=lambda d: (d.line, d.column))
        for i, diag in enumerate(ordered, start=1):
            diag.number = i
        self._items = ordered
        return list(ordered)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


@dataclass(slots=True)
class SourceError(Exception):
    """Raised when program text cannot be read; analysis itself never raises."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
