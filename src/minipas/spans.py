from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A concrete source position.

    line/column are 0-based; `format()` renders them 1-based for user-facing messages.
    """

    line: int
    column: int

    def format(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


START = Position(line=0, column=0)
