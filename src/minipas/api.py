from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import Diagnostic, Diagnostics, SourceError
from .lexer import Scanner
from .listing import render_listing, render_token_codes
from .parser import Parser
from .source import SourceCursor
from .tokens import Token


_LOG = logging.getLogger("minipas.api")


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    file: str
    lines: tuple[str, ...]
    tokens: tuple[Token, ...]
    diagnostics: tuple[Diagnostic, ...]  # sorted by (line, column), numbered 1..N

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def codes(self) -> list[int]:
        return [t.code for t in self.tokens]

    def token_codes(self, *, wire_compatible: bool = False) -> str:
        return render_token_codes(self.tokens, wire_compatible=wire_compatible)

    def listing(self) -> str:
        return render_listing(self.lines, self.diagnostics)


def analyze_source(src: str, *, file: str = "<memory>") -> AnalysisResult:
    diagnostics = Diagnostics()
    cursor = SourceCursor(src, diagnostics)
    tokens = Scanner(cursor).scan()
    Parser(tokens, diagnostics).analyze()
    ordered = diagnostics.finalize()
    _LOG.debug("%s: %d tokens, %d diagnostics", file, len(tokens), len(ordered))
    return AnalysisResult(
        file=file,
        lines=tuple(cursor.lines),
        tokens=tuple(tokens),
        diagnostics=tuple(ordered),
    )


def read_source(path: str | Path) -> str:
    p = Path(path).expanduser()
    try:
        return p.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise SourceError(path=str(p), message="file not found") from e
    except UnicodeDecodeError as e:
        raise SourceError(path=str(p), message=f"not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise SourceError(path=str(p), message=e.strerror or str(e)) from e


def analyze_file(path: str | Path) -> AnalysisResult:
    p = Path(path).expanduser().resolve()
    return analyze_source(read_source(p), file=str(p))
