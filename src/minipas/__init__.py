from __future__ import annotations

from .api import AnalysisResult, analyze_file, analyze_source
from .errors import Diagnostic, Diagnostics, SourceError
from .lexer import Scanner, tokenize
from .parser import Parser, TokenCursor
from .source import SourceCursor
from .spans import Position
from .tokens import Token, TokenKind

__all__ = [
    "AnalysisResult",
    "Diagnostic",
    "Diagnostics",
    "Parser",
    "Position",
    "Scanner",
    "SourceCursor",
    "SourceError",
    "Token",
    "TokenCursor",
    "TokenKind",
    "analyze_file",
    "analyze_source",
    "tokenize",
]
