from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .spans import Position


class TokenKind(IntEnum):
    # Sentinel returned past the end of the token stream; never stored.
    EOF = 0

    # Identifiers and literals
    IDENT = 2
    NUMBER = 15
    STRING = 84

    # Special symbols
    COLON = 5
    LPAREN = 9
    RPAREN = 10
    LBRACKET = 11
    RBRACKET = 12
    SEMI = 14
    EQ = 16
    PLUS = 17
    MINUS = 18
    STAR = 19
    COMMA = 20
    DOTDOT = 21
    NE = 38
    LT = 39
    LE = 40
    GT = 41
    GE = 42
    SLASH = 50
    ASSIGN = 51
    DOT = 61

    # Keywords
    CASE = 31
    ELSE = 32
    GOTO = 33
    TYPE = 34
    WITH = 37
    THEN = 52
    UNTIL = 53
    DO = 54
    IF = 56
    FILE = 57
    IN = 100
    OF = 101
    OR = 102
    TO = 103
    END = 104
    VAR = 105
    DIV = 106
    AND = 107
    NOT = 108
    FOR = 109
    MOD = 110
    NIL = 111
    SET = 112
    BEGIN = 113
    WHILE = 114
    ARRAY = 115
    CONST = 116
    LABEL = 117
    DOWNTO = 118
    PACKED = 119
    RECORD = 120
    REPEAT = 121
    PROGRAM = 122
    FUNCTION = 123
    PROCEDURE = 124
    WRITELN = 125
    INTEGER = 126


# Keyword lookup after case folding.
KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "array": TokenKind.ARRAY,
    "begin": TokenKind.BEGIN,
    "case": TokenKind.CASE,
    "const": TokenKind.CONST,
    "div": TokenKind.DIV,
    "do": TokenKind.DO,
    "downto": TokenKind.DOWNTO,
    "else": TokenKind.ELSE,
    "end": TokenKind.END,
    "file": TokenKind.FILE,
    "for": TokenKind.FOR,
    "function": TokenKind.FUNCTION,
    "goto": TokenKind.GOTO,
    "if": TokenKind.IF,
    "in": TokenKind.IN,
    "label": TokenKind.LABEL,
    "mod": TokenKind.MOD,
    "nil": TokenKind.NIL,
    "not": TokenKind.NOT,
    "of": TokenKind.OF,
    "or": TokenKind.OR,
    "packed": TokenKind.PACKED,
    "procedure": TokenKind.PROCEDURE,
    "program": TokenKind.PROGRAM,
    "record": TokenKind.RECORD,
    "repeat": TokenKind.REPEAT,
    "set": TokenKind.SET,
    "then": TokenKind.THEN,
    "to": TokenKind.TO,
    "type": TokenKind.TYPE,
    "until": TokenKind.UNTIL,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
    "with": TokenKind.WITH,
    "integer": TokenKind.INTEGER,
    "writeln": TokenKind.WRITELN,
}

SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "=": TokenKind.EQ,
    "<>": TokenKind.NE,
    "<": TokenKind.LT,
    "<=": TokenKind.LE,
    ">": TokenKind.GT,
    ">=": TokenKind.GE,
    ":=": TokenKind.ASSIGN,
    ":": TokenKind.COLON,
    ".": TokenKind.DOT,
    "..": TokenKind.DOTDOT,
    ";": TokenKind.SEMI,
    ",": TokenKind.COMMA,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}

# The reference tool shares codes between `integer`/`in` and string/`=`.
# Token output can reproduce that when byte-compatible output is needed.
WIRE_ALIASES: dict[TokenKind, int] = {
    TokenKind.INTEGER: int(TokenKind.IN),
    TokenKind.STRING: int(TokenKind.EQ),
}

_DISPLAY: dict[TokenKind, str] = {
    **{kind: lexeme for lexeme, kind in SYMBOLS.items()},
    **{kind: word for word, kind in KEYWORDS.items()},
    TokenKind.IDENT: "identifier",
    TokenKind.NUMBER: "number",
    TokenKind.STRING: "string",
    TokenKind.EOF: "end of file",
}


def token_display(kind: TokenKind) -> str:
    return _DISPLAY.get(kind, kind.name.lower())


def wire_code(kind: TokenKind, *, wire_compatible: bool = False) -> int:
    if wire_compatible:
        return WIRE_ALIASES.get(kind, int(kind))
    return int(kind)


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    position: Position

    @property
    def code(self) -> int:
        return int(self.kind)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.position.format()})"
