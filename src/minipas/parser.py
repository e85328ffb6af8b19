from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import Diagnostics
from .spans import Position, START
from .tokens import Token, TokenKind, token_display


_LOG = logging.getLogger("minipas.parser")

SYNC_TOKENS: frozenset[TokenKind] = frozenset({TokenKind.SEMI, TokenKind.END, TokenKind.DOT})

STANDARD_TYPES: frozenset[TokenKind] = frozenset({TokenKind.IDENT, TokenKind.INTEGER})

ARITHMETIC_OPS: frozenset[TokenKind] = frozenset(
    {TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH}
)


class TokenCursor:
    """Forward-only cursor over an immutable token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tuple(tokens)
        self.index = 0

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def peek(self, offset: int = 0) -> TokenKind:
        j = self.index + offset
        if j >= len(self.tokens):
            return TokenKind.EOF
        return self.tokens[j].kind

    @property
    def current(self) -> TokenKind:
        return self.peek(0)

    @property
    def current_position(self) -> Position:
        if self.at_end:
            return self.last_position
        return self.tokens[self.index].position

    @property
    def last_position(self) -> Position:
        """Position of the previously consumed token."""
        if self.index == 0:
            return START
        return self.tokens[min(self.index, len(self.tokens)) - 1].position

    def advance(self) -> None:
        if not self.at_end:
            self.index += 1


class _Mismatch(Exception):
    """Unwinds to the nearest construct loop after a diagnostic was reported."""


class Parser:
    """Recursive-descent checker for the restricted Pascal program grammar.

    Every mismatch is reported once, then the enclosing declaration or
    statement loop resynchronizes on `;`, `end` or `.`.
    """

    def __init__(self, tokens: Sequence[Token], diagnostics: Diagnostics) -> None:
        self.toks = TokenCursor(tokens)
        self.diagnostics = diagnostics

    # -- primitives ---------------------------------------------------------

    @property
    def current(self) -> TokenKind:
        return self.toks.current

    def next(self) -> None:
        self.toks.advance()

    def error_after(self, code: int, message: str | None = None) -> None:
        """Report at the last consumed token: "expected X" after good input."""
        self.diagnostics.report(code, self.toks.last_position, message)

    def error_here(self, code: int, message: str | None = None) -> None:
        """Report at the offending token."""
        self.diagnostics.report(code, self.toks.current_position, message)

    def expect(self, kind: TokenKind, code: int = 404, message: str | None = None) -> None:
        if self.current == kind:
            self.next()
            return
        if message is None and code == 404:
            message = f"expected '{token_display(kind)}'"
        self.error_after(code, message)
        raise _Mismatch()

    def fail_here(self, code: int, message: str | None = None) -> None:
        self.error_here(code, message)
        raise _Mismatch()

    def synchronize(self, stop: frozenset[TokenKind] = SYNC_TOKENS) -> None:
        skipped = 0
        while not self.toks.at_end and self.current not in stop:
            self.next()
            skipped += 1
        if self.current == TokenKind.SEMI:
            self.next()
        _LOG.debug("resynchronized after skipping %d tokens", skipped)

    # -- productions --------------------------------------------------------

    def analyze(self) -> None:
        if self.current == TokenKind.PROGRAM:
            self.next()
            try:
                self.expect(TokenKind.IDENT, 401)
                self.expect(TokenKind.SEMI)
            except _Mismatch:
                self.synchronize()

        while self.current in (TokenKind.VAR, TokenKind.CONST):
            if self.current == TokenKind.VAR:
                self.var_section()
            else:
                self.const_section()

        if self.current == TokenKind.BEGIN:
            self.compound_statement()
        else:
            self.error_after(402)

        if self.current == TokenKind.DOT:
            self.next()
        else:
            self.error_after(403)

    def var_section(self) -> None:
        self.next()
        while self.current == TokenKind.IDENT:
            try:
                self.ident_list()
                self.expect(TokenKind.COLON)
                self.type_()
                self.expect(TokenKind.SEMI)
            except _Mismatch:
                self.synchronize()

    def const_section(self) -> None:
        self.next()
        while self.current == TokenKind.IDENT:
            try:
                self.next()
                self.expect(TokenKind.EQ)
                if self.current != TokenKind.NUMBER:
                    self.fail_here(411)
                self.next()
                self.expect(TokenKind.SEMI)
            except _Mismatch:
                self.synchronize()

    def ident_list(self) -> None:
        self.expect(TokenKind.IDENT)
        while self.current == TokenKind.COMMA:
            self.next()
            self.expect(TokenKind.IDENT, message="expected identifier after ','")

    def is_standard_type(self, kind: TokenKind) -> bool:
        return kind in STANDARD_TYPES

    def type_(self) -> None:
        if self.current == TokenKind.ARRAY:
            self.array_type()
        elif self.current == TokenKind.RECORD:
            self.record_type()
        elif self.is_standard_type(self.current):
            self.next()
        else:
            self.fail_here(405)

    def standard_type(self, code: int) -> None:
        if not self.is_standard_type(self.current):
            self.fail_here(code)
        self.next()

    def array_type(self) -> None:
        self.next()
        self.expect(TokenKind.LBRACKET)
        self.expect(TokenKind.NUMBER)
        self.expect(TokenKind.DOTDOT)
        self.expect(TokenKind.NUMBER)
        self.expect(TokenKind.RBRACKET)
        self.expect(TokenKind.OF)
        self.standard_type(406)

    def record_type(self) -> None:
        self.next()
        while self.current == TokenKind.IDENT:
            try:
                self.ident_list()
                self.expect(TokenKind.COLON)
                self.standard_type(405)
                self.expect(TokenKind.SEMI)
            except _Mismatch:
                self.synchronize()
        self.expect(TokenKind.END, 407)

    def compound_statement(self) -> None:
        self.next()
        while self.current not in (TokenKind.END, TokenKind.DOT, TokenKind.EOF):
            try:
                self.statement()
                if self.current == TokenKind.SEMI:
                    self.next()
                elif self.current not in (TokenKind.END, TokenKind.EOF):
                    self.error_after(404, "expected ';' or 'end'")
                    raise _Mismatch()
            except _Mismatch:
                self.synchronize()
        if self.current == TokenKind.END:
            self.next()
        else:
            self.error_after(408)

    def statement(self) -> None:
        if self.current in (TokenKind.SEMI, TokenKind.END):
            # empty statement
            return
        if self.current not in (TokenKind.IDENT, TokenKind.WRITELN):
            self.fail_here(410)
        self.next()

        if self.current == TokenKind.LBRACKET:
            self.next()
            self.expect(TokenKind.NUMBER)
            self.expect(TokenKind.RBRACKET)
        elif self.current == TokenKind.DOT and self.toks.peek(1) == TokenKind.IDENT:
            self.next()
            self.next()

        if self.current == TokenKind.ASSIGN:
            self.next()
            self.expression()
        elif self.current == TokenKind.LPAREN:
            self.next()
            self.arg_list()
            self.expect(TokenKind.RPAREN)

    def arg_list(self) -> None:
        if self.current == TokenKind.RPAREN:
            return
        self.argument()
        while self.current == TokenKind.COMMA:
            self.next()
            self.argument()

    def argument(self) -> None:
        if self.current == TokenKind.STRING:
            self.next()
        else:
            self.expression()

    def expression(self) -> None:
        self.term()
        while self.current in ARITHMETIC_OPS:
            self.next()
            self.term()

    def term(self) -> None:
        if self.current not in (TokenKind.IDENT, TokenKind.NUMBER):
            self.fail_here(409)
        self.next()
