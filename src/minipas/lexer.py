from __future__ import annotations

import logging

from .errors import Diagnostics
from .source import SourceCursor
from .spans import Position
from .tokens import KEYWORDS, SYMBOLS, Token, TokenKind


_LOG = logging.getLogger("minipas.lexer")

# Literals beyond the 16-bit range are reported but still tokenized;
# beyond 32-bit they are dropped.
MAX_INT16 = 2**15 - 1
MAX_INT32 = 2**31 - 1


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Scanner:
    """Single pass scanner producing tokens in source order.

    Malformed lexemes are reported to the cursor's diagnostics and skipped;
    `scan()` always runs to the end of input.
    """

    def __init__(self, cursor: SourceCursor) -> None:
        self.cur = cursor
        self.tokens: list[Token] = []

    @property
    def codes(self) -> list[int]:
        return [t.code for t in self.tokens]

    @property
    def positions(self) -> list[Position]:
        return [t.position for t in self.tokens]

    def scan(self) -> list[Token]:
        cur = self.cur
        while not cur.at_end:
            ch = cur.current_char

            if ch.isspace():
                cur.advance()
                continue

            if ch == "{":
                self._skip_comment("}")
                continue

            if ch == "(":
                if cur.peek() == "*":
                    self._skip_comment("*)")
                else:
                    self._emit(TokenKind.LPAREN, cur.position)
                    cur.advance()
                continue

            if _is_digit(ch):
                self._scan_number()
                continue

            if ch.isalpha():
                self._scan_identifier()
                continue

            if ch == "'":
                self._scan_string()
                continue

            self._scan_symbol()

        _LOG.debug("scanned %d tokens, %d diagnostics", len(self.tokens), len(cur.diagnostics))
        return self.tokens

    def _emit(self, kind: TokenKind, at: Position) -> None:
        self.tokens.append(Token(kind, at))

    def _skip_comment(self, closer: str) -> None:
        cur = self.cur
        start = cur.position
        # Opener is `{` or `(*`.
        cur.advance()
        if closer == "*)":
            cur.advance()
        while not cur.at_end:
            if cur.current_char == closer[0] and (len(closer) == 1 or cur.peek() == closer[1]):
                for _ in closer:
                    cur.advance()
                return
            cur.advance()
        cur.record_error(304, at=start)

    def _scan_number(self) -> None:
        cur = self.cur
        start = cur.position
        buf: list[str] = []
        while _is_digit(cur.current_char):
            buf.append(cur.current_char)
            cur.advance()

        value = int("".join(buf))
        if value > MAX_INT32:
            cur.record_error(203, at=start)
            return
        if value > MAX_INT16:
            cur.record_error(203, at=start)
        self._emit(TokenKind.NUMBER, start)

    def _scan_identifier(self) -> None:
        cur = self.cur
        start = cur.position
        buf: list[str] = []
        while cur.current_char.isalpha() or _is_digit(cur.current_char):
            buf.append(cur.current_char)
            cur.advance()
        name = "".join(buf).lower()
        self._emit(KEYWORDS.get(name, TokenKind.IDENT), start)

    def _scan_string(self) -> None:
        cur = self.cur
        start = cur.position
        cur.advance()
        while not cur.at_end:
            ch = cur.current_char
            if ch == "'":
                cur.advance()
                self._emit(TokenKind.STRING, start)
                return
            if ch == "\n":
                break
            cur.advance()
        cur.record_error(301, at=start)
        self._emit(TokenKind.STRING, start)

    def _scan_symbol(self) -> None:
        cur = self.cur
        start = cur.position
        ch1 = cur.current_char
        ch2 = cur.peek()

        kind = SYMBOLS.get(ch1 + ch2)
        if kind is not None:
            cur.advance()
            cur.advance()
            self._emit(kind, start)
            return

        cur.advance()
        kind = SYMBOLS.get(ch1)
        if kind is not None:
            self._emit(kind, start)
            return
        cur.record_error(302, f"invalid character {ch1!r}", at=start)


def tokenize(src: str, *, diagnostics: Diagnostics | None = None) -> list[Token]:
    return Scanner(SourceCursor(src, diagnostics)).scan()
