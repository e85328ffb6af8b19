from __future__ import annotations

from collections.abc import Iterable, Sequence

from .errors import Diagnostic
from .tokens import Token, wire_code


LINE_INDENT = " " * 8


def render_token_codes(tokens: Iterable[Token], *, wire_compatible: bool = False) -> str:
    return " ".join(str(wire_code(t.kind, wire_compatible=wire_compatible)) for t in tokens)


def render_diagnostic(diag: Diagnostic) -> list[str]:
    pointer = " " * max(0, diag.column - 1) + f"^ error code {diag.code}"
    return [
        f"**{diag.number:02d}** {pointer}",
        f"****** {diag.message}",
    ]


def render_listing(lines: Sequence[str], diagnostics: Sequence[Diagnostic]) -> str:
    """Source listing with each diagnostic printed under its line.

    `diagnostics` must already be finalized (sorted and numbered).
    """
    by_line: dict[int, list[Diagnostic]] = {}
    for d in diagnostics:
        by_line.setdefault(d.line, []).append(d)

    out: list[str] = []
    for i, line in enumerate(lines, start=1):
        out.append(LINE_INDENT + line)
        for d in by_line.get(i, ()):
            out.extend(render_diagnostic(d))

    out.append("")
    out.append(f"Compilation finished: errors - {len(diagnostics)} !")
    return "\n".join(out) + "\n"
