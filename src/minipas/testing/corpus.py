from __future__ import annotations

import random
import string

from ..tokens import KEYWORDS


_TYPES = ["integer", "real", "boolean", "char"]
_OPS = ["+", "-", "*", "/"]


def _ident(r: random.Random) -> str:
    head = r.choice(string.ascii_letters)
    tail = "".join(r.choice(string.ascii_letters + string.digits) for _ in range(r.randint(0, 8)))
    s = head + tail
    if s.lower() in KEYWORDS:
        return s + "x"
    return s


def _number(r: random.Random) -> str:
    return str(r.randint(0, 32767))


def _comment(r: random.Random) -> str:
    body = "".join(r.choice(string.ascii_letters + " ") for _ in range(r.randint(0, 16)))
    return r.choice(["{" + body + "}", "(*" + body + "*)"])


def generate_pascal_sources(*, seed: int, count: int) -> list[str]:
    """Deterministic, well-formed programs in the supported grammar subset."""
    r = random.Random(seed)
    return [_gen_one(r) for _ in range(count)]


def _gen_one(r: random.Random) -> str:
    lines: list[str] = []
    if r.random() < 0.8:
        lines.append(f"program {_ident(r)};")

    for _ in range(r.randint(0, 3)):
        if r.random() < 0.5:
            lines.append("const")
            for _ in range(r.randint(1, 3)):
                lines.append(f"  {_ident(r)} = {_number(r)};")
        else:
            lines.append("var")
            for _ in range(r.randint(1, 4)):
                names = ", ".join(_ident(r) for _ in range(r.randint(1, 3)))
                lines.append(f"  {names}: {_gen_type(r)};")

    if r.random() < 0.3:
        lines.append(_comment(r))

    lines.append("begin")
    stmts = [_gen_statement(r) for _ in range(r.randint(0, 6))]
    for i, stmt in enumerate(stmts):
        sep = ";" if i < len(stmts) - 1 or r.random() < 0.5 else ""
        lines.append(f"  {stmt}{sep}")
    lines.append("end.")
    return "\n".join(lines) + "\n"


def _gen_type(r: random.Random) -> str:
    k = r.random()
    if k < 0.2:
        lo = r.randint(0, 10)
        return f"array [{lo}..{lo + r.randint(0, 100)}] of {r.choice(_TYPES)}"
    if k < 0.35:
        fields = " ".join(f"{_ident(r)}: {r.choice(_TYPES)};" for _ in range(r.randint(0, 3)))
        return f"record {fields} end"
    return r.choice(_TYPES)


def _gen_expression(r: random.Random) -> str:
    terms = [r.choice([_ident, _number])(r) for _ in range(r.randint(1, 4))]
    out = terms[0]
    for t in terms[1:]:
        out += f" {r.choice(_OPS)} {t}"
    return out


def _gen_statement(r: random.Random) -> str:
    k = r.random()
    if k < 0.2:
        args: list[str] = []
        for _ in range(r.randint(0, 3)):
            if r.random() < 0.5:
                args.append("'" + "".join(r.choice(string.ascii_letters + " ") for _ in range(r.randint(0, 10))) + "'")
            else:
                args.append(_gen_expression(r))
        return f"writeln({', '.join(args)})"
    target = _ident(r)
    if k < 0.35:
        target += f"[{_number(r)}]"
    elif k < 0.5:
        target += f".{_ident(r)}"
    return f"{target} := {_gen_expression(r)}"
