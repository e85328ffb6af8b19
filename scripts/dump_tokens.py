from __future__ import annotations

from minipas.tokens import WIRE_ALIASES, TokenKind, token_display


def main() -> None:
    kinds = sorted(TokenKind, key=int)
    print(f"token kinds: {len(kinds)}")
    for k in kinds:
        alias = WIRE_ALIASES.get(k)
        note = f"  (wire: {alias})" if alias is not None else ""
        print(f"{int(k):>3}: {k.name:<10} {token_display(k)}{note}")


if __name__ == "__main__":
    main()
