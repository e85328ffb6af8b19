from __future__ import annotations

import argparse
from pathlib import Path

from minipas.testing import generate_pascal_sources


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write generated Pascal programs as .pas files")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=200)
    ap.add_argument("--out", default="tests/fixtures/pascal_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    sources = generate_pascal_sources(seed=args.seed, count=args.count)
    for i, src in enumerate(sources):
        name = f"seed{args.seed}_{i:05d}.pas"
        (out_dir / name).write_text(src, encoding="utf-8")

    print(f"wrote {len(sources)} programs to {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
