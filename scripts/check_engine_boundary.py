#!/usr/bin/env python3
"""Detect whiteboard imports and shape semantics leaking into the engine package."""

from __future__ import annotations

import argparse
import re
from pathlib import Path


PATTERNS = [
    re.compile(r"^\s*(from|import)\s+whiteboard\b", re.MULTILINE),
    re.compile(r"\bShapeKind\b"),
    re.compile(r"\bcontainment\b", re.IGNORECASE),
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Check engine/whiteboard boundary.")
    parser.add_argument("--root", default="engine")
    args = parser.parse_args()

    root = Path(args.root)
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        text = path.read_text(encoding="utf-8")
        for pattern in PATTERNS:
            for match in pattern.finditer(text):
                lineno = text.count("\n", 0, match.start()) + 1
                violations.append(f"{path.as_posix()}:{lineno} matched /{pattern.pattern}/")

    if violations:
        print("Engine boundary violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
