from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional


# Ensure local package imports work when running directly
REPO_ROOT = Path(__file__).resolve().parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from isa import DEFAULT_TAPE_SIZE  # type: ignore
from translator.codegen import generate  # type: ignore
from translator.lexer import read_code  # type: ignore
import difflib


GOLDEN_DIR = REPO_ROOT / "golden"


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, data: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding="utf-8")


def load_meta(test_dir: Path) -> Dict[str, object]:
    meta_file = test_dir / "meta.json"
    if not meta_file.exists():
        return {}
    return json.loads(read_text(meta_file))


def compile_bf(src_path: Path, tape_size: int = DEFAULT_TAPE_SIZE) -> str:
    return generate(read_code(src_path), tape_size)


def list_golden(golden_dir: Path = GOLDEN_DIR) -> List[str]:
    return sorted(d.name for d in golden_dir.iterdir() if d.is_dir() and (d / "program.bf").exists())


def check_golden(name: str, golden_dir: Path = GOLDEN_DIR) -> Optional[str]:
    """Return a unified diff when the compiled output drifted, else None."""
    test_dir = golden_dir / name
    meta = load_meta(test_dir)
    actual = compile_bf(test_dir / "program.bf", int(meta.get("tape_size", DEFAULT_TAPE_SIZE)))
    expected = read_text(test_dir / "program.asm")
    if actual == expected:
        return None
    return "".join(
        difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=f"{name}/program.asm",
            tofile=f"{name}/actual.asm",
        )
    )


def generate_golden(name: str, golden_dir: Path = GOLDEN_DIR):
    test_dir = golden_dir / name
    meta = load_meta(test_dir)
    asm = compile_bf(test_dir / "program.bf", int(meta.get("tape_size", DEFAULT_TAPE_SIZE)))
    write_text(test_dir / "program.asm", asm)


def main():
    ap = argparse.ArgumentParser(description="Check or regenerate golden .asm files")
    ap.add_argument("names", nargs="*", help="golden case names (default: all)")
    ap.add_argument("--update", action="store_true", help="rewrite program.asm from program.bf")
    args = ap.parse_args()

    names = args.names or list_golden()
    failed = 0
    for name in names:
        if args.update:
            generate_golden(name)
            print(f"Updated: {name}")
            continue
        diff = check_golden(name)
        if diff:
            failed += 1
            print(diff)
        else:
            print(f"OK: {name}")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
