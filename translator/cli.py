from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from isa import DEFAULT_TAPE_SIZE

from .codegen import compile_codes
from .errors import SourceReadError, TranslatorError
from .lexer import read_code

logger = logging.getLogger(__name__)


def change_ext(path: Path, ext: str) -> Path:
    return path.with_suffix(f".{ext}")


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def toolchain_hint(out_file: Path) -> list[str]:
    obj_file = change_ext(out_file, "o")
    return [
        f"  nasm -f elf64 -o {obj_file} {out_file}",
        f"  ld -o {change_ext(out_file, 'exe')} {obj_file}",
    ]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfc", description="Brainfuck -> x86 NASM translator")
    ap.add_argument("file", type=Path, help="input .bf file")
    ap.add_argument("-o", "--out", type=Path, help="output .asm file (default: <file> with extension changed)")
    ap.add_argument(
        "--tape-size",
        type=positive_int,
        default=DEFAULT_TAPE_SIZE,
        help=f"tape size to allocate in the output program (default: {DEFAULT_TAPE_SIZE})",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_file = args.out if args.out is not None else change_ext(args.file, "asm")
    try:
        codes = read_code(args.file)
    except SourceReadError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        compile_codes(codes, out_file, args.tape_size)
    except TranslatorError as exc:
        logger.debug("partial output may remain in %s", out_file)
        print(f"Error compiling to {out_file}: {exc}", file=sys.stderr)
        return 1

    print(f"Done! Output has been written to {out_file}.")
    print("You can compile it by running the following commands:")
    for line in toolchain_hint(out_file):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
