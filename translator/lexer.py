from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from isa import Instruction, from_character

from .errors import SourceReadError

logger = logging.getLogger(__name__)

READ_CHUNK = 64 * 1024

Source = Union[bytes, bytearray, str, Iterable[Union[int, str]]]


def iter_codes(src: Source) -> Iterator[Instruction]:
    for item in src:
        # bytes iterate as ints; map them through their latin-1 character
        ch = chr(item) if isinstance(item, int) else item
        ins = from_character(ch)
        if ins is not None:
            yield ins


def filter_codes(src: Source) -> list[Instruction]:
    """Keep only the eight instruction characters, in source order.

    Whitespace, newlines and any other text are dropped silently, which is
    how comments work in this language.
    """
    return list(iter_codes(src))


def read_code(path: str | Path) -> list[Instruction]:
    path = Path(path)
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise SourceReadError(f"Cannot open {path}: {exc.strerror or exc}", path) from exc

    codes: list[Instruction] = []
    total = 0
    with f:
        while True:
            try:
                chunk = f.read(READ_CHUNK)
            except OSError as exc:
                raise SourceReadError(f"Cannot read from {path}: {exc.strerror or exc}", path) from exc
            if not chunk:
                break
            total += len(chunk)
            codes.extend(iter_codes(chunk))

    logger.debug("read %s: %d of %d bytes are instructions", path, len(codes), total)
    return codes
