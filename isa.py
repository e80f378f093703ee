from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional


class Instruction(Enum):
    # Memory cell under the cursor
    MEM_INC = "mem_inc"
    MEM_DEC = "mem_dec"

    # Cursor
    PTR_INC = "ptr_inc"
    PTR_DEC = "ptr_dec"

    # IO
    SYS_WRITE = "sys_write"
    SYS_READ = "sys_read"

    # Control flow
    LOOP_START = "loop_start"
    LOOP_END = "loop_end"

    def __str__(self) -> str:
        return CHARS[self]


CHARS = {
    Instruction.MEM_INC: "+",
    Instruction.MEM_DEC: "-",
    Instruction.PTR_INC: ">",
    Instruction.PTR_DEC: "<",
    Instruction.SYS_WRITE: ".",
    Instruction.SYS_READ: ",",
    Instruction.LOOP_START: "[",
    Instruction.LOOP_END: "]",
}

BY_CHAR = {ch: ins for ins, ch in CHARS.items()}


def from_character(ch: str) -> Optional[Instruction]:
    """Map one source character to an instruction; None means "not code, skip"."""
    return BY_CHAR.get(ch)


def to_character(ins: Instruction) -> str:
    return CHARS[ins]


def to_source(codes: Iterable[Instruction]) -> str:
    return "".join(CHARS[ins] for ins in codes)


# Количество ячеек ленты по умолчанию (1 MiB)
DEFAULT_TAPE_SIZE = 1_048_576
