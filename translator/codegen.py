from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, TextIO

from isa import DEFAULT_TAPE_SIZE, Instruction

from .errors import OutputWriteError, UnclosedLoops, UnmatchedLoopEnd

logger = logging.getLogger(__name__)

# write(2) через int 0x80: регистры берутся из ячеек рядом с tape_ptr
SYS_WRITE_BLOCK = (
    "  mov tape_ptr, eax",
    "  mov eax, [tape_ptr]",
    "  mov ebx, [tape_ptr+4]",
    "  mov ecx, [tape_ptr+8]",
    "  mov edx, [tape_ptr+12]",
    "  mov esi, [tape_ptr+16]",
    "  mov edi, [tape_ptr+20]",
    "  int 0x80",
    "  mov [tape_ptr], eax",
    "  mov eax, tape_ptr",
)

SIMPLE = {
    Instruction.MEM_INC: ("  inc BYTE [EAX]",),
    Instruction.MEM_DEC: ("  dec BYTE [EAX]",),
    Instruction.PTR_INC: ("  inc EAX",),
    Instruction.PTR_DEC: ("  dec EAX",),
    Instruction.SYS_WRITE: SYS_WRITE_BLOCK,
    Instruction.SYS_READ: ("  mov [eax], [[eax]]",),
}


def label_name(label_id: int) -> str:
    return f"label_{label_id}"


class Codegen:
    """NASM text emitter for a filtered instruction list.

    Loop labels come from a stack: `[` pushes a fresh id, `]` pops the
    innermost one, so nested loops always jump back to their own label.
    """

    def __init__(self, tape_size: int = DEFAULT_TAPE_SIZE):
        if isinstance(tape_size, bool) or not isinstance(tape_size, int) or tape_size <= 0:
            raise ValueError(f"tape size must be a positive integer, got {tape_size!r}")
        self.tape_size = tape_size
        self.out: TextIO | None = None
        self.loop_stack: list[int] = []
        self.next_label = 1
        self.lines = 0

    def emit(self, line: str):
        assert self.out is not None
        self.out.write(line)
        self.out.write("\n")
        self.lines += 1

    def alloc_label(self) -> int:
        label_id = self.next_label
        self.next_label += 1
        self.loop_stack.append(label_id)
        return label_id

    def close_label(self, index: int) -> int:
        if not self.loop_stack:
            raise UnmatchedLoopEnd(index)
        return self.loop_stack.pop()

    def gen_prologue(self):
        self.emit("section .bss")
        self.emit("  tape_ptr RESQ 1")
        self.emit(f"  tape RESB {self.tape_size}")
        self.emit("section .text")
        self.emit("  global _start")
        self.emit("_start:")
        # курсор стартует с середины ленты
        self.emit(f"  mov EAX, tape+{self.tape_size // 2}")

    def gen_code(self, index: int, ins: Instruction):
        if ins is Instruction.LOOP_START:
            self.emit(f"{label_name(self.alloc_label())}:")
            return
        if ins is Instruction.LOOP_END:
            self.emit(f"  jne {label_name(self.close_label(index))}")
            return
        for line in SIMPLE[ins]:
            self.emit(line)

    def gen(self, codes: Iterable[Instruction], out: TextIO):
        self.out = out
        self.loop_stack = []
        self.next_label = 1
        self.lines = 0

        self.gen_prologue()
        for index, ins in enumerate(codes):
            self.gen_code(index, ins)
        if self.loop_stack:
            raise UnclosedLoops(len(self.loop_stack))

        logger.debug("emitted %d lines, %d loop(s)", self.lines, self.next_label - 1)


def generate(codes: Iterable[Instruction], tape_size: int = DEFAULT_TAPE_SIZE) -> str:
    buf = io.StringIO()
    Codegen(tape_size).gen(codes, buf)
    return buf.getvalue()


def compile_codes(codes: Iterable[Instruction], out_file: str | Path, tape_size: int = DEFAULT_TAPE_SIZE):
    """Write the assembly for `codes` into `out_file`.

    The file is closed on every exit path. On a structural error whatever
    was written so far stays on disk; the caller decides whether to remove it.
    """
    cg = Codegen(tape_size)
    out_file = Path(out_file)
    try:
        with open(out_file, "w", encoding="utf-8", newline="\n") as f:
            cg.gen(codes, f)
    except OSError as exc:
        raise OutputWriteError(str(exc.strerror or exc), out_file) from exc
