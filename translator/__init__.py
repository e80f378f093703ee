from .codegen import Codegen, compile_codes, generate
from .errors import (
    OutputWriteError,
    SourceReadError,
    StructureError,
    TranslatorError,
    UnclosedLoops,
    UnmatchedLoopEnd,
)
from .lexer import filter_codes, read_code

__all__ = [
    "Codegen",
    "OutputWriteError",
    "SourceReadError",
    "StructureError",
    "TranslatorError",
    "UnclosedLoops",
    "UnmatchedLoopEnd",
    "compile_codes",
    "filter_codes",
    "generate",
    "read_code",
]
