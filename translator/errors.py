from __future__ import annotations

from pathlib import Path


class TranslatorError(Exception):
    """Base class for everything that aborts a compilation run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SourceReadError(TranslatorError):
    def __init__(self, message: str, path: str | Path):
        super().__init__(message)
        self.path = Path(path)


class OutputWriteError(TranslatorError):
    def __init__(self, message: str, path: str | Path):
        super().__init__(message)
        self.path = Path(path)


class StructureError(TranslatorError):
    """Unbalanced `[` / `]` in the instruction stream."""


class UnmatchedLoopEnd(StructureError):
    def __init__(self, index: int):
        super().__init__("Compile error: Found a `]` code without a matching `[`")
        self.index = index


class UnclosedLoops(StructureError):
    def __init__(self, count: int):
        super().__init__(f"Compile error: Reached end of file with {count} `[` code(s) unclosed")
        self.count = count
