"""
Diagnostic taxonomy for the Tangara toolchain.

Two unrelated families:
- SourceDiagnostic: raised by the lexer, parser and resolvers while
  processing source text. Carries a 1-based line number and a message.
  Closed set of four variants, tagged by DiagnosticKind.
- InvocationError: raised by the command-line layer before any source is
  read. Carries an optional message and no line.

Copyright (c) 2025 Graziano Labs Corp.
"""

from enum import Enum
from typing import Optional


class DiagnosticKind(Enum):
    """Phase or condition that produced a source diagnostic."""
    IMPORT = "import"    # Unresolvable or malformed module reference
    NAME = "name"        # Invalid identifier
    SYNTAX = "syntax"    # Grammar violation
    NUMBER = "number"    # Unparseable numeric literal


class SourceDiagnostic(Exception):
    """Base class for all diagnostics tied to a source line.

    Not instantiable directly; raise one of the tagged variants.
    """

    kind: DiagnosticKind

    def __new__(cls, *args, **kwargs):
        if cls is SourceDiagnostic:
            raise TypeError(
                "SourceDiagnostic is abstract; raise one of its variants"
            )
        return super().__new__(cls, *args, **kwargs)

    def __init__(self, line: int, message: str):
        """
        Initialize source diagnostic.

        Args:
            line: 1-based source line where the problem was detected
            message: Human-readable description of the problem
        """
        self._line = line
        self._message = message
        super().__init__(line, message)

    @property
    def line(self) -> int:
        return self._line

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message


class ImportDiagnostic(SourceDiagnostic):
    """An import or module reference cannot be resolved or is malformed."""
    kind = DiagnosticKind.IMPORT


class NameDiagnostic(SourceDiagnostic):
    """An identifier is invalid (reserved word, illegal characters, undefined)."""
    kind = DiagnosticKind.NAME


class SyntaxDiagnostic(SourceDiagnostic):
    """The token stream violates the language grammar."""
    kind = DiagnosticKind.SYNTAX


class NumberDiagnostic(SourceDiagnostic):
    """A numeric literal cannot be parsed."""
    kind = DiagnosticKind.NUMBER


DIAGNOSTIC_TYPES = {
    DiagnosticKind.IMPORT: ImportDiagnostic,
    DiagnosticKind.NAME: NameDiagnostic,
    DiagnosticKind.SYNTAX: SyntaxDiagnostic,
    DiagnosticKind.NUMBER: NumberDiagnostic,
}


def diagnostic_for(kind: DiagnosticKind, line: int, message: str) -> SourceDiagnostic:
    """Build the variant matching ``kind``."""
    return DIAGNOSTIC_TYPES[kind](line, message)


class InvocationError(ValueError):
    """The command-line invocation itself was malformed.

    ``message`` is None when the caller had nothing to add, which is
    distinct from an explicit empty string.
    """

    def __init__(self, message: Optional[str] = None):
        self._message = message
        if message is None:
            super().__init__()
        else:
            super().__init__(message)

    @property
    def message(self) -> Optional[str]:
        return self._message
