"""
Tangara diagnostics.

Error model shared by the Tangara lexer, parser and resolvers, plus the
reporting sink and command-line layer that surface it.
"""

from .errors import (
    DiagnosticKind,
    SourceDiagnostic,
    ImportDiagnostic,
    NameDiagnostic,
    SyntaxDiagnostic,
    NumberDiagnostic,
    InvocationError,
    DIAGNOSTIC_TYPES,
    diagnostic_for,
)

__all__ = [
    "DiagnosticKind",
    "SourceDiagnostic",
    "ImportDiagnostic",
    "NameDiagnostic",
    "SyntaxDiagnostic",
    "NumberDiagnostic",
    "InvocationError",
    "DIAGNOSTIC_TYPES",
    "diagnostic_for",
]
