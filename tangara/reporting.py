"""
Diagnostic reporting sink.

Turns SourceDiagnostic and InvocationError values into user-visible
output and process exit codes. The error types themselves never format
or print anything; all presentation lives here.

Copyright (c) 2025 Graziano Labs Corp.
"""

import logging
from typing import IO, Optional, Union

import click

from .config import TangaraConfig, get_default_config
from .errors import DiagnosticKind, InvocationError, SourceDiagnostic

logger = logging.getLogger(__name__)


KIND_LABELS = {
    DiagnosticKind.IMPORT: "import error",
    DiagnosticKind.NAME: "name error",
    DiagnosticKind.SYNTAX: "syntax error",
    DiagnosticKind.NUMBER: "number error",
}

USAGE_HINT = "Try 'tangara --help' for usage."


def kind_label(kind: DiagnosticKind) -> str:
    return KIND_LABELS[kind]


def format_diagnostic(diag: SourceDiagnostic, show_kind: bool = True) -> str:
    """
    Render a source diagnostic as a single line.

    Args:
        diag: Diagnostic to render
        show_kind: Prefix the line with the kind label

    Returns:
        "syntax error at line 42: unexpected token ')'" or, without the
        kind, "line 42: unexpected token ')'"
    """
    location = f"line {diag.line}"
    if show_kind:
        location = f"{kind_label(diag.kind)} at {location}"
    return f"{location}: {diag.message}"


def format_invocation_error(err: InvocationError) -> str:
    if not err.message:
        return "invalid invocation"
    return f"invalid invocation: {err.message}"


class DiagnosticReporter:
    """Writes diagnostics to stderr and decides exit codes"""

    def __init__(
        self,
        config: Optional[TangaraConfig] = None,
        stream: Optional[IO[str]] = None
    ):
        """
        Initialize reporter.

        Args:
            config: Reporting configuration (default: environment config)
            stream: Output stream (default: stderr)
        """
        self.config = config or get_default_config()
        self.stream = stream

    def _write(self, text: str) -> None:
        click.echo(text, file=self.stream, err=True)

    def exit_code_for(self, error: Union[SourceDiagnostic, InvocationError]) -> int:
        """
        Map an error to its process exit code.

        Raises:
            TypeError: If error is not a diagnostic or invocation error
        """
        if isinstance(error, SourceDiagnostic):
            return self.config.source_exit_code
        if isinstance(error, InvocationError):
            return self.config.invocation_exit_code
        raise TypeError(
            f"Cannot report {error.__class__.__name__}; "
            "expected SourceDiagnostic or InvocationError"
        )

    def report(self, diag: SourceDiagnostic) -> int:
        """
        Report a source diagnostic.

        Returns:
            Exit code the caller should terminate with
        """
        text = format_diagnostic(diag, show_kind=self.config.show_kind)
        logger.debug(f"Reported {diag.kind.value} diagnostic at line {diag.line}: {diag.message}")
        self._write(text)
        return self.exit_code_for(diag)

    def report_invocation(self, err: InvocationError) -> int:
        """
        Report a rejected command line, followed by a usage hint.

        Returns:
            Exit code the caller should terminate with
        """
        logger.debug(f"Invocation rejected: {err.message!r}")
        self._write(format_invocation_error(err))
        self._write(USAGE_HINT)
        return self.exit_code_for(err)
