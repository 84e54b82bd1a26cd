"""
Compilation orchestrator.

Runs the lexer, parser and resolver stages in registration order and
halts on the first source diagnostic. Stages are supplied by callers;
this module only sequences them.

Copyright (c) 2025 Graziano Labs Corp.
"""

import logging
from typing import Any, Callable, Dict, List

from .errors import SourceDiagnostic

logger = logging.getLogger(__name__)

Stage = Callable[[Any], Any]


class CompilationPipeline:
    """
    Ordered registry of compilation stages.

    Each stage receives the previous stage's output; the first stage
    receives the source text. One diagnostic at a time: the first
    SourceDiagnostic raised ends the run and reaches the caller as-is.
    """

    def __init__(self):
        """Initialize empty pipeline."""
        self.stages: Dict[str, Stage] = {}

    def register(self, name: str, stage: Stage):
        """
        Append a stage to the pipeline.

        Args:
            name: Unique stage name (e.g., "lexer")
            stage: Callable taking the previous stage's output

        Raises:
            ValueError: If name already registered or stage is not callable
        """
        if name in self.stages:
            raise ValueError(f"Stage '{name}' already registered")
        if not callable(stage):
            raise ValueError(f"Stage '{name}' is not callable")
        self.stages[name] = stage

    def get_stage(self, name: str) -> Stage:
        """
        Get a registered stage.

        Raises:
            KeyError: If stage not found
        """
        if name not in self.stages:
            available = list(self.stages.keys())
            raise KeyError(f"Stage '{name}' not found. Available: {available}")
        return self.stages[name]

    def list_stages(self) -> List[str]:
        return list(self.stages.keys())

    def run(self, source: str) -> Any:
        """
        Run every stage over the source text.

        Args:
            source: Source text handed to the first stage

        Returns:
            Output of the last stage (the source itself if no stages)

        Raises:
            SourceDiagnostic: The first diagnostic any stage raises, unchanged
        """
        value: Any = source
        for name, stage in self.stages.items():
            logger.debug(f"Running stage '{name}'")
            try:
                value = stage(value)
            except SourceDiagnostic as diag:
                logger.info(
                    f"Stage '{name}' halted compilation: "
                    f"{diag.kind.value} at line {diag.line}"
                )
                raise
        return value
