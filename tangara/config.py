"""
Tangara Configuration Module

Settings for the diagnostic reporter and command-line layer.
Loads settings from environment variables with sensible defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TangaraConfig:
    """Configuration for diagnostic reporting.

    Controls how the reporter renders diagnostics and which process exit
    codes the command-line layer uses for each error family.
    """

    show_kind: bool = True
    """Prefix rendered diagnostics with their kind label.

    True:  "syntax error at line 42: unexpected token ')'"
    False: "line 42: unexpected token ')'"
    """

    source_exit_code: int = 1
    """Exit code when compilation halts on a source diagnostic"""

    invocation_exit_code: int = 2
    """Exit code when command-line arguments are rejected.

    Default: 2 (same as click usage errors)
    """

    log_level: str = "WARNING"
    """Level name for the root logger configured by the CLI"""

    @classmethod
    def from_env(cls) -> "TangaraConfig":
        """Load configuration from environment variables.

        Environment variables:
          TANGARA_SHOW_KIND - Show kind labels (1/0)
          TANGARA_SOURCE_EXIT_CODE - Exit code for source diagnostics
          TANGARA_INVOCATION_EXIT_CODE - Exit code for invocation errors
          TANGARA_LOG_LEVEL - Logging level name

        Returns:
            TangaraConfig instance with values from environment
        """
        return cls(
            show_kind=os.getenv("TANGARA_SHOW_KIND", "1") == "1",
            source_exit_code=int(os.getenv("TANGARA_SOURCE_EXIT_CODE", "1")),
            invocation_exit_code=int(os.getenv("TANGARA_INVOCATION_EXIT_CODE", "2")),
            log_level=os.getenv("TANGARA_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> None:
        """Validate configuration settings.

        Raises:
            ValueError: If configuration is invalid
        """
        for name in ("source_exit_code", "invocation_exit_code"):
            value = getattr(self, name)
            if not (1 <= value <= 255):
                raise ValueError(f"{name} must be 1-255, got {value}")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    def get_summary(self) -> str:
        """Get human-readable configuration summary.

        Returns:
            Formatted string describing current configuration
        """
        lines = [
            "Tangara Configuration Summary",
            "=" * 50,
            "",
            "Reporting:",
            f"  Show Kind: {'Enabled' if self.show_kind else 'Disabled'}",
            f"  Source Exit Code: {self.source_exit_code}",
            f"  Invocation Exit Code: {self.invocation_exit_code}",
            "",
            "Logging:",
            f"  Level: {self.log_level}",
        ]
        return "\n".join(lines)


# Default configuration instance (lazy-loaded from environment)
_default_config: Optional[TangaraConfig] = None


def get_default_config() -> TangaraConfig:
    """Get default configuration instance (singleton pattern).

    Returns:
        Default TangaraConfig loaded from environment
    """
    global _default_config
    if _default_config is None:
        _default_config = TangaraConfig.from_env()
        _default_config.validate()
    return _default_config


def reset_default_config() -> None:
    """Drop the cached default so the next call re-reads the environment."""
    global _default_config
    _default_config = None
