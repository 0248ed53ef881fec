"""Code generation configuration.

One frozen dataclass collects the options shared by the CLI and the
generate_source() entry point.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from cldrplurals.constants import DEFAULT_TARGET, FORMATTER_COMMANDS

__all__ = ["GeneratorConfig"]


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for source generation.

    Attributes:
        target: Output language, 'python' (default) or 'rust'
        ugly: Skip the external formatter (default: False)
        formatter: Formatter command, run with the output path appended.
            None selects the target's default (ruff format / rustfmt).

    Example:
        >>> config = GeneratorConfig(target="rust")
        >>> config.formatter_command
        ('rustfmt',)
        >>> GeneratorConfig(ugly=True).formatter_command is None
        True
    """

    target: str = DEFAULT_TARGET
    ugly: bool = False
    formatter: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If target is unknown or formatter is an empty command
        """
        if self.target not in FORMATTER_COMMANDS:
            known = ", ".join(sorted(FORMATTER_COMMANDS))
            msg = f"Unknown target '{self.target}' (expected one of: {known})"
            raise ValueError(msg)
        if self.formatter is not None and not self.formatter:
            msg = "formatter must name a command"
            raise ValueError(msg)

    @property
    def formatter_command(self) -> tuple[str, ...] | None:
        """Command to run on the output file, or None when ugly."""
        if self.ugly:
            return None
        return self.formatter or FORMATTER_COMMANDS[self.target]
