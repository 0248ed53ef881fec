"""Tests for GeneratorConfig."""

import pytest

from cldrplurals.config import GeneratorConfig


class TestGeneratorConfig:
    """Validation and formatter selection."""

    def test_defaults(self) -> None:
        """Python output, formatted with ruff."""
        config = GeneratorConfig()

        assert config.target == "python"
        assert config.ugly is False
        assert config.formatter_command == ("ruff", "format")

    def test_rust_formatter(self) -> None:
        """Rust output is formatted with rustfmt."""
        assert GeneratorConfig(target="rust").formatter_command == ("rustfmt",)

    def test_ugly_disables_formatter(self) -> None:
        """ugly=True means no formatter at all."""
        assert GeneratorConfig(ugly=True, formatter=("black",)).formatter_command is None

    def test_custom_formatter(self) -> None:
        """An explicit formatter replaces the default."""
        assert GeneratorConfig(formatter=("black", "-q")).formatter_command == ("black", "-q")

    def test_unknown_target(self) -> None:
        """Targets are validated at construction."""
        with pytest.raises(ValueError, match="Unknown target 'go'"):
            GeneratorConfig(target="go")

    def test_empty_formatter(self) -> None:
        """An empty formatter command is rejected."""
        with pytest.raises(ValueError, match="formatter"):
            GeneratorConfig(formatter=())

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        config = GeneratorConfig()

        with pytest.raises(AttributeError):
            config.ugly = True  # type: ignore[misc]
