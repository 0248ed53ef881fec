"""Command-line generator for CLDR plural rule source code.

Usage:
    cldrplurals -i plurals.json -i ordinals.json -o plural_rules.py
    cldrplurals -i plurals.json -i ordinals.json -o rules.rs --target rust
    cldrplurals --babel -o plural_rules.py --ugly

Reads cldr-json supplemental files (or Babel's bundled CLDR data), compiles
every locale's rules and writes one source file. Unless --ugly is given the
output is passed to the target's formatter (ruff format / rustfmt); a missing
formatter only produces a warning.

Exit codes:
    0 - Output written
    1 - Missing input file, invalid data, or output not writable
"""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from cldrplurals.config import GeneratorConfig
from cldrplurals.constants import DEFAULT_TARGET, FORMATTER_COMMANDS
from cldrplurals.diagnostics import PluralRuleError
from cldrplurals.loading import CLDRPluralData, load_babel_rules, load_cldr_files
from cldrplurals.render import render_source

__all__ = ["format_output", "generate_source", "main"]

logger = logging.getLogger(__name__)


def generate_source(data: CLDRPluralData, config: GeneratorConfig | None = None) -> str:
    """Compile loaded plural data and render it for the configured target.

    Raises:
        PluralRuleError: If a rule set cannot be compiled
        ValueError: If the data cannot be rendered for the target
    """
    cfg = config or GeneratorConfig()
    registry = data.to_registry()
    logger.info(
        "Compiled %d cardinal and %d ordinal rule sets (CLDR %s)",
        len(registry.cardinal),
        len(registry.ordinal),
        registry.cldr_version,
    )
    return render_source(registry, cfg.target)


def format_output(path: Path, command: tuple[str, ...]) -> bool:
    """Run an external formatter on path.

    Returns:
        True if the formatter ran and succeeded
    """
    try:
        result = subprocess.run(  # noqa: S603 - command comes from configuration
            [*command, str(path)],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.warning("Formatter '%s' not found; %s left unformatted", command[0], path)
        return False
    if result.returncode != 0:
        logger.warning(
            "Formatter '%s' failed on %s: %s",
            " ".join(command),
            path,
            result.stderr.strip(),
        )
        return False
    logger.debug("Formatted %s with %s", path, " ".join(command))
    return True


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cldrplurals",
        description="Generate plural rule source code from CLDR data.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-i", "--input",
        action="append",
        metavar="JSON",
        help="CLDR JSON plural rules file (repeatable, e.g. plurals.json and ordinals.json).",
    )
    source.add_argument(
        "--babel",
        action="store_true",
        help="Read rules from the CLDR data bundled with Babel.",
    )
    parser.add_argument(
        "-o", "--output",
        required=True,
        type=Path,
        help="Output source file.",
    )
    parser.add_argument(
        "-u", "--ugly",
        action="store_true",
        help="Do not format the output.",
    )
    parser.add_argument(
        "-t", "--target",
        choices=sorted(FORMATTER_COMMANDS),
        default=DEFAULT_TARGET,
        help=f"Output language (default: {DEFAULT_TARGET}).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug details.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate plural rule source code."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = GeneratorConfig(target=args.target, ugly=args.ugly)

    try:
        data = load_babel_rules() if args.babel else load_cldr_files(args.input)
        source = generate_source(data, config)
    except FileNotFoundError as e:
        logger.error("Input file not found: %s", e.filename)
        return 1
    except (PluralRuleError, ValueError) as e:
        logger.error("Generation failed: %s", e)
        return 1

    output: Path = args.output
    try:
        output.write_text(source, encoding="utf-8")
    except OSError as e:
        logger.error("Cannot write %s: %s", output, e)
        return 1
    logger.info("Wrote %s", output)

    command = config.formatter_command
    if command is not None:
        format_output(output, command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
