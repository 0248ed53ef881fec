"""Pytest configuration for the cldrplurals test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

CARDINAL_DOCUMENT: dict[str, object] = {
    "supplemental": {
        "version": {"_cldrVersion": "46"},
        "plurals-type-cardinal": {
            "en": {
                "pluralRule-count-one": "i = 1 and v = 0 @integer 1",
                "pluralRule-count-other": " @integer 0, 2~16, 100, 1000, … @decimal 0.0~1.5, …",
            },
            "fr": {
                "pluralRule-count-one": "i = 0,1 @integer 0, 1 @decimal 0.0~1.5",
                "pluralRule-count-many": (
                    "e = 0 and i != 0 and i % 1000000 = 0 and v = 0 or e != 0..5"
                    " @integer 1000000, 1c6, 2c6, …"
                ),
                "pluralRule-count-other": " @integer 2~17, 100, 1000, …",
            },
            "pl": {
                "pluralRule-count-one": "i = 1 and v = 0 @integer 1",
                "pluralRule-count-few": (
                    "v = 0 and i % 10 = 2..4 and i % 100 != 12..14 @integer 2~4, 22~24, …"
                ),
                "pluralRule-count-many": (
                    "v = 0 and i != 1 and i % 10 = 0..1"
                    " or v = 0 and i % 10 = 5..9"
                    " or v = 0 and i % 100 = 12..14 @integer 0, 5~19, 100, …"
                ),
                "pluralRule-count-other": "   @decimal 0.0~1.5, 10.0, 100.0, …",
            },
            "ja": {
                "pluralRule-count-other": " @integer 0~15, 100, 1000, …",
            },
            "root": {
                "pluralRule-count-other": " @integer 0~15, 100, 1000, …",
            },
        },
    }
}

ORDINAL_DOCUMENT: dict[str, object] = {
    "supplemental": {
        "version": {"_cldrVersion": "46"},
        "plurals-type-ordinal": {
            "en": {
                "pluralRule-count-few": (
                    "n % 10 = 3 and n % 100 != 13 @integer 3, 23, 33, …"
                ),
                "pluralRule-count-one": "n % 10 = 1 and n % 100 != 11 @integer 1, 21, 31, …",
                "pluralRule-count-two": "n % 10 = 2 and n % 100 != 12 @integer 2, 22, 32, …",
                "pluralRule-count-other": " @integer 0, 4~18, 100, 1000, …",
            },
        },
    }
}


@pytest.fixture
def cardinal_document() -> dict[str, object]:
    """Decoded cldr-json plurals.json excerpt."""
    return CARDINAL_DOCUMENT


@pytest.fixture
def ordinal_document() -> dict[str, object]:
    """Decoded cldr-json ordinals.json excerpt."""
    return ORDINAL_DOCUMENT


@pytest.fixture
def cldr_files(tmp_path: Path) -> tuple[Path, Path]:
    """plurals.json and ordinals.json written to a temporary directory."""
    import json

    plurals = tmp_path / "plurals.json"
    ordinals = tmp_path / "ordinals.json"
    plurals.write_text(json.dumps(CARDINAL_DOCUMENT, ensure_ascii=False), encoding="utf-8")
    ordinals.write_text(json.dumps(ORDINAL_DOCUMENT, ensure_ascii=False), encoding="utf-8")
    return plurals, ordinals
