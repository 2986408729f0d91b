"""Pytest configuration for the vtlexengine test suite.

Most property tests here drive ByteCursor and the CSI scanner with
generated byte sequences (tests/strategies/csi.py). Example counts are set
once, per profile:
- dev: 500 examples per property, the default for local runs
- ci: 50 derandomized examples so CI failures reproduce exactly
- verbose: 100 examples with Hypothesis progress output

Profile selection: HYPOTHESIS_PROFILE wins, then CI=true selects "ci",
otherwise "dev".

    HYPOTHESIS_PROFILE=verbose pytest tests/test_csi_scanner_hypothesis.py

The decode-loop stress test in test_csi_scanner_hypothesis.py is marked
@pytest.mark.fuzz and only runs with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Local runs: enough examples to reach capacity and overflow edges of the scanner
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI: short, derandomized runs; print_blob lets a failing sequence be replayed
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Debugging a strategy: show each generated sequence
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run.

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
    """Register the 'fuzz' marker for long-running scanner stress tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Long-running decode-loop stress tests (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Stress test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
