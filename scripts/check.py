#!/usr/bin/env python3
"""Run the sasscalc quality checks in order, stopping at the first failure.

Usage:
    python scripts/check.py            # format, lint, typecheck, test
    python scripts/check.py lint test  # only the named checks
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent


def run_check(label: str, cmd: list[str]) -> None:
    """Run one check; raises CalledProcessError on a non-zero exit."""
    print(f"--> {label}: {' '.join(cmd)}")
    subprocess.run(cmd, cwd=REPO_ROOT, check=True)


def check_format() -> None:
    run_check("format", ["ruff", "format", "--check", "src", "tests", "scripts"])


def check_lint() -> None:
    run_check("lint", ["ruff", "check", "src", "tests", "scripts"])


def check_types() -> None:
    run_check("typecheck", [sys.executable, "-m", "mypy", "src/sasscalc"])


def check_tests() -> None:
    run_check("test", [sys.executable, "-m", "pytest", "-q"])


CHECKS: dict[str, Callable[[], None]] = {
    "format": check_format,
    "lint": check_lint,
    "typecheck": check_types,
    "test": check_tests,
}


def main(argv: list[str]) -> int:
    selected = argv or list(CHECKS)
    unknown = [name for name in selected if name not in CHECKS]
    if unknown:
        print(f"Unknown check(s): {', '.join(unknown)}. Available: {', '.join(CHECKS)}")
        return 1

    try:
        for name in selected:
            CHECKS[name]()
    except subprocess.CalledProcessError as e:
        print(f"FAILED (exit code {e.returncode})")
        return e.returncode

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
