#!/usr/bin/env python3
# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, CLI smoke test and build."""

import argparse
import pathlib
import subprocess
import sys
import tempfile
import time
from dataclasses import dataclass

from yachalk import chalk

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Step:
    """One CI step: a display name, a short key for --skip, and the command."""

    name: str
    key: str
    command: list[str]


def steps(scratch_dir: pathlib.Path) -> list[Step]:
    """Return the CI steps; the smoke test writes its document into *scratch_dir*."""
    sample = str(scratch_dir / "sample.eer")
    return [
        Step("Format check", "format", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
        Step("Lint", "lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
        Step("Type check", "types", ["uv", "run", "ty", "check", "src/"]),
        Step(
            "Tests",
            "tests",
            ["uv", "run", "--extra", "test", "pytest", "--cov=eerstudio", "--cov-report=term-missing"],
        ),
        Step(
            "CLI smoke test",
            "smoke",
            ["sh", "-c", f"uv run eerstudio new {sample} && uv run eerstudio check {sample}"],
        ),
        Step("Build", "build", ["uv", "build"]),
    ]


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--skip", action="append", default=[], metavar="KEY", help="Skip a step by key")
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    with tempfile.TemporaryDirectory(prefix="eerstudio-ci-") as scratch:
        for step in steps(pathlib.Path(scratch)):
            if step.key in args.skip:
                print(chalk.yellow(f"\nSkipping {step.name}"))
                continue
            _banner(step.name)
            start = time.monotonic()
            proc = subprocess.run(step.command, cwd=_repo_root())
            results.append((step.name, proc.returncode == 0, time.monotonic() - start))

    _banner("  Summary")
    all_passed = True
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(colour(f"  {status}  {name} ({elapsed:.1f}s)"))
        all_passed = all_passed and passed

    print()
    return 0 if all_passed else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
