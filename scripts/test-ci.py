#!/usr/bin/env python
"""
Simple CI Tester for DazzleTreeSelect
=====================================

Tests if your code will pass CI.
Focuses on the critical checks that actually fail in CI.

Usage:
    python scripts/test-ci.py
"""

import subprocess
import sys
from pathlib import Path


def run_command(cmd, description, critical=True):
    """Run a command and return True if it succeeds."""
    print(f"\n[Testing] {description}...")
    print(f"  Command: {cmd}")

    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)

    if result.returncode == 0:
        print(f"  PASSED")
        return True
    else:
        if critical:
            print(f"  FAILED - This will fail in CI!")
            if result.stderr:
                print(f"  Error: {result.stderr[:500]}")
        else:
            print(f"  WARNING - Non-critical issue")
        return False


def main():
    print("=" * 60)
    print("CI/CD LOCAL TESTER")
    print("=" * 60)

    all_passed = True

    # Test 1: Can we import the package?
    if not run_command(
        'python -c "import dazzletreeselect"',
        "Basic import test",
        critical=True
    ):
        print("\n  Fix: Check for circular imports between modules")
        all_passed = False

    # Test 2: Do the tests run?
    if not run_command(
        'python run_tests.py',
        "Run tests (what CI runs)",
        critical=True
    ):
        print("\n  Fix: Debug the failing tests")
        all_passed = False

    # Test 3: Any Python syntax errors?
    try:
        import flake8  # noqa: F401
        if not run_command(
            'flake8 dazzletreeselect tests --count --select=E9,F63,F7,F82 --show-source',
            "Check for Python syntax errors",
            critical=True
        ):
            print("\n  Fix: Fix the syntax errors shown above")
            all_passed = False
    except ImportError:
        print("\n[Skipped] Flake8 not installed (pip install flake8 to enable)")

    # Summary
    print("\n" + "=" * 60)
    if all_passed:
        print("SUCCESS: Your code should pass CI!")
    else:
        print("FAILURE: Fix the issues above before pushing")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
