"""Developer task runner.

Usage: python scripts/tasks.py [task]   (defaults to ``ci``)
"""

from __future__ import annotations

import argparse
import subprocess
from collections.abc import Sequence

SOURCES = ["src", "tests"]
PACKAGE = "src/agent_websearch"

Command = list[str]

TASKS: dict[str, list[Command]] = {
    "setup": [["uv", "sync", "--all-extras"]],
    "lint": [["uv", "run", "ruff", "check", *SOURCES]],
    "format": [["uv", "run", "black", *SOURCES]],
    "format:check": [["uv", "run", "black", "--check", *SOURCES]],
    "typecheck": [["uv", "run", "mypy", PACKAGE]],
    "test": [["uv", "run", "pytest", "-q"]],
    "coverage": [["uv", "run", "pytest", f"--cov={PACKAGE}", "--cov-report=term-missing"]],
    "build": [["uv", "build"]],
}

# Composite tasks run every step and fail if any step failed.
PIPELINES: dict[str, list[str]] = {
    "ci": ["lint", "format:check", "typecheck", "test", "build"],
}


def run(cmd: Sequence[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd).returncode


def run_task(name: str) -> int:
    if name in PIPELINES:
        codes = [run_task(step) for step in PIPELINES[name]]
        return 0 if all(code == 0 for code in codes) else 1

    for cmd in TASKS[name]:
        code = run(cmd)
        if code != 0:
            return code
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    known = sorted([*TASKS, *PIPELINES])
    parser = argparse.ArgumentParser(description="Task runner for common dev workflows")
    parser.add_argument("task", nargs="?", default="ci", help=f"Task to run: {', '.join(known)}")
    args = parser.parse_args(argv)

    name = args.task.replace("_", ":")
    if name not in known:
        print(f"Unknown task '{args.task}'. Known tasks: {', '.join(known)}")
        return 2
    return run_task(name)


if __name__ == "__main__":
    raise SystemExit(main())
