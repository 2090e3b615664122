"""Development tasks for fs-hospitality.

Usage:
    python scripts.py test
    python scripts.py check   # lint, typecheck, then tests
"""

import subprocess
import sys

TASKS = {
    "test": [["pytest"]],
    "lint": [["flake8", "--max-line-length", "120", "src", "tests"]],
    "typecheck": [["mypy", "src"]],
    "format": [["black", "src", "tests"]],
    "coverage": [["pytest", "--cov=fs_hospitality", "--cov-report=term-missing", "--cov-report=xml", "tests/"]],
}
TASKS["check"] = TASKS["lint"] + TASKS["typecheck"] + TASKS["test"]


def run_task(name):
    for command in TASKS[name]:
        subprocess.run(command, check=True)


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(f"Usage: python scripts.py {{{'|'.join(TASKS)}}}", file=sys.stderr)
        sys.exit(2)
    run_task(sys.argv[1])
