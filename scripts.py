import subprocess
import sys

TASKS = {
    "test": [["pytest"]],
    "doctest": [["pytest", "--doctest-modules", "src/pathdirectives"]],
    "lint": [["flake8", "--max-line-length", "120", "src", "tests"]],
    "typecheck": [["mypy"]],
    "format": [["black", "src", "tests", "scripts.py"]],
    "coverage": [["pytest", "--cov=pathdirectives", "--cov-report=term-missing", "tests/"]],
}
TASKS["check"] = TASKS["lint"] + TASKS["typecheck"] + TASKS["test"] + TASKS["doctest"]


def run(task):
    for command in TASKS[task]:
        subprocess.run(command, check=True)


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        sys.exit(f"usage: python scripts.py {{{'|'.join(TASKS)}}}")
    run(sys.argv[1])
