"""Development tasks for project2md: python scripts.py <task>."""

import subprocess
import sys

SOURCES = ["src", "tests", "scripts.py"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_cli_tests():
    subprocess.run(["pytest", "tests/integration", "--run-cli-tests"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", *SOURCES], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src/project2md"], check=True)


def run_format():
    subprocess.run(["black", *SOURCES], check=True)


def run_coverage():
    subprocess.run(
        ["pytest", "--cov=project2md", "--cov-report=term-missing", "--cov-report=xml", "tests/"],
        check=True,
    )


def run_all():
    run_format()
    run_lint()
    run_typecheck()
    run_coverage()


if __name__ == "__main__":
    if len(sys.argv) != 2 or not sys.argv[1].startswith("run_") or sys.argv[1] not in globals():
        tasks = "|".join(name for name in globals() if name.startswith("run_"))
        print(f"Usage: python {sys.argv[0]} {tasks}")
        sys.exit(2)
    globals()[sys.argv[1]]()
