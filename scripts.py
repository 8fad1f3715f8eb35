import subprocess
import sys

def run_tests(*args):
    subprocess.run(["pytest", *args], check=True)

def run_lint(*args):
    subprocess.run(["flake8", "src", "tests", *args], check=True)

def run_typecheck(*args):
    subprocess.run(["mypy", "src", *args], check=True)

def run_format(*args):
    subprocess.run(["black", "src", "tests", "scripts.py", *args], check=True)

def run_coverage(*args):
    subprocess.run(
        ["pytest", "--cov=ephemeral", "--cov-report=xml", "--cov-report=term-missing", "tests/", *args], check=True
    )

if __name__ == "__main__":
    globals()[sys.argv[1]](*sys.argv[2:])
