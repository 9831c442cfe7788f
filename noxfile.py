"""Nox sessions for the opencode-sdk test, coverage and typing runs."""

import nox

PYTHON_VERSIONS = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["tests", "minimal"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHON_VERSIONS)
def tests(session):
    """Run the unit and integration suites with Prometheus installed."""
    session.install(".[full,dev]")
    session.run("pytest", "tests/", "-q", "--no-cov", *session.posargs)


@nox.session(python="3.12")
def minimal(session):
    """Run the suite without prometheus_client to cover the in-memory path."""
    session.install(".")
    session.install("pytest", "pytest-asyncio", "pytest-cov")
    session.run("pytest", "tests/", "-q", "--no-cov", *session.posargs)


@nox.session(python="3.12")
def coverage(session):
    """Report line coverage of the opencode_sdk package."""
    session.install(".[full,dev]")
    session.run(
        "pytest",
        "tests/",
        "--cov=opencode_sdk",
        "--cov-report=term-missing",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS)
def type_check(session):
    """Run mypy over the package with the pydantic plugin."""
    session.install(".[full,dev]")
    session.install("mypy")
    session.run("mypy", "src/opencode_sdk", *session.posargs)
