"""Test configuration and fixtures for project2md."""

from datetime import datetime

import pytest

from project2md.report.models import ReportMetadata, VersionInfo


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project: src/main.txt (100 bytes) and README.md (50 bytes)."""
    root = tmp_path / "sample"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.txt").write_bytes(b"x" * 100)
    (root / "README.md").write_bytes(b"y" * 50)
    return root


@pytest.fixture
def metadata():
    """Report metadata with a fixed generation time."""
    return ReportMetadata(
        project_name="demo",
        root_path="/srv/demo",
        generated_at=datetime(2024, 1, 2, 3, 4, 5),
        versions=VersionInfo(framework="5.0", runtime="3.12.1", database="16.2", framework_name="django"),
        generator="project2md 1.0.0",
    )
