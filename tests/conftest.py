"""Test configuration and fixtures for file-lister."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree with text, binary-like and log files."""
    root = tmp_path / "project"
    (root / "src" / "utils").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "logs").mkdir()

    (root / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (root / "src" / "utils" / "helpers.ts").write_text("export const x = 1;\n")
    (root / "docs" / "README.md").write_text("# Project\n")
    (root / "logs" / "server.log").write_text("DEBUG: started\n")
    (root / "app.log").write_text("INFO: ok\n")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "config.b.json").write_text('{"name": "test"}')
    return root
