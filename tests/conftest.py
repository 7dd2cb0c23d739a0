"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def project_cwd(monkeypatch):
    """Run the test from the project root so tests/data paths resolve."""
    monkeypatch.chdir(PROJECT_ROOT)
    return PROJECT_ROOT


@pytest.fixture
def sample_paths(temp_dir):
    """
    Create a set of filesystem entries for testing.

    Returns:
        dict with paths to:
        - directory: an existing directory
        - file: a regular file
        - missing: a path that does not exist
        - dir_link / file_link / broken_link: symlinks (None if unsupported)
    """
    paths = {}

    directory = temp_dir / "root"
    directory.mkdir()
    (directory / "a.txt").write_text("same")
    paths['directory'] = str(directory)

    regular = temp_dir / "regular.txt"
    regular.write_text("not a directory")
    paths['file'] = str(regular)

    paths['missing'] = str(temp_dir / "missing")

    try:
        dir_link = temp_dir / "dir_link"
        dir_link.symlink_to(directory, target_is_directory=True)
        file_link = temp_dir / "file_link"
        file_link.symlink_to(regular)
        broken_link = temp_dir / "broken_link"
        broken_link.symlink_to(temp_dir / "nowhere")
        paths['dir_link'] = str(dir_link)
        paths['file_link'] = str(file_link)
        paths['broken_link'] = str(broken_link)
    except (OSError, NotImplementedError):
        paths['dir_link'] = paths['file_link'] = paths['broken_link'] = None

    return paths
