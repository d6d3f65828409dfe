"""
Pytest configuration and shared fixtures.
"""

import pytest

from file_completion.dependencies import reset_singletons
from file_completion.models import GenericFile


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons around each test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def make_file(tmp_path):
    """Create a real file under tmp_path/inbox and return its GenericFile handle."""
    inbox = tmp_path / "inbox"

    def _make(relative: str, content: str = "data") -> GenericFile:
        path = inbox / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return GenericFile.from_path(path, inbox)

    return _make
