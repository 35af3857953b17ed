"""Shared test fixtures and configuration."""

import shutil
from pathlib import Path

import pytest

EXAMPLE_SAVED = """\
# Server settings
server:

  # Address to bind
  host: localhost
  port: 8080

# It's worth keeping backups
backups:
  enabled: true

  # Paths to include
  paths:
  - /etc
  - /var/lib
"""


@pytest.fixture(scope="session")
def test_data_dir():
    """Directory containing test data files."""
    return Path(__file__).parent / "data"


@pytest.fixture
def example_text(test_data_dir):
    """Raw content of the example configuration."""
    return (test_data_dir / "example.yml").read_text(encoding="utf-8")


@pytest.fixture
def example_saved_text():
    """The example configuration as it looks after a save."""
    return EXAMPLE_SAVED


@pytest.fixture
def example_file(tmp_path, test_data_dir):
    """A writable copy of the example configuration."""
    target = tmp_path / "example.yml"
    shutil.copy(test_data_dir / "example.yml", target)
    return target
