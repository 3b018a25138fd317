"""
Pytest configuration and fixtures
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_citizens():
    """Citizen collection as returned by the backend."""
    return [
        {
            "_id": "41",
            "username": "mreyes",
            "firstName": "Maria",
            "lastName": "Reyes",
            "email": "maria@example.org"
        },
        {
            "_id": "42",
            "username": "jdoe",
            "firstName": "Jane",
            "lastName": "Doe"
        },
        {
            "_id": "43",
            "username": "jdoe",
            "firstName": "John",
            "lastName": "Doe"
        }
    ]


@pytest.fixture
def image_files(tmp_path):
    """Two small image files on disk."""
    first = tmp_path / "flooded_street.jpg"
    second = tmp_path / "evacuation.png"
    first.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    second.write_bytes(b"\x89PNGfake-png")
    return [first, second]


@pytest.fixture
def store_url(tmp_path):
    """SQLite URL in a temporary directory."""
    return f"sqlite:///{tmp_path / 'store.db'}"
