"""Shared fixtures for the users CLI tests."""

import io

import pytest

SEED = b'[{"id":"1","email":"alice@example.com","age":31},{"id":"2","email":"bob@example.com","age":27}]'


@pytest.fixture
def out():
    """Binary writer that collects operation output."""
    return io.BytesIO()


@pytest.fixture
def users_file(tmp_path):
    """File with two users in compact JSON."""
    path = tmp_path / "users.json"
    path.write_bytes(SEED)
    return path


@pytest.fixture
def missing_file(tmp_path):
    """Path that does not exist yet."""
    return tmp_path / "absent.json"
