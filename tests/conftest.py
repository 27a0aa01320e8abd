import pytest


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "users.json"


@pytest.fixture
def alice():
    return '{"id":"1","email":"a@b.com","age":30}'
