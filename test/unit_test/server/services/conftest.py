import pytest

from buzzhub.core.storage import MemStorage


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage()
