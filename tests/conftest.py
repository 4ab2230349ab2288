import pytest
from kitties_core.crypto import RandomnessSource
from kitties_core.storage import InMemoryStorage, SQLiteStorage


class FixedRandomness(RandomnessSource):
    """Returns the same entropy every call; seeds still differ by call index."""

    def __init__(self, seed: bytes = b"\x42" * 32):
        self.seed = seed
        self.calls = 0

    def random_seed(self) -> bytes:
        self.calls += 1
        return self.seed


@pytest.fixture(params=["memory", "sqlite"])
def storage(request, tmp_path):
    if request.param == "memory":
        store = InMemoryStorage()
    else:
        store = SQLiteStorage(str(tmp_path / "kitties_state.db"))
    yield store
    store.close()


@pytest.fixture
def randomness():
    return FixedRandomness()
