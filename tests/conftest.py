import asyncio

import pytest

from spelling_bee.managers.word_lists import WordListManager
from spelling_bee.schemas import WordListReference

WORDS = ["abracadabrazy", "abrac", "barca", "barbar", "zzzzz", "lengthened", "lengthen", "then"]


class MockSio:
    def __init__(self):
        self.emitted = []

    async def emit(self, event, data=None, **kwargs):
        self.emitted.append((event, data, kwargs))


@pytest.fixture
def references(tmp_path):
    good = tmp_path / "small.txt"
    good.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return [
        WordListReference(id="small", name="Small list", path=str(good)),
        WordListReference(id="missing", name="Missing list", path=str(tmp_path / "nope.txt")),
    ]


@pytest.fixture
def sio():
    return MockSio()


@pytest.fixture
def manager(sio, references):
    return WordListManager(sio, references)


@pytest.fixture
def loaded_manager(manager):
    async def load():
        await manager.select("small")
        await manager.wait("small")

    asyncio.run(load())
    return manager
