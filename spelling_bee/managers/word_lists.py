from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..dictionary import WordData, build_word_data, read_word_list
from ..schemas import WordListReference, WordListState, WordListsView

logger = logging.getLogger(__name__)

NOT_LOADED = 'not-loaded'
LOADING = 'loading'
PROCESSING = 'processing'
LOADED = 'loaded'
FAILED = 'failed'

@dataclass
class WordListEntry:
    reference: WordListReference
    status: str = NOT_LOADED
    data: Optional[WordData] = None

    def to_state(self) -> WordListState:
        return WordListState(
            reference=self.reference,
            status=self.status,  # type: ignore
            wordCount=len(self.data.words) if self.data else None,
            acceptedCount=len(self.data.puzzle_master) if self.data else None,
        )

class WordListManager:
    """Loads word lists on demand and tracks which one is active.

    `selected_id` is the list whose data answers queries; `desired_id` is a
    list the client picked while it was still loading, which becomes
    selected once it finishes.
    """

    def __init__(self, sio, references: Iterable[WordListReference],
                 reader: Callable[[str], List[str]] = read_word_list):
        self.sio = sio
        self.reader = reader
        self._entries: Dict[str, WordListEntry] = {
            ref.id: WordListEntry(reference=ref) for ref in references
        }
        self.selected_id: Optional[str] = None
        self.desired_id: Optional[str] = None
        self._tasks: Dict[str, asyncio.Task] = {}

    def __contains__(self, list_id: str) -> bool:
        return list_id in self._entries

    def status(self, list_id: str) -> str:
        return self._entries[list_id].status

    def active(self) -> Optional[WordData]:
        if self.selected_id is None:
            return None
        return self._entries[self.selected_id].data

    def view(self) -> WordListsView:
        return WordListsView(
            wordLists=[e.to_state() for e in self._entries.values()],
            selectedId=self.selected_id,
            desiredId=self.desired_id,
        )

    async def load_first_if_present(self):
        for list_id in self._entries:
            await self.select(list_id)
            return

    async def select(self, list_id: str):
        entry = self._entries[list_id]
        if entry.status in (NOT_LOADED, FAILED):
            self.desired_id = list_id
            await self._set_status(entry, LOADING)
            self._tasks[list_id] = asyncio.create_task(self._load(entry))
        elif entry.status in (LOADING, PROCESSING):
            self.desired_id = list_id
            await self._broadcast()
        elif entry.status == LOADED:
            self.selected_id = list_id
            self.desired_id = None
            await self._broadcast()
        else:
            raise ValueError(f"Unexpected word list status: {entry.status}")

    async def wait(self, list_id: str):
        task = self._tasks.get(list_id)
        if task is not None:
            await task

    async def _load(self, entry: WordListEntry):
        ref = entry.reference
        try:
            words = await asyncio.to_thread(self.reader, ref.path)
        except (OSError, ValueError) as exc:
            logger.error("Error loading word list %s from %s: %s", ref.id, ref.path, exc)
            await self._fail(entry)
            return
        await self._set_status(entry, PROCESSING)
        try:
            entry.data = await asyncio.to_thread(build_word_data, ref, words)
        except (TypeError, ValueError) as exc:
            logger.error("Error indexing word list %s: %s", ref.id, exc)
            await self._fail(entry)
            return
        if self.desired_id == ref.id:
            self.selected_id = ref.id
            self.desired_id = None
        await self._set_status(entry, LOADED)

    async def _fail(self, entry: WordListEntry):
        entry.data = None
        if self.desired_id == entry.reference.id:
            self.desired_id = None
        await self._set_status(entry, FAILED)

    async def _set_status(self, entry: WordListEntry, status: str):
        entry.status = status
        await self._broadcast()

    async def _broadcast(self):
        await self.sio.emit('wordlist:status', self.view().model_dump(by_alias=True))
