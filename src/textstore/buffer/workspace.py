"""Registry of open text stores keyed by integer id."""

from __future__ import annotations

from typing import Dict, List, Optional

from textstore.runtime import telemetry

from .errors import UnknownBufferError
from .store import PathLike, TextStore


class BufferWorkspace:
    """Holds every open store and tracks which one is active.

    Ids start at 1 and are never reused. Adding a store makes it active.
    """

    def __init__(self) -> None:
        self._buffers: Dict[int, TextStore] = {}
        self._next_id = 1
        self._active_id: Optional[int] = None

    def add(self, store: TextStore) -> int:
        buffer_id = self._next_id
        self._next_id += 1
        self._buffers[buffer_id] = store
        self._active_id = buffer_id
        telemetry.record_event(
            "workspace.add",
            level="debug",
            data={"buffer_id": buffer_id, "name": store.name},
        )
        return buffer_id

    def open(self, path: PathLike) -> int:
        return self.add(TextStore.load(path))

    def scratch(self, text: str = "") -> int:
        return self.add(TextStore.from_text(text))

    def get(self, buffer_id: int) -> TextStore:
        try:
            return self._buffers[buffer_id]
        except KeyError:
            raise UnknownBufferError(buffer_id) from None

    def activate(self, buffer_id: int) -> TextStore:
        store = self.get(buffer_id)
        self._active_id = buffer_id
        return store

    def close(self, buffer_id: int) -> TextStore:
        """Drop a store; closing the active one activates the lowest remaining id."""

        store = self.get(buffer_id)
        del self._buffers[buffer_id]
        if self._active_id == buffer_id:
            self._active_id = min(self._buffers) if self._buffers else None
        return store

    @property
    def active_id(self) -> Optional[int]:
        return self._active_id

    @property
    def active(self) -> Optional[TextStore]:
        if self._active_id is None:
            return None
        return self._buffers[self._active_id]

    def ids(self) -> List[int]:
        return sorted(self._buffers)

    def __len__(self) -> int:
        return len(self._buffers)

    def __contains__(self, buffer_id: object) -> bool:
        return buffer_id in self._buffers
