"""Key-driven editing controller that feeds point-addressed edits to a store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textstore.buffer import (
    BufferIOError,
    BufferWorkspace,
    FileNotSetError,
    LineView,
    Point,
    TextStore,
)
from textstore.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorHooks:
    """Callbacks invoked by the controller to update the host UI."""

    update_lines: Callable[[LineView], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class EditorController:
    """Translates key presses into edits on the workspace's active store.

    Splitting and joining lines is done with ``remove_line``/``insert_line``
    so the store's line table stays the only record of line boundaries.
    """

    def __init__(self, workspace: BufferWorkspace, hooks: EditorHooks) -> None:
        self.workspace = workspace
        self.hooks = hooks
        self._handlers: Dict[str, Callable[[TextStore], Optional[str]]] = {
            "LEFT": self._move_left,
            "RIGHT": self._move_right,
            "UP": self._move_up,
            "DOWN": self._move_down,
            "HOME": self._move_home,
            "END": self._move_end,
            "ENTER": self._split_line,
            "BACKSPACE": self._backspace,
            "DELETE": self._delete,
            "CTRL+S": self._save,
        }
        self.refresh()

    @property
    def store(self) -> Optional[TextStore]:
        return self.workspace.active

    def handle_key(self, key: str, *, text: Optional[str] = None) -> bool:
        """Apply one key press. Returns ``False`` when the key is not handled."""

        store = self.store
        if store is None:
            return False
        self.hooks.log(f"key -> key={key!r} text={text!r} cursor={store.cursor}")

        handler = self._handlers.get(key.upper())
        if handler is not None:
            message = handler(store)
        elif text is not None and _is_insertable(text):
            message = self._insert(store, text)
        else:
            return False

        self.refresh(message)
        return True

    def refresh(self, message: Optional[str] = None) -> None:
        store = self.store
        if store is None:
            self.hooks.update_status(message or "no buffer")
            return
        self.hooks.update_lines(store.lines())
        status = f"{store.name} {store.cursor.y + 1}:{store.cursor.x + 1}"
        self.hooks.update_status(f"{status} {message}" if message else status)

    # ------------------------------------------------------------------
    # Editing

    def _insert(self, store: TextStore, char: str) -> None:
        x, y = store.cursor.as_tuple()
        if y >= store.line_count:
            store.insert_line(y, "")
        store.insert_char(Point(x, y), char)
        store.cursor = Point(x + 1, y)

    def _split_line(self, store: TextStore) -> None:
        x, y = store.cursor.as_tuple()
        line = store.remove_line(y) or ""
        store.insert_line(y, line[:x])
        store.insert_line(y + 1, line[x:])
        store.cursor = Point(0, y + 1)

    def _backspace(self, store: TextStore) -> None:
        x, y = store.cursor.as_tuple()
        if x > 0:
            store.remove_char(Point(x - 1, y))
            store.cursor = Point(x - 1, y)
        elif 0 < y < store.line_count:
            column = _length(store, y - 1)
            self._join(store, y - 1)
            store.cursor = Point(column, y - 1)

    def _delete(self, store: TextStore) -> None:
        x, y = store.cursor.as_tuple()
        if x < _length(store, y):
            store.remove_char(Point(x, y))
        elif y + 1 < store.line_count:
            self._join(store, y)

    def _join(self, store: TextStore, row: int) -> None:
        tail = store.remove_line(row + 1) or ""
        head = store.remove_line(row) or ""
        store.insert_line(row, head + tail)

    def _save(self, store: TextStore) -> str:
        try:
            store.save()
        except FileNotSetError:
            return "no file name"
        except BufferIOError as exc:
            telemetry.record_event(
                "controller.save_failed", level="warning", data={"error": exc}
            )
            return f"save failed: {exc}"
        return "saved"

    # ------------------------------------------------------------------
    # Motion

    def _move_left(self, store: TextStore) -> None:
        x, y = store.cursor.as_tuple()
        if x > 0:
            self._set_cursor(store, x - 1, y)
        elif y > 0:
            self._set_cursor(store, _length(store, y - 1), y - 1)

    def _move_right(self, store: TextStore) -> None:
        x, y = store.cursor.as_tuple()
        if x < _length(store, y):
            self._set_cursor(store, x + 1, y)
        elif y + 1 < store.line_count:
            self._set_cursor(store, 0, y + 1)

    def _move_up(self, store: TextStore) -> None:
        self._move_vertical(store, -1)

    def _move_down(self, store: TextStore) -> None:
        self._move_vertical(store, 1)

    def _move_home(self, store: TextStore) -> None:
        self._set_cursor(store, 0, store.cursor.y)

    def _move_end(self, store: TextStore) -> None:
        y = store.cursor.y
        self._set_cursor(store, _length(store, y), y)

    def _move_vertical(self, store: TextStore, delta: int) -> None:
        y = store.cursor.y + delta
        if 0 <= y < store.line_count:
            self._set_cursor(store, store.cursor.x, y)

    def _set_cursor(self, store: TextStore, x: int, y: int) -> None:
        store.cursor = Point(min(x, _length(store, y)), y)


def _length(store: TextStore, row: int) -> int:
    return store.line_length(row) if row < store.line_count else 0


def _is_insertable(text: str) -> bool:
    return len(text) == 1 and (text.isprintable() or text == "\t")


__all__ = ["EditorController", "EditorHooks"]
