"""Executable Textual app that edits text stores in the terminal."""

from __future__ import annotations

import argparse
import os
from typing import List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textstore.adapters.textual.app"
    ) from exc

from textstore.buffer import BufferWorkspace, LineView, TextStoreError
from textstore.runtime import telemetry

from .controller import EditorController, EditorHooks


def create_workspace(paths: Sequence[str]) -> BufferWorkspace:
    """Open every path, or a single scratch buffer when none are given."""

    workspace = BufferWorkspace()
    for path in paths:
        workspace.open(path)
    if not paths:
        workspace.scratch()
    else:
        workspace.activate(workspace.ids()[0])
    return workspace


class TextStoreApp(App[None]):
    """Full-screen editor for the active buffer of a workspace.

    Textual owns the terminal session: raw mode and the alternate screen are
    entered by ``run()`` and restored on every exit path.
    """

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, workspace: BufferWorkspace) -> None:
        super().__init__()
        self.workspace = workspace
        self.controller: EditorController | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view", markup=False)
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = EditorHooks(
            update_lines=self._update_lines,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.controller = EditorController(self.workspace, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.controller:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text = normalized
        if self.controller.handle_key(key, text=text):
            event.stop()

    def _update_lines(self, lines: LineView) -> None:
        if self._buffer_widget:
            self._buffer_widget.update("\n".join(lines))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("app.key", level="debug", data={"line": line})

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[Tuple[str, Optional[str]]]:
        key = event.key
        if key == "ctrl+q":
            return None
        if key in {"enter", "return"}:
            return ("ENTER", None)
        if key == "tab":
            return ("TAB", "\t")
        if event.is_printable and event.character:
            return (event.character, event.character)
        return (key.upper(), None)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit text files in the terminal.")
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files to open; a scratch buffer is used when none are given",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("TEXTSTORE_LOG_PRESET", "production"),
        help="telelog preset to apply before starting (default: production)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    paths: List[str] = list(args.paths)
    try:
        workspace = create_workspace(paths)
    except TextStoreError as exc:
        raise SystemExit(f"textstore: {exc}") from exc
    TextStoreApp(workspace).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
