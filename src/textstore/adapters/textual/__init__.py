"""Textual host for textstore. The app itself lives in ``.app``."""

from .controller import EditorController, EditorHooks

__all__ = ["EditorController", "EditorHooks"]
