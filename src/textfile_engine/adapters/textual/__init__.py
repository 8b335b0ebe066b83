"""Textual host: modal dialogs and a small editor app."""

from .dialogs import MessageScreen, PathScreen, TextualDialogBridge

__all__ = ["MessageScreen", "PathScreen", "TextualDialogBridge"]
