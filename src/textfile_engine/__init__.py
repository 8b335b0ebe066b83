"""UI-agnostic file persistence engine for text editors."""

__all__ = [
    "adapters",
    "buffer",
    "dialogs",
    "editor",
    "files",
    "runtime",
]

__version__ = "0.1.0"
