"""Text-mode desktop applications drawn onto an in-memory character screen."""

__version__ = "1.3.0"

__all__ = [
    "about",
    "app_store",
    "calculator",
    "calendar",
    "css",
    "dom",
    "file_manager",
    "notepad",
    "screen",
    "script",
    "shell",
    "terminal",
    "updates",
]