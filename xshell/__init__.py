"""A small interactive POSIX shell with pipelines, command lists, redirection and history."""

__version__ = "0.1.0"
__all__ = ["compound", "execute", "history", "redirect", "shell", "signals"]