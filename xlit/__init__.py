from .server.complete import list_completions, try_complete

__all__ = ("list_completions", "try_complete")
