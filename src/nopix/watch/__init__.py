"""Watch loop for live regeneration."""

from .manager import WatchedFileRecord, WatchManager, WatchSession

__all__ = ["WatchManager", "WatchSession", "WatchedFileRecord"]
