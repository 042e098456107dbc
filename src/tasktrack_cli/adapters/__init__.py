"""Storage adapters for the TaskTrack CLI."""

from .flat_file import FlatFileStorage

__all__ = ["FlatFileStorage"]
