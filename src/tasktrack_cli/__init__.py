"""TaskTrack CLI - a personal task tracker backed by a flat file."""

__version__ = "0.3.0"
