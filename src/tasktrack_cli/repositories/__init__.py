"""Storage interfaces for the TaskTrack CLI.

Implementations (Adapters) are in:
- tasktrack_cli.adapters.flat_file (pipe-delimited text file)
"""

from .repository import TaskStorage

__all__ = ["TaskStorage"]
