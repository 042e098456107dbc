"""Storage abstraction for TaskTrack CLI.

The task list never touches files directly. It talks to a :class:`TaskStorage`
port, and adapters in :mod:`tasktrack_cli.adapters` decide where the snapshot
actually lives.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tasktrack_cli.models import Task


class TaskStorage(ABC):
    """Abstract base class for persisting the full task snapshot.

    Storage holds exactly one snapshot. Every write replaces it entirely.
    """

    @abstractmethod
    def write(self, tasks: Sequence[Task]) -> None:
        """Persist ``tasks`` in order, replacing whatever was stored before.

        Args:
            tasks: The complete, ordered task sequence

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            OSError: If the snapshot cannot be written
        """
        raise NotImplementedError("TaskStorage.write() must be implemented by adapter")

    @abstractmethod
    def load(self) -> list[str]:
        """Return the stored records in their original order.

        Returns:
            One serialized task per entry; empty if nothing was stored yet

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("TaskStorage.load() must be implemented by adapter")
