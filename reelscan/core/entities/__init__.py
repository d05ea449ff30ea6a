"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- Library, LibraryPath, LibraryKind: Scanned libraries and their roots
- Movie, Series, Season, Episode: Reconciled media graph
- ScheduledTask, TaskStatus: Recurring tasks and their run state
"""

from reelscan.core.entities.library import Library, LibraryKind, LibraryPath
from reelscan.core.entities.media import Episode, LibraryItem, Movie, Season, Series
from reelscan.core.entities.task import ScheduledTask, TaskStatus

__all__ = [
    "Library",
    "LibraryKind",
    "LibraryPath",
    "LibraryItem",
    "Movie",
    "Series",
    "Season",
    "Episode",
    "ScheduledTask",
    "TaskStatus",
]
