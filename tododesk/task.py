"""The task record and its ordering."""

from dataclasses import dataclass, replace


@dataclass
class Task:
    """A single to-do entry."""

    name: str = "none"
    date: str = "none"
    category: str = "none"
    completed: bool = False

    def copy(self):
        """Return an independent copy of this task."""
        return replace(self)


def sort_key(task):
    """Order by date, completed tasks before open ones, then by name."""
    return (task.date, not task.completed, task.name)