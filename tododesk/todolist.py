"""A user's task list with command handling and undo/redo history."""

import sys
from dataclasses import dataclass
from enum import Enum

from tododesk.dates import is_valid_date
from tododesk.render import manual, task_table
from tododesk.task import Task, sort_key

_FIELDS = ("name", "date", "category", "completed")
_VIEW_KINDS = ("all", "date", "done", "undone", "category", "name")
_ADD_OPTIONS = {"-n": "name", "-d": "date", "-ca": "category"}
_EDIT_OPTIONS = {"-n": "name", "-d": "date", "-ca": "category", "-co": "completed"}
_VIEW_VALUE_OPTIONS = {"-d": "date", "-ca": "category", "-n": "name"}
_VIEW_FLAG_OPTIONS = {"-a": "all", "-undone": "undone", "-done": "done"}
_BAD_DATE = (
    "\nNot a valid date format!!!\n"
    "Should be [year]/[month]/[date], ex. 2025/04/20\n\n"
)


class ActionKind(Enum):
    """Kinds of change recorded in the history."""

    ADD = 1
    EDIT = 3
    DELETE = 4


@dataclass(frozen=True)
class Action:
    """One recorded change: the task as it is after and as it was before."""

    kind: ActionKind
    after: Task | None
    before: Task | None


def _matches(task, kind, value):
    if kind == "all":
        return True
    if kind == "done":
        return task.completed
    if kind == "undone":
        return not task.completed
    return getattr(task, kind) == value


def _completed_value(value, current):
    if value is None:
        return not current
    if isinstance(value, bool):
        return value
    if value == "0":
        return False
    if value == "1":
        return True
    raise ValueError(f"completed must be '0' or '1', got {value!r}")


class TodoList:
    """The tasks of one user, kept sorted, persisted through a store.

    When ``store`` is None changes are kept in memory only. Command methods
    take the arguments that follow the command word.
    """

    def __init__(self, store, user_name, out=None):
        self.store = store
        self.user_name = user_name
        self._out = out
        self._tasks = []
        self._history = []
        self._position = 0

    def _write(self, text):
        (self._out if self._out is not None else sys.stdout).write(text)

    def __iter__(self):
        return iter(list(self._tasks))

    def __len__(self):
        return len(self._tasks)

    def contains(self, name, date):
        """Return True if a task with this name and date exists."""
        return any(t.name == name and t.date == date for t in self._tasks)

    def has_date(self, date):
        """Return True if any task falls on ``date``."""
        return any(t.date == date for t in self._tasks)

    def tasks_on(self, date):
        """Return the tasks on ``date``, completed first, then by name."""
        return sorted((t for t in self._tasks if t.date == date), key=sort_key)

    def _record(self, action):
        del self._history[self._position:]
        self._history.append(action)
        self._position = len(self._history)

    def add(self, name, date, category, completed, record=True):
        """Add a task; return False if one with this name and date exists."""
        if self.contains(name, date):
            self._write("\nTask already exists!\n")
            return False
        task = Task(name=name, date=date, category=category, completed=bool(completed))
        self._tasks.append(task)
        self._tasks.sort(key=sort_key)
        if self.store is not None:
            self.store.append_task(self.user_name, task)
        if record:
            self._record(Action(ActionKind.ADD, task.copy(), None))
        return True

    def delete(self, name, date, record=True):
        """Delete the task with this name and date; return False if absent."""
        for task in self._tasks:
            if task.name == name and task.date == date:
                if self.store is not None:
                    self.store.remove_task(self.user_name, name, date)
                if record:
                    self._record(Action(ActionKind.DELETE, None, task.copy()))
                self._tasks.remove(task)
                return True
        self._write("\nNo such Task !!!\n")
        return False

    def edit(self, name, date, value, field):
        """Set ``field`` of the task ``name`` on ``date`` to ``value``.

        For ``completed`` the value is '0' or '1', or None to toggle.
        Returns True if a task was changed.
        """
        if field not in _FIELDS:
            raise ValueError(f"unknown task field: {field!r}")
        if field == "completed" and value is not None:
            _completed_value(value, False)
        changed = False
        for task in [t for t in self._tasks if t.name == name and t.date == date]:
            before = task.copy()
            if field == "completed":
                task.completed = _completed_value(value, task.completed)
                stored = "1" if task.completed else "0"
            else:
                setattr(task, field, value)
                stored = value
            self._record(Action(ActionKind.EDIT, task.copy(), before))
            if self.store is not None:
                self.store.edit_task(self.user_name, name, date, field, stored)
            changed = True
        return changed

    def _restore(self, task):
        self.add(task.name, task.date, task.category, task.completed, record=False)

    def undo(self):
        """Revert the last recorded change; return False if there is none."""
        if self._position == 0:
            self._write("\nNo Previous Action!\n\n")
            return False
        action = self._history[self._position - 1]
        if action.kind is ActionKind.ADD:
            self.delete(action.after.name, action.after.date, record=False)
        elif action.kind is ActionKind.EDIT:
            self.delete(action.after.name, action.after.date, record=False)
            self._restore(action.before)
        else:
            self._restore(action.before)
        self._position -= 1
        return True

    def redo(self):
        """Apply the next undone change again; return False if there is none."""
        if self._position == len(self._history):
            self._write("\nNo Later Action!\n\n")
            return False
        action = self._history[self._position]
        if action.kind is ActionKind.ADD:
            self._restore(action.after)
        elif action.kind is ActionKind.EDIT:
            self.delete(action.before.name, action.before.date, record=False)
            self._restore(action.after)
        else:
            self.delete(action.before.name, action.before.date, record=False)
        self._position += 1
        return True

    def view(self, kind, value=None):
        """Write a table of the tasks of ``kind`` and return them."""
        if kind not in _VIEW_KINDS:
            raise ValueError(f"unknown view kind: {kind!r}")
        shown = [t for t in self._tasks if _matches(t, kind, value)]
        self._write(task_table(shown))
        return shown

    def _show_updated(self):
        self._write("Updated To-Do List: \n")
        self.view("all")

    def add_command(self, args):
        """Handle ``add [-n name] [-d date] [-ca category]``."""
        if not args:
            self._write("\nadd: too few arguments...\n\n")
            return False
        fields = {"name": "none", "date": "none", "category": "none"}
        failed = False
        tokens = iter(args)
        for option in tokens:
            if option in _ADD_OPTIONS:
                value = next(tokens, None)
                if value is None or value.startswith("-"):
                    self._write(
                        f"\nadd: option requires an argument -- '{option[1]}'\n"
                        "Try 'man add' for more information.\n\n"
                    )
                    failed = True
                    break
                fields[_ADD_OPTIONS[option]] = value
                if option == "-d" and not is_valid_date(value):
                    self._write(_BAD_DATE)
                    failed = True
            else:
                if option.startswith("-"):
                    self._write(
                        f"\nadd: invalid option -- '{option[1:]}'\n"
                        "Try 'man add' for more information. \n\n"
                    )
                else:
                    self._write("\nsyntax error: missing flag(s)\n\n")
                failed = True
                break
        if failed:
            return False
        added = self.add(fields["name"], fields["date"], fields["category"], False, record=True)
        self._write("\nSuccessfully Added !!!\n\n")
        return added

    def delete_command(self, args):
        """Handle ``del name date``."""
        if len(args) < 2:
            self._write("\ndel: too few arguments...\n\n")
            return False
        if len(args) > 2:
            self._write("\ndel: too many arguments...\n\n")
            return False
        deleted = self.delete(args[0], args[1], record=True)
        self._write("\nSuccessfully Deleted !!!\n\n")
        self._show_updated()
        return deleted

    def edit_command(self, args):
        """Handle ``edit name date -n|-d|-ca|-co value``."""
        if len(args) < 4:
            self._write("\nedit: too few arguments...\n\n")
            return False
        if len(args) > 4:
            self._write("\nedit: too many arguments...\n\n")
            return False
        name, date, option, value = args
        if not self.contains(name, date):
            self._write("\nNo such Task!!!\n\n")
            return False
        if option not in _EDIT_OPTIONS:
            if option.startswith("-"):
                self._write(
                    f"\nedit: invalid option -- '{option[1:]}'\n"
                    "Try 'man edit' for more information. \n\n"
                )
            else:
                self._write("edit: syntax error missing flag(s)\n\n")
            return False
        field = _EDIT_OPTIONS[option]
        if field == "date" and not is_valid_date(value):
            self._write(_BAD_DATE)
            return False
        if field == "completed" and value not in ("0", "1"):
            self._write(f"\nedit: syntax error near unexpected token {value}\n\n")
            return False
        self.edit(name, date, value, field)
        self._write("\nSuccessfully Edited !!!\n\n")
        self._show_updated()
        return True

    def undo_command(self, args):
        """Handle ``undo``."""
        if args:
            self._write("\nundo: too many arguments...\n\n")
            return False
        if self.undo():
            self._write("\nUndo Operation Done!\n\n")
            return True
        return False

    def redo_command(self, args):
        """Handle ``redo``."""
        if args:
            self._write("\nredo: too many arguments...\n\n")
            return False
        if self.redo():
            self._write("\nRedo Operation Done!\n\n")
            return True
        return False

    def view_command(self, args):
        """Handle ``view [-a|-done|-undone|-n name|-d date|-ca category]``."""
        self._tasks.sort(key=sort_key)
        if not args:
            return self.view("all")
        if len(args) > 2:
            self._write("\nview: too many arguments\n\n")
            return None
        option = args[0]
        if option in _VIEW_FLAG_OPTIONS:
            return self.view(_VIEW_FLAG_OPTIONS[option])
        if option in _VIEW_VALUE_OPTIONS:
            if len(args) < 2:
                self._write("\nview: too few arguments\n\n")
                return None
            if args[1].startswith("-"):
                self._write(
                    f"\nview: option requires an argument -- '{option[1]}\n"
                    "Try 'man view' for more information.\n\n"
                )
                return None
            return self.view(_VIEW_VALUE_OPTIONS[option], args[1])
        if option.startswith("-"):
            self._write(
                f"\nview: invalid option -- '{option[1:]}'\n"
                "Try 'man view' for more information. \n\n"
            )
        return None

    def man_command(self, args):
        """Handle ``man topic``."""
        if len(args) < 1:
            self._write("\nman: too few arguments...\n\n")
            return False
        if len(args) > 1:
            self._write("\nman: too many arguments...\n\n")
            return False
        self._write(manual(args[0]))
        return True