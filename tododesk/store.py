"""Persistent text file holding user accounts and their tasks."""

import hashlib
from pathlib import Path

from tododesk.task import Task

_USER_PREFIX = "username: "
_HASH_FIELD = "password"
_HASH_LINE_PREFIX = _HASH_FIELD + ": "
_BLOCK_END = "---"
_EDITABLE_FIELDS = ("name", "date", "category", "completed")


class StoreError(Exception):
    """Raised when the user data file cannot be read or written."""


def hash_password(password):
    """Return a stable 64-bit integer digest of ``password``."""
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def _user_of(line):
    """Return the user name a ``username:`` line introduces, else None."""
    if line.startswith(_USER_PREFIX):
        return line[len(_USER_PREFIX):]
    return None


def _completed_text(value):
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class UserStore:
    """User records kept as blocks of lines in a single text file.

    Each block is a ``username:`` line, a line holding the password digest,
    one line per task (``name date category completed``), a ``---`` line
    and an empty line.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _read_lines(self):
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise StoreError(f"cannot read {self.path}: {exc}") from exc

    def _write_lines(self, lines):
        try:
            self.path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"cannot write {self.path}: {exc}") from exc

    def exists(self, name):
        """Return True if a block for user ``name`` is in the file."""
        if not self.path.exists():
            return False
        return any(_user_of(line) == name for line in self._read_lines())

    def check(self, name, password):
        """Return True if ``name`` is stored with this ``password``."""
        if not self.path.exists():
            return False
        expected = hash_password(password)
        lines = iter(self._read_lines())
        for line in lines:
            if _user_of(line) != name:
                continue
            stored = next(lines, "")
            _, _, digest = stored.partition(" ")
            try:
                if int(digest.strip()) == expected:
                    return True
            except ValueError:
                continue
        return False

    def create(self, name, password):
        """Append a new user block; return False if the user already exists."""
        if self.exists(name):
            return False
        block = (
            f"{_USER_PREFIX}{name}\n"
            f"{_HASH_LINE_PREFIX}{hash_password(password)}\n"
            f"{_BLOCK_END}\n\n"
        )
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(block)
        except OSError as exc:
            raise StoreError(f"cannot write {self.path}: {exc}") from exc
        return True

    def delete(self, name, password):
        """Remove the block of user ``name``; return False if it is not there
        or the password does not match."""
        if not self.exists(name) or not self.check(name, password):
            return False
        kept = []
        in_user = False
        lines = iter(self._read_lines())
        for line in lines:
            if _user_of(line) == name:
                in_user = True
            if not in_user:
                kept.append(line)
            elif line == _BLOCK_END:
                next(lines, None)
                in_user = False
        self._write_lines(kept)
        return True

    def _rewrite(self, user_name, transform):
        """Rewrite the file, passing each line of ``user_name``'s block
        through ``transform``, which returns the lines to keep."""
        result = []
        in_user = False
        for line in self._read_lines():
            owner = _user_of(line)
            if owner is not None:
                in_user = owner == user_name
            if in_user:
                result.extend(transform(line))
            else:
                result.append(line)
        self._write_lines(result)
        return True

    def append_task(self, name, task):
        """Store ``task`` at the end of user ``name``'s block."""
        entry = (
            f"{task.name} {task.date} {task.category} "
            f"{_completed_text(task.completed)}"
        )

        def insert(line):
            return [entry, line] if line == _BLOCK_END else [line]

        return self._rewrite(name, insert)

    def remove_task(self, name, task_name, date):
        """Drop the lines for the task ``task_name`` on ``date`` of user ``name``."""
        target = f"{task_name} {date}"

        def drop(line):
            prefix = " ".join(line.split(" ", 2)[:2])
            return [] if prefix == target else [line]

        return self._rewrite(name, drop)

    def edit_task(self, name, task_name, date, field, value):
        """Set ``field`` of the stored task ``task_name`` on ``date`` to ``value``."""
        if field not in _EDITABLE_FIELDS:
            raise ValueError(f"unknown task field: {field!r}")
        position = _EDITABLE_FIELDS.index(field)
        new_text = _completed_text(value) if field == "completed" else str(value)

        def change(line):
            if not line or _USER_PREFIX in line or _HASH_LINE_PREFIX in line:
                return [line]
            words = (line.split() + ["", "", "", ""])[:4]
            if words[0] != task_name or words[1] != date:
                return [line]
            words[position] = new_text
            return [" ".join(words)]

        return self._rewrite(name, change)

    def load(self):
        """Read every user block.

        Returns a dict mapping each user name, in file order, to a pair of
        its password digest and the list of its tasks.
        """
        users = {}
        lines = iter(self._read_lines())
        for line in lines:
            name = _user_of(line)
            if name is None:
                continue
            _, _, digest = next(lines, "").partition(" ")
            try:
                stored_digest = int(digest.strip())
            except ValueError as exc:
                raise StoreError(f"malformed digest line for user {name!r}") from exc
            tasks = []
            for entry in lines:
                if entry == _BLOCK_END:
                    users[name] = (stored_digest, tasks)
                    break
                words = (entry.split() + ["", "", "", ""])[:4]
                tasks.append(
                    Task(
                        name=words[0],
                        date=words[1],
                        category=words[2],
                        completed=words[3] == "1",
                    )
                )
        return users