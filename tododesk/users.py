"""In-memory registry of user accounts backed by the user data file."""

import sys
from dataclasses import dataclass

from tododesk.store import hash_password
from tododesk.todolist import TodoList


@dataclass
class _Account:
    password_hash: int
    todo: TodoList


class UserRegistry:
    """Known users, each with a password digest and a task list."""

    def __init__(self, store, out=None):
        self.store = store
        self._out = out
        self._accounts = {}

    def _write(self, text):
        (self._out if self._out is not None else sys.stdout).write(text)

    def __contains__(self, name):
        return name in self._accounts

    def __iter__(self):
        return iter(list(self._accounts))

    def __len__(self):
        return len(self._accounts)

    def _new_list(self, name):
        return TodoList(self.store, name, self._out)

    def load(self):
        """Read every user and their tasks from the store.

        Raises StoreError if the file cannot be read.
        """
        self._accounts.clear()
        for name, (password_hash, tasks) in self.store.load().items():
            # Build the list detached from the store so loading does not
            # write the tasks back into the file.
            todo = TodoList(None, name, self._out)
            for task in tasks:
                todo.add(task.name, task.date, task.category, task.completed, record=False)
            todo.store = self.store
            self._accounts[name] = _Account(password_hash, todo)
        return len(self._accounts)

    def find(self, name):
        """Return the task list of user ``name``, or None if unknown."""
        account = self._accounts.get(name)
        return account.todo if account is not None else None

    def login(self, name, password):
        """Return True if ``name`` exists and ``password`` matches."""
        account = self._accounts.get(name)
        return account is not None and account.password_hash == hash_password(password)

    def register(self, name, password):
        """Create a new user; return False if the name is taken."""
        if name in self._accounts or not self.store.create(name, password):
            return False
        self._accounts[name] = _Account(hash_password(password), self._new_list(name))
        return True

    def remove(self, name, password):
        """Delete user ``name`` if the password matches; return True if removed."""
        if not self.store.delete(name, password):
            self._write("\n\nIncorrect Username or Password !!!\n\n")
            return False
        self._accounts.pop(name, None)
        return True