"""Interactive front end: login menus and the per-user command prompt."""

import argparse
import datetime
import getpass
import sys
from collections import deque

from tododesk.calendar_mode import CalendarMode
from tododesk.render import delete_menu, register_menu, user_prompt, welcome_menu
from tododesk.store import StoreError, UserStore
from tododesk.users import UserRegistry

DEFAULT_DATA_FILE = "user_file/user_data.txt"

_HIDDEN_LABEL = "Password"
_ENTER_HIDDEN_PROMPT = f"Enter {_HIDDEN_LABEL}: "
_LOGIN_HIDDEN_PROMPT = f"{_HIDDEN_LABEL.lower()}: "


class App:
    """Drives the welcome menu and the command sessions of logged-in users."""

    def __init__(self, registry, stdin=None, stdout=None, read_password=None):
        self.registry = registry
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.read_password = read_password if read_password is not None else getpass.getpass
        self._words = deque()
        self._calendars = {}

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def _next_word(self):
        while not self._words:
            line = self.stdin.readline()
            if not line:
                return None
            self._words.extend(line.split())
        return self._words.popleft()

    def _next_line(self):
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _lines(self):
        while (line := self._next_line()) is not None:
            yield line

    def _register(self):
        name = ""
        entered = ""
        while True:
            self._write(register_menu(name))
            choice = self._next_word()
            if choice is None:
                return False
            if choice == "1":
                self._write("Enter Name: ")
                word = self._next_word()
                if word is None:
                    return False
                name = word
            elif choice == "2":
                entered = self.read_password(_ENTER_HIDDEN_PROMPT)
            elif choice == "3":
                if not name or not entered:
                    self._write("\nUser Name or Password is Unset !!!\n")
                elif self.registry.register(name, entered):
                    self._write("\nUser Added Successfully\n")
                    return True
                else:
                    self._write("\nUser already exists!!!\n")
            elif choice == "4":
                return True
            else:
                self._write("\nNot a valid command...\n")

    def _delete(self):
        name = ""
        while True:
            self._write(delete_menu(name))
            choice = self._next_word()
            if choice is None:
                return False
            if choice == "1":
                self._write("Enter Name: ")
                word = self._next_word()
                if word is None:
                    return False
                name = word
            elif choice == "2":
                if not name:
                    self._write("\nUser Name is Unset !!!\n")
                    continue
                entered = self.read_password(_ENTER_HIDDEN_PROMPT)
                if self.registry.remove(name, entered):
                    self._write("\n\nUser Deleted Successfully\n")
                    return True
            elif choice == "3":
                return True
            else:
                self._write("\nNot a valid command...\n")

    def login(self):
        """Run the welcome menu; return the logged-in user name, or None to quit."""
        while True:
            self._write(welcome_menu())
            choice = self._next_word()
            if choice is None or choice == "4":
                self._words.clear()
                return None
            if choice == "1":
                self._write("user name: ")
                name = self._next_word()
                if name is None:
                    return None
                entered = self.read_password(_LOGIN_HIDDEN_PROMPT)
                if self.registry.login(name, entered):
                    self._words.clear()
                    return name
                self._write("\n\nIncorrect User or Incorrect Password!!!\n")
            elif choice == "2":
                if not self._register():
                    return None
            elif choice == "3":
                if not self._delete():
                    return None
            else:
                self._write("\nNot a valid command...\n")

    def _calendar(self, user_name, todo, args):
        if args:
            self._write("\ncalendar: too few arguments...\n\n")
            return
        mode = self._calendars.get(user_name)
        if mode is None:
            mode = CalendarMode(todo, self.stdout)
            self._calendars[user_name] = mode
        mode.run(self._lines())

    def session(self, user_name):
        """Read and run commands for ``user_name`` until ``logout`` or end of input."""
        todo = self.registry.find(user_name)
        if todo is None:
            raise KeyError(user_name)
        handlers = {
            "add": todo.add_command,
            "view": todo.view_command,
            "edit": todo.edit_command,
            "del": todo.delete_command,
            "undo": todo.undo_command,
            "redo": todo.redo_command,
            "man": todo.man_command,
        }
        while True:
            self._write(user_prompt(user_name, datetime.date.today()))
            line = self._next_line()
            if line is None:
                return
            words = line.split()
            if not words:
                continue
            command, args = words[0], words[1:]
            if command == "logout":
                return
            if command in ("calendar", "cal"):
                self._calendar(user_name, todo, args)
            elif command in handlers:
                handlers[command](args)
            else:
                self._write("\nNo Such Command !!!\n")

    def run(self):
        """Alternate between the welcome menu and user sessions until quit."""
        while (name := self.login()) is not None:
            self.session(name)


def main(argv=None):
    """Start the interactive to-do list."""
    parser = argparse.ArgumentParser(prog="tododesk", description="Console to-do list.")
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_FILE,
        help="path of the user data file (default: %(default)s)",
    )
    options = parser.parse_args(argv)
    registry = UserRegistry(UserStore(options.data), sys.stdout)
    try:
        registry.load()
    except StoreError:
        print("Error !!!")
        return 1
    App(registry).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())