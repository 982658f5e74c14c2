"""Interactive calendar view over a user's task list."""

import re
import sys

from tododesk.dates import days_in_month

_CELL_WIDTH = 22
_MONTH_RULE = "-" * (_CELL_WIDTH * 7 + 1)
_DAY_RULE = "-" * 23
_BLANK_CELL = " " * 21 + "|"
_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_TASK_ROWS = 6
_MAX_YEAR = 1_000_000_000
_MIN_YEAR = 1000
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_MT_OPTIONS = ("-e", "-done", "-undone", "-add", "-del")
_SAKAMOTO = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def _weekday(year, month, day):
    """Return the weekday of a Gregorian date, 0 for Sunday."""
    if month < 3:
        year -= 1
    return (year + year // 4 - year // 100 + year // 400 + _SAKAMOTO[month - 1] + day) % 7


def _two_digits(value):
    return f"{value:02d}"


def _task_cell(task):
    """Return a task's name right-aligned with its completion mark and border."""
    status = "(x)" if task.completed else "( )"
    return f"{task.name.rjust(18)}{status}|"


class CalendarMode:
    """Year, month and day selection with month and day views of tasks.

    A field that is 0 is unset. Command methods take the arguments that
    follow the command word; ``handle`` takes the whole command line split
    into words.
    """

    def __init__(self, todo, out=None):
        self.todo = todo
        self._out = out
        self.year = 0
        self.month = 0
        self.day = 0

    def _write(self, text):
        (self._out if self._out is not None else sys.stdout).write(text)

    def _date_text(self):
        text = str(self.year) if self.year else ""
        if self.month:
            text += "/" + _two_digits(self.month)
        if self.day:
            text += "/" + _two_digits(self.day)
        return text

    def prompt(self):
        """Return the calendar prompt showing the date selected so far."""
        date = self._date_text()
        return f"calendar {date} > " if date else "calendar > "

    def _read_value(self, command, args, low, high):
        """Validate a single integer argument; return it or None."""
        if not args:
            self._write(f"\n{command}: too few arguments...\n\n")
            return None
        if len(args) > 1:
            self._write(f"\n{command}: too many arguments...\n\n")
            return None
        match = _LEADING_INT.match(args[0])
        value = int(match.group(1)) if match else None
        if (
            value is None
            or not low <= value <= high
            or (command == "year" and value < _MIN_YEAR)
        ):
            self._write(f"\nInvalid {command}\n\n")
            return None
        self._write(f"\nSet {command}: {value}\n\n")
        return value

    def set_year(self, args):
        """Handle ``year N``; clears month and day. Return True on success."""
        self.month = 0
        self.day = 0
        value = self._read_value("year", args, 0, _MAX_YEAR)
        if value is None:
            return False
        self.year = value
        return True

    def set_month(self, args):
        """Handle ``month N``; clears the day. Return True on success."""
        if self.year == 0:
            self._write("\nPlease Set Year First !!!\n\n")
        self.month = 0
        self.day = 0
        value = self._read_value("month", args, 1, 12)
        if value is None:
            return False
        self.month = value
        return True

    def set_day(self, args):
        """Handle ``day N`` once year and month are set. Return True on success."""
        if self.year == 0:
            self._write("\nPlease Set Year First !!!\n\n")
            return False
        if self.month == 0:
            self._write("\nPlease Set Month First !!!\n\n")
            return False
        value = self._read_value("day", args, 1, days_in_month(self.year, self.month))
        if value is None:
            return False
        self.day = value
        return True

    def _full_date(self, day):
        return f"{self.year}/{_two_digits(self.month)}/{_two_digits(day)}"

    def month_view(self):
        """Write and return a grid of the selected month with its tasks."""
        total = days_in_month(self.year, self.month)
        first = _weekday(self.year, self.month, 1)
        lines = [f"Year: {self.year}", _MONTH_RULE]
        lines.append(
            "|" + "".join(name.rjust(12) + "|".rjust(10) for name in _WEEKDAYS)
        )
        lines.append(_MONTH_RULE)

        day = 1
        start = first
        while day <= total:
            cells = []
            week_tasks = []
            for column in range(7):
                if column >= start and day <= total:
                    label = f"{_two_digits(self.month)}/{_two_digits(day)}"
                    cells.append(label.rjust(13) + "|".rjust(9))
                    week_tasks.append(self.todo.tasks_on(self._full_date(day)))
                    day += 1
                else:
                    cells.append(_BLANK_CELL)
                    week_tasks.append([])
            start = 0
            lines.append("|" + "".join(cells))
            lines.append(_MONTH_RULE)
            for row in range(_TASK_ROWS):
                row_cells = []
                for tasks in week_tasks:
                    remaining = len(tasks) - row
                    if row == _TASK_ROWS - 1 and remaining > 1:
                        row_cells.append("...".rjust(21) + "|")
                    elif remaining > 0:
                        row_cells.append(_task_cell(tasks[row]))
                    else:
                        row_cells.append(_BLANK_CELL)
                lines.append("|" + "".join(row_cells))
            lines.append(_MONTH_RULE)

        text = "\n".join(lines) + "\n"
        self._write(text)
        return text

    def day_view(self):
        """Write and return the list of tasks on the selected day."""
        label = f"{_two_digits(self.month)}/{_two_digits(self.day)}"
        parts = [
            f"Year: {self.year}\n",
            f"{_DAY_RULE}\n",
            "|" + label.rjust(13) + "|".rjust(9) + "\n",
            f"{_DAY_RULE}\n",
        ]
        tasks = self.todo.tasks_on(f"{self.year}/{label}")
        if not tasks:
            parts.append("!!!" + "No Task Yet".rjust(14) + "!!!".rjust(6) + "\n\n")
        else:
            parts.extend("|" + _task_cell(t) + "\n" for t in tasks)
            parts.append(f"{_DAY_RULE}\n")
        text = "".join(parts)
        self._write(text)
        return text

    def _arity_ok(self, args, count):
        if len(args) < count:
            self._write("\nmt: too few arguments\n\n")
            return False
        if len(args) > count:
            self._write("\nmt: too many arguments\n\n")
            return False
        return True

    def manage(self, args):
        """Handle ``mt`` on the selected day; return True if it succeeded."""
        if not (self.year and self.month and self.day):
            self._write(
                "\nPlase set both Year, Month, and Day before using this command...\n\n"
            )
            return False
        date = self._full_date(self.day)
        if not args:
            self._write("\nmt: too few arguments\n\n")
            return False
        option = args[0]
        ok = True
        if option in _MT_OPTIONS:
            if len(args) < 2:
                self._write("\nmt: too few arguments\n\n")
                ok = False
            elif args[1].startswith("-"):
                self._write(f"\nmt: option requires an argument -- '{option[1]}\n\n")
                ok = False
            elif option == "-e":
                ok = self._arity_ok(args, 3) and self.todo.contains(args[1], date)
                if ok:
                    self.todo.edit(args[1], date, args[2], "name")
            elif option in ("-done", "-undone"):
                ok = self._arity_ok(args, 2)
                if ok:
                    value = "1" if option == "-done" else "0"
                    self.todo.edit(args[1], date, value, "completed")
            elif option == "-add":
                ok = self._arity_ok(args, 2)
                if ok:
                    self.todo.add(args[1], date, "none", False, record=True)
            else:
                ok = self._arity_ok(args, 2)
                if ok:
                    self.todo.delete(args[1], date, record=True)
        elif option.startswith("-"):
            self._write(f"\nmt: invalid option -- '{option[1:]}'\n\n")
            ok = False
        if ok:
            self.day_view()
        return ok

    def handle(self, args):
        """Run one command line; return False when the mode should end."""
        if not args:
            return True
        command, rest = args[0], args[1:]
        if command == "year":
            self.set_year(rest)
        elif command == "month":
            if self.set_month(rest):
                self.month_view()
        elif command == "day":
            if self.set_day(rest):
                self.day_view()
        elif command == "mt":
            self.manage(rest)
        elif command == "quit":
            return False
        else:
            self._write("\nNo Such Command !!!\n\n")
        return True

    def run(self, lines):
        """Prompt for and handle lines until ``quit`` or the input ends."""
        for line in lines:
            self._write(self.prompt())
            if not self.handle(line.split()):
                return