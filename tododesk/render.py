"""Text rendering of task tables, manual pages, menus and prompts."""

RULE = "-" * 85
_BANNER = "=" * 32
_MENU_RULE = "-" * 32

_MANUALS = {
    "add": (
        "",
        "Usage: add [-n] [-d] [-ca]",
        "-n [name]: add new task with name [name]",
        "-d [date]: add new task with date [date], Format:[year]/[month]/[date], ex. 2025/04/20",
        "-ca [category]: add new task with category [category]",
        "",
        "",
    ),
    "view": (
        "",
        "Usage: view [-a] [-n] [-d] [-ca] [-done] [-undone]",
        "-a: view all tasks",
        "-n [name]: view by name [name]",
        "-d [date]: view by specific date [date]",
        "-ca [category]: view by specific category [category]",
        "-done: view completed tasks",
        "-undone: view incompleted tasks",
        "",
        "",
    ),
    "edit": (
        "",
        "Usage: edit [original name] [orginal date] [-n] [-d] [-ca] [-co] ",
        "-n [name]: edit original task's date to [name]",
        "-d [date]: edit original task's date to [date]",
        "-ca [category]: edit original task's category to [category]",
        "-co [1 or 0]: edit original task's completion",
        "",
        "",
    ),
    "del": (
        "",
        "Usage: del [name] [date]",
        "",
        "",
    ),
    "calendar": (
        "",
        "Calendar mode",
        "",
        "year [year]: set year to [year]",
        "month [month]: set month to [month]",
        "day [day]: set  day to [day]",
        "",
        "In calendar mode, you can use [mt] command(After setting the year, month, and day):",
        "Usage: mt [-e] [-add] [-done] [-del]",
        "-e [original name] [new name]:  edit task name on specific day",
        "-add [name]: add new task on specific day",
        "-done [name]: mark task as completed on specific day by name",
        "-undone [name]: mark task as incompleted on specific day by name",
        "-del [name]: delete task on specific day by name",
        "",
        "",
    ),
}


def task_row(task):
    """Render one task as a table row followed by a rule line."""
    done = "Yes" if task.completed else "No"
    row = f"|{task.name:>20}|{task.date:>20}|{task.category:>20}|{done:>20}|"
    return f"{row}\n{RULE}\n"


def task_table(tasks):
    """Render a table of ``tasks``, or a notice when there are none."""
    header = (
        "| name:"
        + "| date:".rjust(21)
        + "| category:".rjust(25)
        + "| completed:         |".rjust(32)
    )
    parts = [f"{RULE}\n{header}\n{RULE}\n"]
    rows = [task_row(task) for task in tasks]
    if rows:
        parts.extend(rows)
    else:
        parts.append("!!!" + "No Task Yet".rjust(44) + "!!!".rjust(38) + "\n\n")
    return "".join(parts)


def manual(topic):
    """Return the manual text for a command, or an empty string if unknown."""
    lines = _MANUALS.get(topic)
    if lines is None:
        return ""
    return "\n".join(lines)


def _current_user_block(user_name):
    shown = user_name if user_name else "none"
    return f"{_MENU_RULE}\nCurrent User Name: {shown}\n{_MENU_RULE}\n> "


def welcome_menu():
    """Return the start-up menu."""
    return (
        f"\n{_BANNER}\n"
        "      Welcome to To-Do list     \n"
        f"{_BANNER}\n"
        "Login (1)\n"
        "Register(2)\n"
        "Delete User(3)\n"
        "Quit(4)\n"
        "---------------------\n"
        "> "
    )


def register_menu(user_name):
    """Return the registration menu showing the name entered so far."""
    return (
        f"\n{_BANNER}\n"
        "          Register Menu         \n"
        f"{_BANNER}\n"
        "Enter (or Change) User Name: (1)\n"
        "Enter (or Change) Password:  (2)\n"
        "Comfirm:                     (3)\n"
        "Don't Save and Quit:         (4)\n"
        + _current_user_block(user_name)
    )


def delete_menu(user_name):
    """Return the user deletion menu showing the name entered so far."""
    return (
        f"\n{_BANNER}\n"
        "       User Deletion Menu       \n"
        f"{_BANNER}\n"
        "Enter (or Change) User Name: (1) \n"
        "Comfirm and Delete:          (2) \n"
        "Don't Save and Quit:         (3)\n"
        + _current_user_block(user_name)
    )


def user_prompt(user_name, today):
    """Return the command prompt: today's date and the user's name."""
    return f"{today:%Y/%m/%d} - {user_name} $ "