# tododesk

tododesk is a small to-do list for the terminal. More than one person can
use it. Each user has a name, a password and a private list of tasks. Every
task has a name, a date, a category and a done flag. All users and tasks are
kept in one plain text file, so tasks are still there the next time the
program starts.

## Installing

```
pip install .
```

To also install what the test suite needs:

```
pip install ".[test]"
```

## The data file

By default the program reads and writes `user_file/user_data.txt`, relative
to the current directory. Another file can be chosen with `--data`:

```
tododesk --data path/to/users.txt
```

The file must exist before the program starts. If it cannot be read the
program prints `Error !!!` and exits with status 1. To start from nothing,
create an empty file:

```
mkdir user_file
touch user_file/user_data.txt
```

Each user is stored as a block: a `username: NAME` line, a `password: N`
line holding a 64-bit number taken from a SHA-256 digest of the password
(the password itself is never stored), one line per task
(`name date category completed`, completed being `0` or `1`), a `---` line
and an empty line. Every add, edit and delete is written to the file at once.

## Starting

```
tododesk
```

The start menu has four choices:

1. Login: enter a user name, then the password. The password is read
   without being shown.
2. Register: set a name (1) and a password (2), then confirm (3). A name that
   is already taken is refused. Choice 4 leaves without saving.
3. Delete User: enter a name (1), then confirm (2) and give its password to
   remove that user and all of their tasks. Choice 3 leaves.
4. Quit

The program also ends when its input ends.

## Commands in a session

Once you are logged in, the prompt shows today's date and your user name:

```
2025/04/20 - alice $
```

| Command | What it does |
| --- | --- |
| `add -n NAME -d YYYY/MM/DD -ca CATEGORY` | add a task; any flag left out becomes `none` |
| `view` or `view -a` | list every task |
| `view -n NAME`, `view -d DATE`, `view -ca CATEGORY` | list the tasks that match |
| `view -done`, `view -undone` | list finished or unfinished tasks |
| `edit NAME DATE -n NEW_NAME` | rename a task |
| `edit NAME DATE -d NEW_DATE` | move a task to another date |
| `edit NAME DATE -ca NEW_CATEGORY` | change a task's category |
| `edit NAME DATE -co 1` (or `0`) | mark a task done (or not done) |
| `del NAME DATE` | delete a task |
| `undo`, `redo` | step back and forward through adds, edits and deletes |
| `man add`, `man view`, `man edit`, `man del`, `man calendar` | show help for a command |
| `calendar` or `cal` | open calendar mode |
| `logout` | go back to the start menu |

Words are separated by spaces, so task names, dates and categories are single
words. A name and a date together identify a task; two tasks cannot share
both. Dates must be written as `YYYY/MM/DD`, for example `2025/04/20`.

Lists are sorted by date, then finished tasks first, then by name.

## Calendar mode

In calendar mode the prompt shows the year, month and day chosen so far:

```
calendar 2025/04/20 >
```

| Command | What it does |
| --- | --- |
| `year YYYY` | choose a year (1000 or later); clears month and day |
| `month M` | choose a month and draw it as a grid with the tasks of each day |
| `day D` | choose a day and list that day's tasks |
| `mt -add NAME` | add a task on the chosen day |
| `mt -e NAME NEW_NAME` | rename a task on the chosen day |
| `mt -done NAME`, `mt -undone NAME` | mark a task on the chosen day done or not done |
| `mt -del NAME` | delete a task on the chosen day |
| `quit` | leave calendar mode |

A month must be chosen before a day, and a year, a month and a day must all
be chosen before `mt` can be used. The month grid shows up to six tasks per
day; when there are more, the last line of the day reads `...`. The chosen
date is kept when you leave calendar mode and come back during the same run.

## Using it from Python

The pieces can be used on their own:

- `tododesk.store.UserStore(path)` reads and writes the data file
  (`exists`, `check`, `create`, `delete`, `append_task`, `remove_task`,
  `edit_task`, `load`); it raises `StoreError` when the file cannot be read
  or written.
- `tododesk.users.UserRegistry(store, out)` holds the loaded accounts
  (`load`, `find`, `login`, `register`, `remove`).
- `tododesk.todolist.TodoList(store, user_name, out)` is one user's list
  (`add`, `delete`, `edit`, `undo`, `redo`, `view`, `tasks_on`, and a
  `*_command` method for each session command). With `store=None` it keeps
  changes in memory only.
- `tododesk.calendar_mode.CalendarMode(todo, out)` is calendar mode.
- `tododesk.cli.App(registry, stdin, stdout, read_password)` runs the menus
  and sessions over any text streams; `tododesk.cli.main(argv)` is the
  command.
- `tododesk.dates` has `is_leap`, `days_in_month` and `is_valid_date`.

## What it does not do

- Undo and redo history lives only for the current run; it is not saved to
  the data file.
- The data file is not locked, so two programs using the same file at once
  can overwrite each other's changes.
- There are no due-time reminders or notifications; dates only order and
  group tasks.