import io
from datetime import date

import pytest

from tododesk.calendar_mode import CalendarMode
from tododesk.todolist import TodoList


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def todo():
    return TodoList(None, "alice", out=io.StringIO())


@pytest.fixture
def cal(todo, out):
    return CalendarMode(todo, out)


def _select(cal, year, month, day=None):
    cal.set_year([str(year)])
    cal.set_month([str(month)])
    if day is not None:
        cal.set_day([str(day)])


def test_prompt_without_selection(cal):
    assert cal.prompt() == "calendar > "


def test_prompt_shows_selection(cal):
    _select(cal, 2024, 3, 5)
    assert cal.prompt() == "calendar 2024/03/05 > "


def test_set_year_valid(cal, out):
    assert cal.set_year(["2024"]) is True
    assert cal.year == 2024
    assert "Set year: 2024" in out.getvalue()


@pytest.mark.parametrize("value", ["999", "abc", "-5", "2000000000"])
def test_set_year_invalid(cal, out, value):
    assert cal.set_year([value]) is False
    assert cal.year == 0
    assert "Invalid year" in out.getvalue()


def test_set_year_argument_count(cal, out):
    assert cal.set_year([]) is False
    assert "year: too few arguments..." in out.getvalue()
    assert cal.set_year(["2024", "2025"]) is False
    assert "year: too many arguments..." in out.getvalue()


def test_set_year_clears_month_and_day(cal):
    _select(cal, 2024, 3, 5)
    cal.set_year(["2025"])
    assert (cal.year, cal.month, cal.day) == (2025, 0, 0)


def test_set_month_without_year_warns_but_sets(cal, out):
    assert cal.set_month(["4"]) is True
    assert cal.month == 4
    assert "Please Set Year First !!!" in out.getvalue()


def test_set_month_out_of_range(cal, out):
    cal.set_year(["2024"])
    assert cal.set_month(["13"]) is False
    assert cal.month == 0
    assert "Invalid month" in out.getvalue()


def test_set_day_requires_month(cal, out):
    cal.set_year(["2024"])
    assert cal.set_day(["3"]) is False
    assert "Please Set Month First !!!" in out.getvalue()


def test_set_day_requires_year(cal, out):
    assert cal.set_day(["3"]) is False
    assert "Please Set Year First !!!" in out.getvalue()


@pytest.mark.parametrize(
    "year, month, day, ok",
    [(2024, 2, 29, True), (2023, 2, 29, False), (2024, 4, 31, False), (2024, 1, 31, True)],
)
def test_set_day_respects_month_length(cal, year, month, day, ok):
    _select(cal, year, month)
    assert cal.set_day([str(day)]) is ok
    assert cal.day == (day if ok else 0)


def test_manage_requires_full_date(cal, out, todo):
    _select(cal, 2024, 3)
    assert cal.manage(["-add", "gym"]) is False
    assert len(todo) == 0
    assert "Plase set both Year, Month, and Day" in out.getvalue()


def test_manage_add_edit_done_delete(cal, todo, out):
    _select(cal, 2024, 3, 5)
    assert cal.manage(["-add", "gym"]) is True
    assert todo.contains("gym", "2024/03/05")
    assert cal.manage(["-e", "gym", "swim"]) is True
    assert todo.contains("swim", "2024/03/05")
    assert not todo.contains("gym", "2024/03/05")
    assert cal.manage(["-done", "swim"]) is True
    assert [t.completed for t in todo.tasks_on("2024/03/05")] == [True]
    assert cal.manage(["-undone", "swim"]) is True
    assert [t.completed for t in todo.tasks_on("2024/03/05")] == [False]
    assert cal.manage(["-del", "swim"]) is True
    assert len(todo) == 0


def test_manage_edit_missing_task_fails(cal, todo):
    _select(cal, 2024, 3, 5)
    assert cal.manage(["-e", "ghost", "other"]) is False
    assert len(todo) == 0


def test_manage_argument_errors(cal, out, todo):
    _select(cal, 2024, 3, 5)
    assert cal.manage([]) is False
    assert cal.manage(["-add"]) is False
    assert cal.manage(["-add", "-x"]) is False
    assert "mt: option requires an argument -- 'a" in out.getvalue()
    assert cal.manage(["-add", "a", "b"]) is False
    assert "mt: too many arguments" in out.getvalue()
    assert cal.manage(["-bogus", "a"]) is False
    assert "mt: invalid option -- 'bogus'" in out.getvalue()
    assert len(todo) == 0


def test_day_view_empty(cal):
    _select(cal, 2024, 3, 5)
    assert "No Task Yet" in cal.day_view()


def test_day_view_lists_tasks_with_marks(cal, todo):
    _select(cal, 2024, 3, 5)
    todo.add("read", "2024/03/05", "none", False)
    todo.add("gym", "2024/03/05", "none", True)
    text = cal.day_view()
    assert "gym(x)" in text
    assert "read( )" in text
    assert text.index("gym") < text.index("read")
    assert "No Task Yet" not in text


def test_month_view_lists_every_day(cal):
    _select(cal, 2024, 2)
    text = cal.month_view()
    assert "02/29" in text
    assert "02/30" not in text
    assert text.startswith("Year: 2024\n")


def test_month_view_first_day_column(cal):
    _select(cal, 2024, 3)
    text = cal.month_view()
    line = next(ln for ln in text.splitlines() if "03/01" in ln)
    column = (date(2024, 3, 1).weekday() + 1) % 7
    assert line.index("03/01") == 1 + 22 * column + 8


def test_month_view_overflow_marker(cal, todo):
    _select(cal, 2024, 3)
    for name in ["a", "b", "c", "d", "e", "f"]:
        todo.add(name, "2024/03/05", "none", False)
    assert "..." not in cal.month_view()
    todo.add("g", "2024/03/05", "none", False)
    text = cal.month_view()
    assert "..." in text
    assert "g( )" not in text


def test_handle_unknown_command(cal, out):
    assert cal.handle(["bogus"]) is True
    assert "No Such Command !!!" in out.getvalue()


def test_handle_quit_and_empty(cal):
    assert cal.handle([]) is True
    assert cal.handle(["quit"]) is False


def test_run_stops_at_quit(cal, out):
    cal.run(["year 2024", "month 3", "quit", "year 2030"])
    assert cal.year == 2024
    assert cal.month == 3
    assert "calendar 2024 > " in out.getvalue()