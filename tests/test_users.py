import io

import pytest

from tododesk.store import StoreError, UserStore
from tododesk.task import Task
from tododesk.users import UserRegistry


@pytest.fixture
def store(tmp_path):
    return UserStore(tmp_path / "user_data.txt")


@pytest.fixture
def out():
    return io.StringIO()


def test_register_then_login(store, out):
    registry = UserRegistry(store, out)
    password = "password"
    assert registry.register("alice", password) is True
    assert registry.login("alice", password) is True
    assert registry.login("alice", "secret") is False
    assert registry.login("bob", password) is False


def test_register_duplicate_rejected(store, out):
    registry = UserRegistry(store, out)
    assert registry.register("alice", "password")
    assert registry.register("alice", "secret") is False
    assert len(registry) == 1


def test_find_unknown_returns_none(store, out):
    registry = UserRegistry(store, out)
    assert registry.find("nobody") is None


def test_load_reads_users_and_tasks(store, out):
    store.create("alice", "password")
    store.append_task("alice", Task("milk", "2025/04/20", "home", True))
    registry = UserRegistry(store, out)
    assert registry.load() == 1
    assert "alice" in registry
    tasks = list(registry.find("alice"))
    assert tasks == [Task("milk", "2025/04/20", "home", True)]
    assert registry.login("alice", "password")


def test_load_does_not_duplicate_stored_tasks(store, out):
    store.create("alice", "password")
    store.append_task("alice", Task("milk", "2025/04/20", "home", False))
    UserRegistry(store, out).load()
    _, tasks = store.load()["alice"]
    assert len(tasks) == 1


def test_load_missing_file_raises(store, out):
    with pytest.raises(StoreError):
        UserRegistry(store, out).load()


def test_task_added_after_load_is_persisted(store, out):
    store.create("alice", "password")
    registry = UserRegistry(store, out)
    registry.load()
    registry.find("alice").add("milk", "2025/04/20", "home", False, record=True)
    _, tasks = store.load()["alice"]
    assert [t.name for t in tasks] == ["milk"]


def test_remove_with_wrong_password(store, out):
    registry = UserRegistry(store, out)
    registry.register("alice", "password")
    assert registry.remove("alice", "secret") is False
    assert "Incorrect Username or Password !!!" in out.getvalue()
    assert registry.find("alice") is not None


def test_remove_with_right_password(store, out):
    registry = UserRegistry(store, out)
    registry.register("alice", "password")
    assert registry.remove("alice", "password") is True
    assert registry.find("alice") is None
    assert store.exists("alice") is False