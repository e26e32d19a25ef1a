import pytest
from notgpt.adapters.textfile.task_repo import TextFileTaskRepository
from notgpt.services.task_service import TaskService
from notgpt.services.number_command import execute

NOT_A_NUMBER = "sorry bud that ain't a number\ni don't know which task u're referring to..."


@pytest.fixture
def storage(tmp_path):
    service = TaskService(TextFileTaskRepository(tmp_path / "data" / "data.txt"))
    service.clear()
    service.todo("Task 1")
    service.todo("Task 3")
    return service


def test_mark_valid_task(storage):
    result = execute(storage, "1", "mark")
    assert result == "marked 1 as completed\nuse \"list\" to see changes"


def test_unmark_valid_task(storage):
    execute(storage, "1", "mark")

    result = execute(storage, "1", "unmark")

    assert result == "marked 1 as uncompleted\nuse \"list\" to see changes"


def test_delete_valid_task(storage):
    result = execute(storage, "1", "delete")

    assert result == "deleted 1\nuse \"list\" to see changes"
    assert storage.size() == 1


def test_invalid_number(storage):
    result = execute(storage, "10", "mark")
    assert result == "that number isn't a valid task dude...\nit has to be from 1 to 2"


def test_non_numeric_input(storage):
    result = execute(storage, "abc", "mark")
    assert result == NOT_A_NUMBER


@pytest.mark.parametrize("text", ["", "1.5", "one", "1 2", "1_0", "\u0661"])
def test_other_non_numeric_inputs(storage, text):
    assert execute(storage, text, "delete") == NOT_A_NUMBER
    assert storage.size() == 2


@pytest.mark.parametrize("text", ["0", "-1", "3"])
@pytest.mark.parametrize("operation", ["mark", "unmark", "delete"])
def test_out_of_range_leaves_list_unchanged(storage, text, operation):
    before = storage.list_all()

    result = execute(storage, text, operation)

    assert result == "that number isn't a valid task dude...\nit has to be from 1 to 2"
    assert storage.list_all() == before


def test_surrounding_whitespace_is_accepted(storage):
    assert execute(storage, " 2 ", "mark") == "marked 2 as completed\nuse \"list\" to see changes"


def test_mark_is_persisted(storage, tmp_path):
    execute(storage, "1", "mark")

    assert (tmp_path / "data" / "data.txt").read_text(encoding="utf-8") == "T | 1 | Task 1\nT | 0 | Task 3"


def test_unknown_operation_is_a_programming_error(storage):
    with pytest.raises(ValueError):
        execute(storage, "1", "archive")


def test_end_to_end_scenario(tmp_path):
    storage = TaskService(TextFileTaskRepository(tmp_path / "data.txt"))
    storage.todo("Task 1")
    storage.todo("Task 3")
    assert storage.size() == 2

    assert execute(storage, "1", "mark") == "marked 1 as completed\nuse \"list\" to see changes"
    assert execute(storage, "1", "unmark") == "marked 1 as uncompleted\nuse \"list\" to see changes"
    assert execute(storage, "1", "delete") == "deleted 1\nuse \"list\" to see changes"
    assert storage.size() == 1
    assert execute(storage, "10", "mark") == "that number isn't a valid task dude...\nit has to be from 1 to 1"
    assert execute(storage, "abc", "mark") == NOT_A_NUMBER

    reloaded = TaskService(TextFileTaskRepository(tmp_path / "data.txt"))
    assert reloaded.list_all() == "1. [T][ ] Task 3"


def test_save_failure_is_reported_as_message(storage, monkeypatch):
    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("notgpt.adapters.textfile.task_repo.os.replace", boom)

    result = execute(storage, "1", "mark")

    assert result == "something went wrong: disk full"
