import logging
import pytest
from pathlib import Path
from notgpt.adapters.textfile.task_repo import TextFileTaskRepository
from notgpt.domain.task import new_todo, new_deadline
from notgpt.domain.errors import TaskIndexError, StorageError


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / "data" / "data.txt"


@pytest.fixture
def tmp_repo(data_file):
    """Repozytorium na świeżym tymczasowym pliku."""
    return TextFileTaskRepository(data_file)


def test_missing_file_is_created_empty(tmp_repo, data_file):
    assert data_file.exists()
    assert data_file.read_text(encoding="utf-8") == ""
    assert tmp_repo.created is True
    assert tmp_repo.count_all() == 0


def test_add_rewrites_whole_file(tmp_repo, data_file):
    tmp_repo.add(new_todo("A"))
    tmp_repo.add(new_deadline("B /by 2020.11.11"))

    assert data_file.read_text(encoding="utf-8") == "T | 0 | A\nD | 0 | B | 11 Nov 2020"


def test_existing_file_is_loaded_in_order(tmp_repo, data_file):
    tmp_repo.add(new_todo("A"))
    tmp_repo.add(new_todo("B"))
    tmp_repo.replace(2, tmp_repo.get(2).complete())

    reloaded = TextFileTaskRepository(data_file)

    assert reloaded.created is False
    assert reloaded.list_all() == tmp_repo.list_all()
    assert reloaded.get(2).completed is True


def test_remove_shifts_following_tasks(tmp_repo, data_file):
    for name in ("A", "B", "C"):
        tmp_repo.add(new_todo(name))

    removed = tmp_repo.remove(2)

    assert removed.description == "B"
    assert [t.description for t in tmp_repo.list_all()] == ["A", "C"]
    assert tmp_repo.get(2).description == "C"
    assert data_file.read_text(encoding="utf-8") == "T | 0 | A\nT | 0 | C"


@pytest.mark.parametrize("index", [0, 2, -1])
def test_out_of_range_index_changes_nothing(tmp_repo, data_file, index):
    tmp_repo.add(new_todo("A"))
    before = data_file.read_text(encoding="utf-8")

    with pytest.raises(TaskIndexError) as e:
        tmp_repo.remove(index)

    assert e.value.size == 1
    assert tmp_repo.count_all() == 1
    assert data_file.read_text(encoding="utf-8") == before


def test_clear_on_empty_repo_leaves_empty_file(tmp_repo, data_file):
    tmp_repo.clear()
    tmp_repo.clear()

    assert tmp_repo.count_all() == 0
    assert data_file.read_text(encoding="utf-8") == ""


def test_corrupted_lines_are_skipped_on_load(data_file, caplog):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("T | 0 | a\nnonsense\nD | 1 | b | c\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        repo = TextFileTaskRepository(data_file)

    assert [t.description for t in repo.list_all()] == ["a", "b"]
    assert "data.txt:2" in caplog.text


def test_no_swap_file_left_after_write(tmp_repo, data_file):
    tmp_repo.add(new_todo("A"))

    assert not data_file.with_suffix(".txt.swap").exists()


def test_unreadable_path_degrades_to_empty_repo(tmp_path, caplog):
    path = tmp_path / "is_a_dir"
    path.mkdir()

    with caplog.at_level(logging.ERROR):
        repo = TextFileTaskRepository(path)

    assert repo.count_all() == 0
    assert "An error occurred" in caplog.text


def test_write_failure_raises_storage_error(tmp_repo, data_file, monkeypatch):
    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("notgpt.adapters.textfile.task_repo.os.replace", boom)

    with pytest.raises(StorageError):
        tmp_repo.add(new_todo("A"))

    assert not data_file.with_suffix(".txt.swap").exists()
    assert data_file.read_text(encoding="utf-8") == ""


def test_invalid_utf8_line_is_skipped_on_load(data_file, caplog):
    data_file.parent.mkdir(parents=True)
    data_file.write_bytes(b"T | 0 | ok\nT | 0 | bad \xff\xfe\nD | 1 | z\xc3\xb3\xc5\x82w | c\n")

    with caplog.at_level(logging.WARNING):
        repo = TextFileTaskRepository(data_file)

    assert [t.description for t in repo.list_all()] == ["ok", "zółw"]
    assert "data.txt:2" in caplog.text


def test_multiline_description_survives_reload(tmp_repo, data_file):
    tmp_repo.add(new_todo("a\nb"))
    tmp_repo.add(new_todo("c"))

    reloaded = TextFileTaskRepository(data_file)

    assert [t.description for t in reloaded.list_all()] == ["a\nb", "c"]
