import pytest

from minishell.filelist import FileEntry, FileList


@pytest.fixture
def files():
    fl = FileList()
    fl.insert(3, 0)
    fl.insert(4, 1)
    fl.insert(7, 2)
    return fl


def test_empty_list():
    fl = FileList()
    assert fl.is_empty()
    assert fl.first() is None
    assert fl.last() is None
    assert len(fl) == 0


def test_insert_and_positions(files):
    assert len(files) == 3
    assert files.first() == 0
    assert files.last() == len(files) - 1
    assert files.get(1) == FileEntry(4, 1)


def test_insert_returns_true():
    assert FileList().insert(5, 0) is True


def test_find(files):
    assert files.find(7) == 2
    assert files.get(files.find(3)).mode == 0
    assert files.find(99) is None


def test_remove_shifts_entries(files):
    files.remove(4)
    assert [e.fd for e in files] == [3, 7]
    assert files.find(7) == 1


def test_remove_missing_raises(files):
    with pytest.raises(KeyError):
        files.remove(99)
    assert len(files) == 3


def test_get_out_of_range(files):
    with pytest.raises(IndexError):
        files.get(3)
    with pytest.raises(IndexError):
        files.get(-1)


def test_grows_past_initial_capacity():
    fl = FileList()
    for fd in range(50):
        fl.insert(fd, fd % 3)
    assert len(fl) == 50
    assert fl.get(fl.last()).fd == 49


def test_clear(files):
    files.clear()
    assert files.is_empty()
    assert list(files) == []