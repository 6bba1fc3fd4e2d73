from menucli.history import FileHistoryStorage, VolatileHistoryStorage


def test_volatile_round_trip():
    storage = VolatileHistoryStorage()
    storage.store(["one", "two"])
    storage.store(["three"])
    assert storage.commands() == ["one", "two", "three"]


def test_volatile_keeps_newest_within_size():
    storage = VolatileHistoryStorage(size=3)
    storage.store(["a", "b"])
    storage.store(["c", "d", "e"])
    assert storage.commands() == ["c", "d", "e"]


def test_volatile_zero_size_keeps_nothing():
    storage = VolatileHistoryStorage(size=0)
    storage.store(["a"])
    assert storage.commands() == []


def test_volatile_clear():
    storage = VolatileHistoryStorage()
    storage.store(["a", "b"])
    storage.clear()
    assert storage.commands() == []


def test_volatile_commands_returns_copy():
    storage = VolatileHistoryStorage()
    storage.store(["a"])
    storage.commands().append("b")
    assert storage.commands() == ["a"]


def test_file_missing_gives_empty_history(tmp_path):
    storage = FileHistoryStorage(tmp_path / "missing.txt")
    assert storage.commands() == []


def test_file_round_trip(tmp_path):
    path = tmp_path / "history.txt"
    storage = FileHistoryStorage(path)
    storage.store(["help", "sub hello"])
    assert storage.commands() == ["help", "sub hello"]
    assert path.read_text(encoding="utf-8") == "help\nsub hello\n"


def test_file_history_survives_new_instance(tmp_path):
    path = tmp_path / "history.txt"
    FileHistoryStorage(path).store(["a", "b"])
    FileHistoryStorage(path).store(["c"])
    assert FileHistoryStorage(path).commands() == ["a", "b", "c"]


def test_file_trims_to_size(tmp_path):
    storage = FileHistoryStorage(tmp_path / "history.txt", size=2)
    storage.store(["a", "b"])
    storage.store(["c"])
    assert storage.commands() == ["b", "c"]


def test_file_keeps_empty_lines(tmp_path):
    storage = FileHistoryStorage(tmp_path / "history.txt")
    storage.store(["a", "", "b"])
    assert storage.commands() == ["a", "", "b"]


def test_file_clear(tmp_path):
    path = tmp_path / "history.txt"
    storage = FileHistoryStorage(path)
    storage.store(["a"])
    storage.clear()
    assert storage.commands() == []
    assert path.read_text(encoding="utf-8") == ""


def test_file_reads_last_line_without_newline(tmp_path):
    path = tmp_path / "history.txt"
    path.write_text("a\nb", encoding="utf-8")
    assert FileHistoryStorage(path).commands() == ["a", "b"]