from gridsnake.highscore import FileHighScoreStore, MemoryHighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert FileHighScoreStore(tmp_path / "none.txt").load() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "highscore.txt"
    store = FileHighScoreStore(path)
    store.save(120)

    assert path.read_text(encoding="utf-8") == "120"
    assert FileHighScoreStore(path).load() == 120


def test_corrupt_file_reads_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("not a number", encoding="utf-8")
    assert FileHighScoreStore(path).load() == 0


def test_negative_value_reads_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("-40\n", encoding="utf-8")
    assert FileHighScoreStore(path).load() == 0


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = FileHighScoreStore(blocker / "highscore.txt")

    store.save(50)

    assert "Could not save high score" in caplog.text


def test_memory_store():
    store = MemoryHighScoreStore(7)
    assert store.load() == 7
    store.save(9)
    assert store.load() == 9
    assert store.saves == 1
