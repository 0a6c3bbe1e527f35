from tetris_highscore import read_highscore, write_highscore


def test_round_trip(tmp_path):
    path = tmp_path / "highscore.txt"
    assert write_highscore(path, 4200) is True
    assert path.read_text() == "highscore: 4200"
    assert read_highscore(path) == 4200


def test_missing_file_is_zero(tmp_path):
    assert read_highscore(tmp_path / "nope.txt") == 0


def test_garbage_is_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("score=12\n")
    assert read_highscore(path) == 0


def test_unreadable_path_is_zero(tmp_path):
    assert read_highscore(tmp_path) == 0


def test_unwritable_path_is_skipped(tmp_path):
    assert write_highscore(tmp_path, 10) is False
    assert write_highscore(tmp_path / "missing" / "highscore.txt", 10) is False


def test_undecodable_bytes_are_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_bytes(b"highscore: \xff\xfe 12")
    assert read_highscore(path) == 0


def test_oversized_number_is_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("highscore: " + "9" * 5000)
    assert read_highscore(path) == 0
