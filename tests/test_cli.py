import pytest

import wordle_play
from conftest import WORDS


@pytest.fixture
def data_files(tmp_path):
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("".join(f"{w} {c}\n" for w, c in WORDS.items()), encoding="ascii")
    answers = tmp_path / "answers.txt"
    answers.write_text("light cigar sissy night\n", encoding="ascii")
    return dictionary, answers


def test_run_all_mode(data_files, capsys):
    dictionary, answers = data_files
    wordle_play.main(
        ["-strategy", "memoized", "-rounds", "3", "-skip", "1",
         "-dictionary", str(dictionary), "-answers", str(answers)]
    )
    out = capsys.readouterr().out
    assert "The answer is 'CIGAR'" in out
    assert "The answer is 'NIGHT'" in out
    assert "LIGHT" not in out
    assert "Games" in out


def test_interactive_mode(data_files, monkeypatch):
    dictionary, _ = data_files
    sessions = []
    monkeypatch.setattr(wordle_play, "run_session", sessions.append)
    wordle_play.main(["-interactive", "-dictionary", str(dictionary)])
    assert len(sessions) == 1
    assert sessions[0].name == "interactive"


def test_bad_dictionary_exits(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("tares ten\n", encoding="ascii")
    with pytest.raises(SystemExit, match="line 1"):
        wordle_play.main(["-dictionary", str(path)])


def test_answers_outside_dictionary_exit(data_files, tmp_path):
    dictionary, _ = data_files
    answers = tmp_path / "bad_answers.txt"
    answers.write_text("zebra", encoding="ascii")
    with pytest.raises(SystemExit, match="zebra"):
        wordle_play.main(["-dictionary", str(dictionary), "-answers", str(answers)])
