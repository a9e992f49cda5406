import io
from pathlib import Path

import pytest

from apps.cli import play as play_cli
from apps.cli import check_words


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    p = tmp_path / "words"
    p.write_text("ariel greed elite truly kelly crane raise stare\n", encoding="utf-8")
    return p


def _run(monkeypatch, capsys, argv, stdin_text, seed=None):
    if seed is None:
        monkeypatch.delenv("SEED", raising=False)
    else:
        monkeypatch.setenv("SEED", seed)
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    code = play_cli.main(argv)
    return code, capsys.readouterr().out


def test_play_win_exits_zero(monkeypatch, capsys, words_file):
    code, out = _run(monkeypatch, capsys, ["--words", str(words_file), "--style", "plain"],
                     "zzzzz\nabc\nelite\ngreed\n", seed="greed")
    assert code == play_cli.EXIT_WON
    assert "Word not in dictionary: ZZZZZ" in out
    assert "5 letters" in out
    assert "(E) L  I  T (E)" in out
    assert "Enter your guess [2/6]" in out
    assert "Congratulations you won!" in out


def test_play_loss_exits_one(monkeypatch, capsys, words_file):
    guesses = "kelly\ncrane\nraise\nstare\nelite\nariel\n"
    code, out = _run(monkeypatch, capsys, ["--words", str(words_file), "--style", "plain"],
                     guesses, seed="TRULY")
    assert code == play_cli.EXIT_LOST
    assert "The word is TRULY." in out


def test_play_eof_before_end(monkeypatch, capsys, words_file):
    code, out = _run(monkeypatch, capsys, ["--words", str(words_file), "--style", "plain"],
                     "crane\n", seed="ariel")
    assert code == play_cli.EXIT_EOF
    assert "Enter your guess [2/6]" in out


def test_play_setup_errors(monkeypatch, capsys, words_file, tmp_path):
    code, _ = _run(monkeypatch, capsys, ["--words", str(tmp_path / "missing")], "")
    assert code == play_cli.EXIT_SETUP

    code, _ = _run(monkeypatch, capsys, ["--words", str(words_file)], "", seed="zzzzz")
    assert code == play_cli.EXIT_SETUP


def test_check_words(capsys, words_file):
    assert check_words.main([str(words_file)]) == 0
    assert "kept=8" in capsys.readouterr().out


def test_check_words_on_directory_fails_cleanly(capsys, tmp_path):
    assert check_words.main([str(tmp_path)]) == 1
    assert "FAIL" in capsys.readouterr().out
