import pytest

from dailykit.word_counter import count_characters, count_lines, count_words, main


def test_empty_content():
    assert count_words("") == 0
    assert count_lines("") == 0
    assert count_characters("") == 0


@pytest.mark.parametrize(
    "words", [["one"], ["alpha", "beta", "gamma"], ["a", "b", "c", "d", "e"]]
)
def test_word_count_matches_joined_words(words):
    assert count_words(" ".join(words)) == len(words)
    assert count_words("\t\n ".join(words) + "\n") == len(words)


@pytest.mark.parametrize("lines", [["x"], ["first", "second"], ["", "b", "", "d"]])
def test_line_count(lines):
    text = "\n".join(lines)
    assert count_lines(text) == len(lines)
    assert count_lines(text + "\n") == len(lines)
    assert count_lines(text.replace("\n", "\r\n")) == len(lines)


def test_lone_newline_is_one_line():
    assert count_lines("\n") == 1


def test_characters_ignore_whitespace():
    assert count_characters("abc") == len("abc")
    assert count_characters("a b\tc\n") == count_characters("abc")
    assert count_characters("héllo wörld") == count_characters("héllowörld")


def test_main_reports_statistics(tmp_path, capsys):
    words = ["one", "two", "three"]
    path = tmp_path / "sample.txt"
    path.write_text(" ".join(words) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"📂 Reading file: {path}" in out
    assert f"   Words: {len(words)}" in out
    assert "   Lines: 1" in out


def test_main_missing_file(tmp_path, capsys):
    main([str(tmp_path / "missing.txt")])
    out = capsys.readouterr().out
    assert "❌ Error opening file:" in out
    assert "📊 Statistics:" not in out


def test_main_usage(capsys):
    main([])
    assert "❌ Usage:" in capsys.readouterr().out