import io

import pytest

from wumpus.prompt import prompt_user, read_choice


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_prompt_user_shows_message_and_trims(monkeypatch, capsys):
    feed(monkeypatch, "  hello  \n")
    assert prompt_user("Action: ") == "hello"
    assert capsys.readouterr().out == "Action: "


def test_prompt_user_skips_blank_lines(monkeypatch, capsys):
    feed(monkeypatch, "\n   \n\t\nN\n")
    assert prompt_user("Action: ") == "N"
    assert capsys.readouterr().out.count("Action: ") == 1


def test_prompt_user_raises_at_end_of_input(monkeypatch):
    feed(monkeypatch, "\n  \n")
    with pytest.raises(EOFError):
        prompt_user("Action: ")


def test_read_choice_reads_single_characters(monkeypatch):
    feed(monkeypatch, "  tN\n")
    assert read_choice() == "t"
    assert read_choice() == "N"


def test_read_choice_skips_blank_lines(monkeypatch):
    feed(monkeypatch, "\n\n   c\n")
    assert read_choice() == "c"


def test_read_choice_raises_at_end_of_input(monkeypatch):
    feed(monkeypatch, "   \n")
    with pytest.raises(EOFError):
        read_choice()


def test_prompt_after_choice_reads_next_line(monkeypatch, capsys):
    feed(monkeypatch, "t\nabc\n")
    assert read_choice() == "t"
    assert prompt_user("> ") == "abc"


def test_prompt_after_choice_gets_rest_of_line(monkeypatch, capsys):
    feed(monkeypatch, "t rest \n")
    assert read_choice() == "t"
    assert prompt_user("> ") == "rest"


def test_new_stream_discards_leftovers(monkeypatch):
    feed(monkeypatch, "xyz\n")
    assert read_choice() == "x"
    feed(monkeypatch, "q\n")
    assert read_choice() == "q"