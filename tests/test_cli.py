import io

from minishell.cli import main
from minishell.debug import format_token_list
from minishell.lexer import tokenize


def run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main([])
    return status, capsys.readouterr().out


def test_immediate_end_of_input(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, "")
    assert status == 0
    assert out == "minishell> exit\n"


def test_line_is_tokenized_and_printed(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, "ls | wc\n")
    assert status == 0
    assert out.startswith("minishell> ")
    assert format_token_list(tokenize("ls | wc")) in out
    assert out.endswith("minishell> exit\n")


def test_empty_line_is_skipped(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "\n")
    assert out == "minishell> minishell> exit\n"


def test_unclosed_quote_reports_error(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, "echo 'oops\n")
    assert status == 0
    assert "minishell: syntax error: unclosed quote\n" in out
    assert "Token 0" not in out


def test_several_lines_each_printed(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "echo a\ncat < f\n")
    assert format_token_list(tokenize("echo a")) in out
    assert format_token_list(tokenize("cat < f")) in out
    assert out.count("minishell> ") == 3