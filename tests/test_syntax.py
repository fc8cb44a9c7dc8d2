import pytest

from minishell.lexer import tokenize
from minishell.state import ShellState
from minishell.syntax import (
    check_syntax,
    drop_tokens_keeping_heredocs,
    is_blank,
    read_continuation,
)
from minishell.tokens import TokenType


def _reader(lines):
    prompts = []
    source = iter(lines)

    def read_line(prompt):
        prompts.append(prompt)
        return next(source)

    return read_line, prompts


def _no_input(prompt):
    raise AssertionError("no continuation expected")


def _contents(tokens):
    return [t.content for t in tokens]


@pytest.mark.parametrize("text", [None, "", "   "])
def test_is_blank_true(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", ["x", "  x  "])
def test_is_blank_false(text):
    assert is_blank(text) is False


def test_read_continuation_skips_blank_lines():
    read_line, prompts = _reader(["", "   ", "wc"])
    assert read_continuation(read_line) == "wc"
    assert prompts == ["> ", "> ", "> "]


def test_read_continuation_end_of_input():
    read_line, _ = _reader([None])
    assert read_continuation(read_line) is None


def test_read_continuation_interrupted():
    def read_line(prompt):
        raise KeyboardInterrupt

    assert read_continuation(read_line) is None


def test_drop_keeps_heredoc_before_error():
    tokens = tokenize("cat << eof | | x")
    kept = drop_tokens_keeping_heredocs(tokens, 3)
    assert _contents(kept) == ["<<", "eof"]
    assert kept[0].type == TokenType.DOUBLE_LESS


def test_drop_discards_heredoc_after_error():
    tokens = tokenize("a > << x")
    assert drop_tokens_keeping_heredocs(tokens, 1) == []


def test_drop_without_heredocs_is_empty():
    tokens = tokenize("ls | | wc")
    assert drop_tokens_keeping_heredocs(tokens, 1) == []


def test_valid_line_is_unchanged(capsys):
    state = ShellState(cmd="ls -l | wc > out")
    tokens = tokenize(state.cmd)
    result = check_syntax(tokens, state, _no_input)
    assert result == tokens
    assert state.exec_output == 0
    assert capsys.readouterr().err == ""


def test_leading_pipe(capsys):
    state = ShellState(cmd="| ls")
    result = check_syntax(tokenize(state.cmd), state, _no_input)
    assert result == []
    assert state.exec_output == 2
    assert capsys.readouterr().err == "-bash: syntax error near unexpected token '|'\n"


def test_redirection_at_end(capsys):
    state = ShellState(cmd="cat >")
    result = check_syntax(tokenize(state.cmd), state, _no_input)
    assert result == []
    assert state.exec_output == 258
    assert capsys.readouterr().err.endswith("'newline'\n")


def test_redirection_followed_by_pipe(capsys):
    state = ShellState(cmd="cat > | x")
    check_syntax(tokenize(state.cmd), state, _no_input)
    assert state.exec_output == 258
    assert "token '|'" in capsys.readouterr().err


def test_double_pipe(capsys):
    state = ShellState(cmd="ls | | wc")
    result = check_syntax(tokenize(state.cmd), state, _no_input)
    assert result == []
    assert state.exec_output == 2
    assert "token '|'" in capsys.readouterr().err


def test_heredoc_survives_error():
    state = ShellState(cmd="cat << eof | |")
    result = check_syntax(tokenize(state.cmd), state, _no_input)
    assert _contents(result) == ["<<", "eof"]
    assert state.exec_output == 2


def test_trailing_pipe_reads_continuation():
    state = ShellState(cmd="ls |")
    read_line, prompts = _reader(["  ", "wc -l"])
    result = check_syntax(tokenize(state.cmd), state, read_line)
    assert _contents(result) == ["ls", "|", "wc", "-l"]
    assert result[1].type == TokenType.PIPE
    assert state.cmd == "ls |" + " " + "wc -l"
    assert prompts == ["> ", "> "]


def test_continuation_starting_with_pipe(capsys):
    state = ShellState(cmd="ls |")
    read_line, _ = _reader(["| x"])
    result = check_syntax(tokenize(state.cmd), state, read_line)
    assert result == []
    assert state.exec_output == 2
    assert "token '|'" in capsys.readouterr().err


def test_continuation_aborted():
    state = ShellState(cmd="ls |")
    read_line, _ = _reader([None])
    assert check_syntax(tokenize(state.cmd), state, read_line) == []
    assert state.cmd == "ls |"


def test_input_list_not_modified():
    state = ShellState(cmd="ls |")
    tokens = tokenize(state.cmd)
    read_line, _ = _reader(["wc"])
    check_syntax(tokens, state, read_line)
    assert _contents(tokens) == ["ls", "|"]