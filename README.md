# minishell

The front half of a small command shell, as a Python library: it splits a
command line into classified tokens, checks the syntax, expands variables and
quotes, keeps the shell's environment table, looks commands up on `PATH`, and
provides the `echo`, `env`, `pwd` and `exit` builtins.

## Installing

```
pip install .
```

## Modules

- `minishell.tokens` — `TokenType` (`TEXT`, `SINGLE_LESS`, `SINGLE_GREAT`,
  `DOUBLE_LESS`, `DOUBLE_GREAT`, `PIPE`), the `Token` dataclass with
  `is_redirection()`, `match_metachar(text)` and `classify(content)`.
- `minishell.lexer` — `tokenize(line)` splits a line into `Token`s. Words end
  at a space or before one of `>>`, `<<`, `<`, `>`, `|`; quoted runs are kept
  whole (quotes included). `split_words`, `token_length` and `quote_length`
  are the pieces it is built from.
- `minishell.syntax` — `check_syntax(tokens, state, read_line)` reports a
  leading pipe, a doubled pipe or a redirection without a following word on
  standard error (status 2 or 258) and keeps only the heredocs before the
  error. A trailing `|` calls `read_line("> ")` until a non-blank line is
  given, and that line is appended to the tokens and to `state.cmd`.
- `minishell.expander` — `expand_word(word, state)` removes quotes and
  expands `$NAME`, `$?` (`state.exec_output`), `$$` (`state.exit_status`) and
  `~` (`HOME`); nothing is expanded inside single quotes. `expand(tokens,
  state)` applies this to a token list and drops words that expand to nothing.
- `minishell.environment` — `Environment`, an ordered table of `EnvVar`s
  with `add`, `get`, `update`, `delete`, `to_envp`, membership and iteration;
  `env_name(entry)` and `is_valid_identifier(arg)`.
- `minishell.pathsearch` — `resolve_command(name, env)` returns the first
  existing `dir/name` from `PATH`, or `name` unchanged.
- `minishell.builtin_basic` — `run_echo` (with `-n`), `run_env`, `run_pwd`
  and `run_exit`, plus `parse_int` and `is_all_numeric`. `run_exit` raises
  `minishell.state.ShellExit` with the status modulo 256; with more than one
  argument it prints an error, sets status 1 and returns.
- `minishell.state` — `ShellState` (environment, statuses, current line and
  tokens), `ShellExit`, and `install_signal_handlers(state)`, which routes
  SIGINT to `state.handle_interrupt` (status 130) and ignores SIGQUIT.
- `minishell.errors` — `print_error(*parts)` writes to standard error.

## Example

```python
import sys

from minishell.environment import Environment
from minishell.expander import expand
from minishell.lexer import tokenize
from minishell.state import ShellState
from minishell.syntax import check_syntax

state = ShellState(env=Environment(["HOME=/home/user", "NAME=world"]))
state.cmd = 'echo "hello $NAME" \'$NAME\''

tokens = check_syntax(tokenize(state.cmd), state, input)
words = [token.content for token in expand(tokens, state)]
print(words)  # ['echo', 'hello world', '$NAME']
```

## What it does not do

There is no interactive command and no way to run a line end to end: the
package does not build command tables from tokens, open files for `<`, `>`
and `>>`, read here-documents, start external programs or connect pipelines.
The `cd`, `export` and `unset` builtins are not included.

## Tests

```
pip install .[test]
pytest
```