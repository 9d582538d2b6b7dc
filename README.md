# minishell

The front end of a small POSIX-style shell: it splits a command line into
tokens, parses them into a pipeline of commands with redirections, expands
`$` variables and removes quotes, and keeps the shell's variables together
with a separate table of exported names. It also provides the `export` and
`unset` built-ins that work on that table.

## Installation

```
pip install .
```

## Modules

### `minishell.lexer`

- `tokenize(text)` returns the list of `Token`s of a line, without the final
  end-of-input token.
- `Tokenizer(text)` yields tokens one at a time with `next_token()` or by
  iteration.
- `Token` has a `type` (a `TokenType`: `WORD`, `PIPE`, `REDIR_IN`,
  `REDIR_OUT`, `REDIR_APPEND`, `HEREDOC`, `EOF`, `ERROR`) and a `value`.
- Quote characters are kept in word tokens. A word with an unclosed quote
  gives an `ERROR` token.
- `is_space(char)` and `is_special_char(char)` classify single characters.

### `minishell.environment`

- `VariableList` is an ordered `key -> value` table with `get`, `set`,
  `unset`, `items`, `in`, `len` and iteration. New keys come first; a value
  may be `None` for a name that is declared without a value.
- `Environment` holds `variables` and `exports`, both `VariableList`s.
  `Environment.from_environ(environ)` builds one from a mapping or from
  `KEY=VALUE` strings (strings without `=` are skipped) and exports every
  variable. `lookup(name)` gives the value used for `$name`, falling back to
  the exported value; `to_envp()` returns `KEY=VALUE` strings for the
  variables that have a value.

### `minishell.expander`

- `expand_with_quotes(text, env, exit_status)` removes quotes and expands
  `$NAME`, `$?` (the given exit status) and `$$` (the process id) everywhere
  except inside single quotes. Unknown names expand to an empty string; a
  `$` not followed by a name, `?` or `$` stays as it is.
- `expand_variables(text, env, exit_status)` expands `$` references and
  leaves quotes in place.
- `split_words(text)` splits on spaces and tabs; `is_name_char(char)` tells
  whether a character may appear in a variable name.

### `minishell.parser`

- `parse(tokens, env, exit_status)` returns a list of `Command`s, one per
  pipeline stage. Each has `argv`, `redirs` (a list of `Redirection`s with
  `filename`, `type` as a `RedirType` and `no_expand`), `parse_error` and
  `heredoc`.
- Words and redirection targets are expanded with `expand_with_quotes`. A
  heredoc delimiter in quotes has them stripped and gets `no_expand=True`.
- A leading word that expands, unquoted, to nothing is dropped, and an
  unquoted `$` word whose expansion contains blanks is left out of `argv`.
- Stray pipes and redirections without a target print bash-style syntax
  error messages.

### `minishell.builtins`

- `builtin_export(argv, env)` with no names prints the export table as
  `declare -x` lines (also available as `format_exports(env)`). With
  arguments, `NAME=value` sets both the variable and the export, `NAME`
  alone declares an export without a value, and names that do not start
  with a letter or `_` are reported as not valid identifiers. A non-empty
  value also takes in the following arguments that hold no `=`, joined with
  single spaces.
- `builtin_unset(argv, env)` removes each name from the variables and the
  exports, and complains when no name is given.

Both return the exit status `0`.

## Example

```python
from minishell.environment import Environment
from minishell.lexer import tokenize
from minishell.parser import parse

env = Environment.from_environ({"USER": "demo"})
commands = parse(tokenize("echo $USER > out.txt | wc -c"), env, 0)
print(commands[0].argv)    # ['echo', 'demo']
print(commands[0].redirs)  # [Redirection(filename='out.txt', type=<RedirType.OUT: 2>, no_expand=False)]
print(commands[1].argv)    # ['wc', '-c']
```

## What this package does not do

There is no interactive prompt and no command to start. Parsed commands are
not run: the package does not look programs up on `PATH`, start processes,
connect pipes, open redirection files, read heredoc bodies or handle
signals. The built-ins other than `export` and `unset` (`echo`, `cd`,
`pwd`, `exit`, `env`) are not provided.

## Running the tests

```
pip install .[test]
pytest
```