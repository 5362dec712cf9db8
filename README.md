# minishell

The core pieces of a small POSIX-style shell, in plain Python with no
third-party dependencies: a token model, quote removal and variable
expansion, an environment, the classic builtins, and redirections for
`<`, `>` and `>>`.

## Modules

- **`minishell.tokens`**: `TokenType` (`WORD`, `COMMAND`, `PIPE`,
  `REDIR_IN`, `REDIR_OUT`, `APPEND`, `HEREDOC`, `UNKNOWN`) and the `Token`
  dataclass. `replace_token_with_multiple(tokens, index, parts)` returns a
  new list in which one token is replaced by `UNKNOWN` tokens for each part.
- **`minishell.expand`**: `expand_token_value(text, state)` removes quotes
  and expands `$NAME` (from the process environment) and `$?` (the last
  status); single quotes keep their contents literal, double quotes still
  expand. `is_quoted(text)` tells whether a value starts and ends with the
  same quote. `expand(tokens, state)` expands every token; an unquoted token
  whose value expands to several space-separated words is split into
  several tokens, and the resulting list is returned.
- **`minishell.environment`**: `Environment` holds the shell's variables
  in order as `NAME=value` entries or bare `NAME` entries, with `add`,
  `remove`, `exists`, `update`, `exported_lines` (the `declare -x` form)
  and `visible_lines` (entries with a value). `ShellState` carries the
  environment and `last_status`. `valid_identifier` checks variable names.
- **`minishell.builtins`**: `handle_echo` (with `-n`), `handle_cd`,
  `handle_pwd`, `handle_export`, `handle_unset`, `handle_env` and
  `handle_exit`. Each writes to the stream given as `out` (standard output
  by default). `is_builtin(name)` tells whether a name is one of `echo`,
  `cd`, `pwd`, `export`, `unset`, `env`, `exit`, and `run_builtin(argv,
  state, out)` dispatches to it. `handle_exit` raises `ShellExit`, whose
  `status` is the status the shell should end with. `is_numeric` checks an
  optionally signed run of digits.
- **`minishell.command`**: `tokens_to_argv` collects the leading command
  and word tokens. `parse_tokens_to_command` builds a `Command` (`argv`,
  `infile`, `outfile`) from the tokens before the first pipe, opening the
  files named after `<`, `>` and `>>`. `execute_redirection(command, state)`
  runs a builtin with standard input and output pointed at those files and
  then closes them; `Command` is also a context manager whose `close`
  releases its descriptors. `execute_command` runs the leading words when
  they name a builtin.
- **`minishell.shell`**: `copy_env` builds an `Environment` from
  `NAME=value` strings or a mapping such as `os.environ`. `get_input(state,
  reader)` reads one line at the `$ ` prompt; at end of input it prints
  `exit` and raises `ShellExit` with the last status.
- **`minishell.libft`**: helpers in `chars` (ASCII classes and case),
  `text` (search, comparison, bounded copy, `strtok`, `path_join`),
  `convert` (`atoi`, `itoa`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`), `memory` (operations on `bytearray` buffers) and
  `output` (writing to file descriptors).

## Examples

```python
import io

from minishell.builtins import is_builtin, run_builtin
from minishell.environment import ShellState, valid_identifier
from minishell.libft.convert import atoi, itoa, split
from minishell.shell import copy_env

is_builtin("echo")          # True
is_builtin("ls")            # False

valid_identifier("_PATH2")  # True
valid_identifier("2PATH")   # False

atoi("   +1234abc")         # 1234
itoa(-34695)                # "-34695"
split("  hello  world ", " ")  # ["hello", "world"]

state = ShellState(env=copy_env(["HOME=/home/user"]))
out = io.StringIO()
run_builtin(["export", "GREETING=hi"], state, out)
run_builtin(["env"], state, out)
out.getvalue()              # "HOME=/home/user\nGREETING=hi\n"
```

## Exit statuses

Builtins set `state.last_status`: `0` on success, `1` for an invalid
identifier, a failed `cd` or `exit` with too many arguments, and `2` when
`env` is given arguments. `exit` with a non-numeric argument raises
`ShellExit(255)`; with a number it uses that number modulo 256; with no
argument it uses the last status.

## What it does not do

This package is a library, not a runnable shell. It has no command to
start, no read-evaluate loop that ties the pieces together, and no
splitting of a raw command line into tokens or classification of tokens
into commands, words and operators: callers build the `Token` list
themselves. It does not install signal handlers for the prompt, does not
run external programs, and does not carry out pipes or here-documents;
only builtins are executed.

## Tests

The test suite uses pytest and lives in `tests/`; install the `test`
extra to get it.