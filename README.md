# minishell

A small library holding the pieces of a bash-like shell: an ordered
environment table, `$NAME` and `$?` expansion, a tokenizer that knows
about quotes, pipes and redirection operators, command and redirection
records, the `export`, `unset`, `exit`, `pwd` and `env` builtins, and
helpers for opening redirection targets. It has no dependencies outside
the standard library.

## Modules

### `minishell.env`

- `parse_entry(text)` splits `KEY=VALUE` at the first `=` and returns
  `(key, value)`, or `None` when there is no `=` or the key is empty.
- `Environment(entries)` keeps variables in insertion order, together
  with an `exit_status` attribute (starting at 0).
  - `add(token)` sets a variable from `KEY=VALUE`; an existing key keeps
    its position and takes the new value. Non-assignments are ignored
    and give `None`.
  - `find(key)` returns the value or `None`; `delete(key)` removes it if
    present.
  - `to_list()` gives `KEY=VALUE` strings in order; `len()` and
    iteration over `(key, value)` pairs are supported.

### `minishell.expand`

- `expand_env(line, env)` replaces `$NAME` and `$?` outside single
  quotes and keeps the quote characters themselves. An unset name
  expands to nothing, and so does `$` followed by a digit. A `$` not
  followed by a letter, digit, `_` or `?` is left as it is.
- `escape_pipes(value, quote)` wraps every `|` in an expanded value as
  `"|"` (inside the surrounding quote, if any) so it is not read as a
  pipe; `expand_env` applies it to every value it inserts.
- `env_value(text, env)` looks up the name at the start of `text` and
  returns the value and the length of the name; `special_value`,
  `is_env_key_char` and `is_env_delimiter` are the helpers it uses.

### `minishell.tokenizer`

- `split_tokens(line)` cuts a line into words on blanks and on `<`, `>`
  and `|`, keeps `<<` and `>>` together, and leaves quoted text whole.
- `next_token(line)` reads one token and returns it with the number of
  characters consumed.
- `Token` (a frozen dataclass of `word` and `kind`) and `TokenKind`
  (`SYNTAX_ERROR`, `DEFAULT`, `PIPE`, `REDIRECT`, `NULL`).
- Predicates: `is_delimiter`, `is_meta_char`, `is_in_redirect_word`,
  `is_out_redirect_word`, `is_redirect_word`, and `update_quote` for
  tracking the quote in force.

### `minishell.evaluate`

- `tokenize(line, stderr)` splits a line with `split_tokens`, removes
  quote characters and gives each token its kind (`|` is a pipe, `<`,
  `<<`, `>`, `>>` are redirections). A token with an unclosed quote is
  reported as `minishell: syntax error unclosed quote` and gets the kind
  `SYNTAX_ERROR`. A line with no tokens gives one empty token.
- `evaluate(tokens, stderr)` and `evaluate_word(word)` do the quote
  removal on their own; `should_eval`, `is_change_quote_flag`,
  `is_expand`, `is_add_dollar` and `token_kind` are the helpers.

### `minishell.parser`

- `Command` holds `name`, `args`, `inputs`, `outputs`, `next_pipe`,
  `is_error` and `is_heredoc_error`. `add_word(word)` takes the first
  word as the name and later ones as arguments.
- `Redirect` pairs a target with a `RedirectKind` (`IN`, `HEREDOC`,
  `EXPANDED_HEREDOC`, `OUT_OVERWRITE`, `OUT_APPEND`);
  `redirect_kind(word)` maps `<`, `<<`, `>`, `>>` and raises
  `ValueError` for anything else.
- `add_redirect(command, operator, target, env, stderr)` attaches a
  redirection to the command's inputs or outputs. A missing target, or
  one that is itself an operator, is reported as a syntax error, marks
  the command as failed, sets the exit status to 258 and returns `None`.
- `syntax_error_in_front(token, command, env, stderr)` reports an
  unexpected leading token, marks the command and sets the status to 1.

### `minishell.builtins`

- `builtin_export` sets every `KEY=VALUE` argument, reports invalid
  names as `not a valid identifier` and returns 1 if any was invalid;
  with no arguments it prints `export: not enough arguments` and
  returns 1.
- `builtin_unset` removes the named variables.
- `builtin_exit` raises `ShellExit` with the status to leave with: the
  last exit status with no argument, the argument modulo 256 when it is
  a number fitting a signed 64-bit integer, and 255 with
  `numeric argument required` otherwise. With more than one argument it
  reports `too many arguments` and returns 1.
- `builtin_pwd` prints the working directory; `builtin_env` prints every
  variable as `KEY=VALUE` (warning on extra arguments but still
  printing).
- `is_long` and `is_valid_key` are the checks used above.

### `minishell.redirect`

- `open_output_files(outputs)` opens each output target in order
  (truncating or appending, mode 0644), closing the previous one, and
  returns the last descriptor, or `None` when there are none.
- `open_input_files(inputs)` does the same for reading.
- Both raise `RedirectError` (with `path` and `reason`) when a file
  cannot be opened.
- `check_input_files(inputs, env, stderr)` tells whether every input can
  be opened; the first failure is reported and sets the exit status to 1.
- `is_path(text)` tells whether a command name is a path: a `/` after at
  most two leading dots.

### `minishell.tempnames`

- `unused_file_name(prefix)` returns `<prefix>-NNNNNNNN` with the lowest
  eight-digit number not present on disk, raising `FileExistsError` when
  all are taken.

### `minishell.messages`

- `command_not_found`, `unclosed_quote` and `syntax_error` build the
  error texts, all prefixed with `minishell: `; `report(message, stream)`
  writes one to a stream, standard error by default.

## Example

```python
import sys

from minishell.env import Environment
from minishell.builtins import builtin_export, builtin_env
from minishell.expand import expand_env
from minishell.evaluate import tokenize

env = Environment(["HOME=/home/user", "GREETING=hello"])
builtin_export(env, ["export", "NAME=world"], sys.stdout, sys.stderr)

line = expand_env('echo "$GREETING $NAME" > out.txt', env)
for token in tokenize(line, sys.stderr):
    print(token)

builtin_env(env, ["env"], sys.stdout, sys.stderr)
```

## What this package does not do

It is a set of parts, not a shell you can run. There is no interactive
prompt or read loop, no command to start, no function that turns a token
list into a pipeline of `Command` objects, no running of external
programs or pipelines, no reading of here-documents, no `PATH` lookup,
and no `cd` or `echo` builtins.