# minishell

Run shell command trees from Python: pipes, file redirections, a handful of
builtins and external programs found on `PATH`. Alongside the executor come an
ordered environment store, a `PATH` search, a small `printf`, a chunked line
reader and string, number and character helpers. Only the standard library is
used.

## Modules

- `minishell.executor`
  - `NodeType`: `WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `REDIR_APPEND`,
    `REDIR_HEREDOC`.
  - `Node(type, args=[], left=None, right=None)`: a `WORD` node holds a command
    and its arguments; a redirection node holds the file name in `args[0]`, the
    command in `left` and an optional further redirection in `right`; a `PIPE`
    node feeds the output of `left` into `right`.
  - `Executor(environment, stdin=None, stdout=None)` with `run(node)` (returns
    the exit status and stores it in `last_status`) and
    `run_command(node, stdin, stdout)`. Builtins: `echo` (a leading `-n`,
    `-nn`, … drops the newline), `pwd`, `env`, `export` (no arguments lists
    `export KEY=value` lines), `unset` and `exit`, which raises
    `ShellExit(status)`. Inside a pipeline `exit` only ends its own side.
  - Other commands are started with `subprocess`; a name without `/` is looked
    up on the environment's `PATH`. A command not found gives status 127, one
    that cannot be started 126, and a program killed by a signal `128 + signal`.
  - `REDIR_OUT` truncates, `REDIR_APPEND` appends (files are created with mode
    0644); `REDIR_IN` and `REDIR_HEREDOC` both read the file named in `args[0]`.
    A file that cannot be opened is reported on standard error and gives
    status 1.
  - `execute(node, environment)`: run on the process's standard streams.
- `minishell.environment`: `Environment(items)` takes a mapping, `(key, value)`
  pairs or `KEY=value` strings and keeps first-definition order. It has `get`,
  `set`, `export("KEY=VALUE")` (a value starting with `$` is taken from that
  variable), `unset`, `lookup_variable("$NAME")`, `expand(text)`, `to_envp()`,
  `export_lines()`, `in`, iteration and `len`.
- `minishell.pathsearch`: `get_path(cmd, envp)` searches the last `PATH=` entry
  of a `KEY=value` list; `find_cmd_path(cmd, directories)` returns the first
  executable `dir/cmd`.
- `minishell.linereader`: `LineReader(source, buffer_size=42)` reads a file
  descriptor or readable stream in fixed-size chunks; `read_line()` returns the
  next line with its newline, or `None` at the end, and the reader is iterable.
- `minishell.printf`: `format_string(fmt, *args)` and `printf(fmt, *args)`
  handle `%c %s %p %d %i %u %x %X %%`, the flags `- + space # 0`, width,
  precision and `*`. `FormatSpec` describes one directive.
- `minishell.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` and
  `print_error(fmt, *args)`, which writes to standard error with `%s`
  substitution.
- `minishell.strings`: `strncmp`, `strnstr`, `strchr`, `strrchr`, `strlcpy`,
  `strlcat`, `substr`, `strtrim`, `split`, `strmapi`, `memchr`, `memcmp`.
- `minishell.numbers`: `atoi`, `itoa`, `atoi_base`, `has_prefix`,
  `digit_value`, `is_number` with 32-bit `int` wrapping.
- `minishell.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_whitespace`, `to_upper`, `to_lower`.

## Install

    pip install .

## Example

```python
from minishell.environment import Environment
from minishell.executor import Node, NodeType, execute

env = Environment({"PATH": "/usr/bin:/bin", "GREETING": "hello"})
pipeline = Node(
    NodeType.PIPE,
    left=Node(NodeType.WORD, args=["echo", "hello", "world"]),
    right=Node(NodeType.WORD, args=["tr", "a-z", "A-Z"]),
)
execute(pipeline, env)   # prints HELLO WORLD
```

```python
from minishell.printf import format_string

format_string("[%-5d|%05x|%.2s]", 42, 255, "abc")   # '[42   |000ff|ab]'
```

## What it does not do

There is no interactive shell and no command to run: the package does not read
a prompt, tokenize or parse command lines, or handle signals. Command trees
have to be built as `Node` objects. There is no `cd` builtin, and a heredoc
node does not collect input lines; it reads an existing file like `REDIR_IN`.

## Tests

    pip install .[test]
    pytest