"""Running a parsed command tree: pipes, redirections, builtins and programs."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import threading
from contextlib import ExitStack, suppress
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, TextIO

from minishell.environment import Environment
from minishell.numbers import atoi
from minishell.output import print_error
from minishell.pathsearch import get_path

_ECHO_NO_NEWLINE = re.compile(r"-n+")
_NOT_FOUND = 127
_NOT_EXECUTABLE = 126


class NodeType(Enum):
    """Kinds of node in a command tree."""

    WORD = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    REDIR_APPEND = auto()
    REDIR_HEREDOC = auto()


@dataclass
class Node:
    """A node of the command tree.

    A WORD node holds a command and its arguments. A redirection node holds
    the file name as its first argument, the command in ``left`` and an
    optional further redirection in ``right``. A PIPE node feeds the output
    of ``left`` into ``right``.
    """

    type: NodeType
    args: list[str] = field(default_factory=list)
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class ShellExit(Exception):
    """Raised by the ``exit`` builtin to end the shell with ``status``."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


@dataclass
class _Streams:
    """Current standard input and output, with the files opened for them."""

    stdin: TextIO
    stdout: TextIO
    stack: ExitStack


def _fileno(stream) -> int | None:
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _report(subject: str, exc: OSError) -> None:
    print_error("minishell: %s: %s\n", subject, exc.strerror or str(exc))


class Executor:
    """Execute command trees against an environment."""

    def __init__(
        self,
        environment: Environment,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.environment = environment
        self.stdin = stdin
        self.stdout = stdout
        self.last_status = 0
        self._builtins: dict[str, Callable[[list[str], TextIO], int]] = {
            "echo": self.echo,
            "pwd": lambda args, out: self.pwd(out),
            "export": self.export,
            "unset": lambda args, out: self.unset(args),
            "env": lambda args, out: self.env(out),
            "exit": lambda args, out: self._exit(args),
        }

    def run(self, node: Node) -> int:
        """Execute ``node`` and return its exit status."""
        stdin = self.stdin if self.stdin is not None else sys.stdin
        stdout = self.stdout if self.stdout is not None else sys.stdout
        with ExitStack() as stack:
            status = self._dispatch(node, _Streams(stdin, stdout, stack))
        self.last_status = status
        return status

    def run_command(self, node: Node, stdin: TextIO, stdout: TextIO) -> int:
        """Run the command of a WORD node as a builtin or an external program."""
        if node.type is not NodeType.WORD:
            raise ValueError(f"expected a command node, got {node.type.name}")
        if not node.args:
            return 0
        name, *args = node.args
        builtin = self._builtins.get(name)
        if builtin is not None:
            return builtin(args, stdout)
        return self._run_external(node.args, stdin, stdout)

    def echo(self, args: list[str], stdout: TextIO) -> int:
        """Print the arguments; a leading ``-n`` suppresses the newline."""
        newline = True
        if args and _ECHO_NO_NEWLINE.fullmatch(args[0]):
            newline = False
            args = args[1:]
        stdout.write(" ".join(args))
        if newline:
            stdout.write("\n")
        return 0

    def pwd(self, stdout: TextIO) -> int:
        """Print the current working directory."""
        try:
            cwd = os.getcwd()
        except OSError as exc:
            _report("pwd", exc)
            return 1
        stdout.write(cwd + "\n")
        return 0

    def env(self, stdout: TextIO) -> int:
        """Print every variable as ``KEY=VALUE``."""
        for line in self.environment.to_envp():
            stdout.write(line + "\n")
        return 0

    def unset(self, args: list[str]) -> int:
        """Remove each named variable."""
        for name in args:
            self.environment.unset(name)
        return 0

    def export(self, args: list[str], stdout: TextIO) -> int:
        """Define variables from ``KEY=VALUE`` arguments, or list them all."""
        if not args:
            for line in self.environment.export_lines():
                stdout.write(line + "\n")
            return 0
        status = 0
        for assignment in args:
            try:
                self.environment.export(assignment)
            except ValueError:
                print_error("minishell: export: `%s': not a valid identifier\n", assignment)
                status = 1
        return status

    def _exit(self, args: list[str]) -> int:
        status = atoi(args[0]) & 0xFF if args else self.last_status
        raise ShellExit(status)

    def _dispatch(self, node: Node, streams: _Streams) -> int:
        if node.type is NodeType.PIPE:
            return self._pipe(node, streams)
        if node.type in (NodeType.REDIR_IN, NodeType.REDIR_HEREDOC):
            return self._redirect(node, streams, reading=True)
        if node.type in (NodeType.REDIR_OUT, NodeType.REDIR_APPEND):
            return self._redirect(node, streams, reading=False)
        return self.run_command(node, streams.stdin, streams.stdout)

    def _redirect(self, node: Node, streams: _Streams, reading: bool) -> int:
        if not node.args:
            raise ValueError("a redirection needs a file name")
        path = node.args[0]
        try:
            if reading:
                stream = open(path, "r")
            else:
                mode = os.O_TRUNC if node.type is NodeType.REDIR_OUT else os.O_APPEND
                fd = os.open(path, os.O_WRONLY | os.O_CREAT | mode, 0o644)
                stream = os.fdopen(fd, "w")
        except OSError as exc:
            _report(path, exc)
            return 1
        streams.stack.enter_context(stream)
        if reading:
            streams.stdin = stream
        else:
            streams.stdout = stream
        status = 0
        if node.right is not None:
            status = self._dispatch(node.right, streams)
        if node.left is not None:
            status = self.run_command(node.left, streams.stdin, streams.stdout)
        return status

    def _guarded(self, node: Node, streams: _Streams) -> int:
        """Run one side of a pipeline; an ``exit`` there only ends that side."""
        try:
            return self._dispatch(node, streams)
        except ShellExit as exc:
            return exc.status
        except BrokenPipeError:
            return 1

    def _pipe(self, node: Node, streams: _Streams) -> int:
        if node.left is None or node.right is None:
            raise ValueError("a pipe needs a command on each side")
        read_fd, write_fd = os.pipe()
        reader = os.fdopen(read_fd, "r")
        writer = os.fdopen(write_fd, "w")

        def producer() -> None:
            try:
                with ExitStack() as stack:
                    self._guarded(node.left, _Streams(streams.stdin, writer, stack))
            finally:
                with suppress(OSError):
                    writer.close()

        thread = threading.Thread(target=producer, daemon=True)
        thread.start()
        try:
            with ExitStack() as stack:
                status = self._guarded(node.right, _Streams(reader, streams.stdout, stack))
        finally:
            with suppress(OSError):
                reader.close()
            thread.join()
        return status

    def _resolve(self, name: str) -> str | None:
        if "/" in name:
            return name
        path = get_path(name, self.environment.to_envp())
        if path is None and "PATH" in self.environment:
            print_error("minishell: %s: command not found\n", name)
        return path

    def _run_external(self, argv: list[str], stdin: TextIO, stdout: TextIO) -> int:
        path = self._resolve(argv[0])
        if path is None:
            return _NOT_FOUND
        options: dict = {}
        in_fd = _fileno(stdin)
        if in_fd is None:
            data = stdin.read() if stdin is not None else ""
            options["input"] = data.encode() if isinstance(data, str) else data
        else:
            options["stdin"] = in_fd
        out_fd = _fileno(stdout)
        if out_fd is None:
            options["stdout"] = subprocess.PIPE
        else:
            stdout.flush()
            options["stdout"] = out_fd
        env = {key: self.environment.get(key) or "" for key in self.environment}
        try:
            completed = subprocess.run(argv, executable=path, env=env, check=False, **options)
        except FileNotFoundError as exc:
            _report(argv[0], exc)
            return _NOT_FOUND
        except OSError as exc:
            _report(argv[0], exc)
            return _NOT_EXECUTABLE
        if out_fd is None and completed.stdout:
            stdout.write(completed.stdout.decode(errors="replace"))
        code = completed.returncode
        return 128 - code if code < 0 else code


def execute(node: Node, environment: Environment) -> int:
    """Run ``node`` on the process's standard streams and return its status."""
    return Executor(environment).run(node)