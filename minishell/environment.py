"""The shell's ordered set of environment variables."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Iterable, Iterator, Union

_VARIABLE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")

Items = Union[Mapping, Iterable]


class Environment:
    """Variables kept in the order they were first defined."""

    def __init__(self, items: Items | None = None) -> None:
        self._vars: dict[str, str] = {}
        if items is None:
            return
        entries = items.items() if isinstance(items, Mapping) else items
        for entry in entries:
            if isinstance(entry, str):
                key, sep, value = entry.partition("=")
                if not sep:
                    raise ValueError(f"environment entry without '=': {entry!r}")
            else:
                key, value = entry
            self.set(key, value)

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None when it is not defined."""
        return self._vars.get(key)

    def set(self, key: str, value: str) -> None:
        """Define ``key``; an existing variable keeps its position."""
        if not key:
            raise ValueError("variable name must not be empty")
        self._vars[key] = value

    def export(self, assignment: str) -> None:
        """Apply ``KEY=VALUE``; a value starting with ``$`` is taken from another variable."""
        key, sep, value = assignment.partition("=")
        if not sep:
            raise ValueError(f"export needs KEY=VALUE, got {assignment!r}")
        if not key:
            raise ValueError(f"export needs a variable name, got {assignment!r}")
        if value.startswith("$"):
            value = self.lookup_variable(value) or ""
        self.set(key, value)

    def unset(self, key: str) -> None:
        """Remove ``key`` if it is defined."""
        self._vars.pop(key, None)

    def lookup_variable(self, ref: str) -> str | None:
        """Resolve a ``$NAME`` reference; the name ends at the first space."""
        if not ref.startswith("$"):
            raise ValueError(f"variable reference must start with '$', got {ref!r}")
        name = ref[1:].split(" ", 1)[0]
        return self._vars.get(name)

    def expand(self, text: str) -> str:
        """Replace every ``$NAME`` in ``text``; undefined names become empty."""
        return _VARIABLE.sub(lambda match: self._vars.get(match.group(1), ""), text)

    def to_envp(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` strings."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def export_lines(self) -> list[str]:
        """Return the lines the ``export`` builtin prints without arguments."""
        return [f"export {key}={value}" for key, value in self._vars.items()]

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)