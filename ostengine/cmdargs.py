"""Command-line arguments split into commands and the values that follow them."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

# A word is a run of characters that are neither spaces nor control characters.
_WORD = re.compile(r"[^\x00-\x1f ]+")


class CommandArgType(enum.Enum):
    """Whether an argument names a command or carries a value."""

    COMMAND = "command"
    VALUE = "value"


@dataclass(frozen=True)
class CommandArg:
    """One whitespace-delimited argument; a leading '-' makes it a command."""

    content: str
    type: CommandArgType = field(init=False)

    def __post_init__(self) -> None:
        kind = (
            CommandArgType.COMMAND
            if self.content.startswith("-")
            else CommandArgType.VALUE
        )
        object.__setattr__(self, "type", kind)


class CommandArgs:
    """A command line split into arguments."""

    def __init__(self, line: str) -> None:
        self._line = line
        self._args = tuple(CommandArg(word) for word in _WORD.findall(line))

    @classmethod
    def from_argv(cls, argv: Iterable[str]) -> CommandArgs:
        """Build from a sequence of arguments joined by single spaces."""
        return cls(" ".join(argv))

    @property
    def command_line(self) -> str:
        """The full, unsplit command line."""
        return self._line

    @property
    def args(self) -> tuple[CommandArg, ...]:
        """The split arguments in order."""
        return self._args

    def commands(self) -> Iterator[tuple[str, str]]:
        """Yield (name, value) pairs.

        A command takes the value directly after it; a command without one,
        and a value that no command took, are yielded with an empty value.
        """
        pending: CommandArg | None = None
        for arg in self._args:
            if pending is not None:
                if arg.type is CommandArgType.VALUE:
                    yield pending.content, arg.content
                    pending = None
                    continue
                yield pending.content, ""
                pending = None
            if arg.type is CommandArgType.COMMAND:
                pending = arg
            else:
                yield arg.content, ""
        if pending is not None:
            yield pending.content, ""