"""Reading ``name = value`` configuration files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, Optional, Union

_WORD = re.compile(r"[^\x00-\x1f ]+")


def parse_config_line(line: str) -> Optional[tuple[str, str]]:
    """Parse one line into (name, value); None for blank lines and [categories].

    The name is the first word on the line. The value is the first word after
    an '=' that follows the name; it is empty when there is none.
    """
    name_match = _WORD.search(line)
    if name_match is None:
        return None
    name = name_match.group()
    if name.startswith("["):
        return None
    name_end = name_match.end()
    if name_end >= len(line):
        return name, ""
    assign = line.find("=", name_end)
    if assign < 0:
        return name, ""
    value_match = _WORD.search(line, assign + 1)
    return name, value_match.group() if value_match else ""


def _parse_text(text: str) -> list[tuple[str, str]]:
    pairs = []
    for line in text.split("\n"):
        pair = parse_config_line(line)
        if pair is not None:
            pairs.append(pair)
    return pairs


class ConfigFile:
    """The name/value pairs of a configuration file, in file order.

    A missing file gives no values.
    """

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        path = Path(path)
        if path.is_file():
            self._pairs = _parse_text(path.read_bytes().decode("utf-8", errors="replace"))
        else:
            self._pairs = []

    @classmethod
    def from_text(cls, text: str) -> ConfigFile:
        """Build from configuration text instead of a file."""
        cfg = cls.__new__(cls)
        cfg._pairs = _parse_text(text)
        return cfg

    def values(self) -> Iterator[tuple[str, str]]:
        """Yield every (name, value) pair."""
        yield from self._pairs