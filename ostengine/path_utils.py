"""Helpers for presenting file-system paths."""

from __future__ import annotations

import os
from typing import Union


def normalized_path_string(path: Union[str, os.PathLike]) -> str:
    """The path as a string with every backslash turned into a forward slash."""
    return str(os.fspath(path)).replace("\\", "/")