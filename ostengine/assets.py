"""Locating asset files below a root directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from ostengine.levels import LogLevel
from ostengine.logger import LogInstance
from ostengine.path_utils import normalized_path_string

_assets_log = LogInstance("AssetsSystemLog")


class AssetsSystem:
    """Turns asset paths relative to the assets root into full paths."""

    def __init__(self, log: Optional[LogInstance] = None) -> None:
        self._root = Path()
        self._log = log or _assets_log

    @property
    def root_path(self) -> Path:
        return self._root

    def set_root_path(self, root_path: Union[str, os.PathLike]) -> None:
        """Use ``root_path`` as the root; a missing path is logged and clears it."""
        root = Path(root_path)
        if not root.exists():
            self._log.log_scoped(
                LogLevel.WARNING,
                "The provided root path does not exist, no assets will be found",
            )
            self._log.log(LogLevel.WARNING, "{}", normalized_path_string(root_path))
            self._log.end_scope()
            self._root = Path()
            return
        self._root = root

    def make_asset_path(self, relative_path: Union[str, os.PathLike]) -> Path:
        """The full path of an asset given relative to the root."""
        return self._root / relative_path