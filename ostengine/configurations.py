"""Named settings filled in from the command line and configuration files."""

from __future__ import annotations

import enum
import math
import re
from typing import Callable, Optional, Union

from ostengine.cmdargs import CommandArgs
from ostengine.config_file import ConfigFile
from ostengine.levels import LogLevel
from ostengine.logger import LogInstance

_cfg_log = LogInstance("CfgLog")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FLOAT32_MAX = 3.4028234663852886e38

_SPACE = "[ \t\n\v\f\r]*"
_INT_PREFIX = re.compile(_SPACE + r"([+-]?[0-9]+)")
_SPECIAL_FLOAT = re.compile(_SPACE + r"([+-]?(?:inf(?:inity)?|nan))", re.IGNORECASE)
_HEX_FLOAT = re.compile(
    _SPACE
    + r"([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_DEC_FLOAT = re.compile(
    _SPACE + r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


class ValueType(enum.Enum):
    """How a registered setting's text is interpreted."""

    FLAG = "flag"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


def _parse_flag(text: str) -> Optional[bool]:
    if text == "" or text == "true":
        return True
    if text == "false":
        return False
    return None


def _parse_int(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def _parse_float(text: str) -> Optional[float]:
    match = _SPECIAL_FLOAT.match(text)
    if match is not None:
        return float(match.group(1))
    match = _HEX_FLOAT.match(text)
    if match is not None:
        value = float.fromhex(match.group(1))
    else:
        match = _DEC_FLOAT.match(text)
        if match is None:
            return None
        value = float(match.group(1))
    if math.isinf(value) or abs(value) > _FLOAT32_MAX:
        return None
    return value


def _parse_string(text: str) -> str:
    if text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


_PARSERS: dict[ValueType, Callable[[str], object]] = {
    ValueType.FLAG: _parse_flag,
    ValueType.INTEGER: _parse_int,
    ValueType.FLOAT: _parse_float,
    ValueType.STRING: _parse_string,
}


def _display(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


class Config:
    """A set of attributes that can be set by name from text values.

    Text that cannot be read as the setting's type leaves it unchanged.
    """

    def __init__(self) -> None:
        self._registered: dict[str, tuple[str, ValueType]] = {}

    def register(self, name: str, attribute: str, value_type: Union[ValueType, str]) -> None:
        """Bind the setting ``name`` to the attribute ``attribute`` of this object."""
        if not hasattr(self, attribute):
            raise AttributeError(f"{type(self).__name__} has no attribute {attribute!r}")
        self._registered[name] = (attribute, ValueType(value_type))

    def apply(self, name: str, value: str) -> bool:
        """Set the setting ``name`` from ``value``; False if the name is not registered."""
        entry = self._registered.get(name)
        if entry is None:
            return False
        attribute, value_type = entry
        parsed = _PARSERS[value_type](value)
        if parsed is not None:
            setattr(self, attribute, parsed)
        _cfg_log.log(LogLevel.INFO, "{}: {}", name, _display(getattr(self, attribute)))
        return True

    def parse_command_line(self, args: CommandArgs) -> None:
        """Apply every command and value of a command line."""
        _cfg_log.log_scoped(LogLevel.INFO, "Parsing command line")
        try:
            for name, value in args.commands():
                self.apply(name, value)
        finally:
            _cfg_log.end_scope()

    def parse_config_file(self, cfg: ConfigFile) -> None:
        """Apply every name/value pair of a configuration file."""
        _cfg_log.log_scoped(LogLevel.INFO, "Parsing config file")
        try:
            for name, value in cfg.values():
                self.apply(name, value)
        finally:
            _cfg_log.end_scope()


class EngineConfigurations(Config):
    """Settings the engine starts up with."""

    def __init__(self) -> None:
        super().__init__()
        self.window_width = 1600
        self.window_height = 900
        self.module_name = ""
        self.assets_dir = ""
        self.project_name = "OstEngineProj"

        self.register("-w", "window_width", ValueType.INTEGER)
        self.register("WinWidth", "window_width", ValueType.INTEGER)

        self.register("-h", "window_height", ValueType.INTEGER)
        self.register("WinHeight", "window_height", ValueType.INTEGER)

        self.register("-game-module", "module_name", ValueType.STRING)
        self.register("GameModule", "module_name", ValueType.STRING)

        self.register("-assets-directory", "assets_dir", ValueType.STRING)

        self.register("ProjectName", "project_name", ValueType.STRING)