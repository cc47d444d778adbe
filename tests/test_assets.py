from pathlib import Path

from ostengine.assets import AssetsSystem
from ostengine.levels import LogLevel, LogReceiver
from ostengine.logger import LogInstance


class _Collector(LogReceiver):
    def __init__(self):
        self.messages = []

    def log(self, msg):
        self.messages.append(msg)


def _system():
    collector = _Collector()
    return AssetsSystem(LogInstance("AssetsSystemLog", collector)), collector


def test_existing_root_is_used(tmp_path):
    system, collector = _system()
    system.set_root_path(tmp_path)
    assert system.make_asset_path("tex/a.png") == tmp_path / "tex" / "a.png"
    assert collector.messages == []


def test_missing_root_is_cleared_and_logged(tmp_path):
    system, collector = _system()
    missing = tmp_path / "nope"
    system.set_root_path(missing)
    assert system.make_asset_path("a.png") == Path("a.png")
    assert len(collector.messages) == 1
    msg = collector.messages[0]
    assert msg.level == LogLevel.WARNING
    assert msg.text() == "The provided root path does not exist, no assets will be found"
    assert [sub.text() for sub in msg.sub_messages] == [
        str(missing).replace("\\", "/")
    ]


def test_missing_root_replaces_previous_root(tmp_path):
    system, _ = _system()
    system.set_root_path(tmp_path)
    system.set_root_path(tmp_path / "gone")
    assert system.root_path == Path()