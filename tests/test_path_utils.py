from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from ostengine.path_utils import normalized_path_string


def test_windows_path_uses_forward_slashes():
    assert normalized_path_string(PureWindowsPath("C:/Games/Assets")) == "C:/Games/Assets"


def test_backslashes_in_string_replaced():
    assert normalized_path_string("Logs\\Game\\run.log") == "Logs/Game/run.log"


def test_mixed_separators():
    assert normalized_path_string("dir\\sub/file.txt") == "dir/sub/file.txt"


def test_posix_path_unchanged():
    assert normalized_path_string(PurePosixPath("a/b/c")) == "a/b/c"


@pytest.mark.parametrize("raw", ["x\\y", "\\\\server\\share", "plain", ""])
def test_result_has_no_backslashes_and_is_stable(raw):
    once = normalized_path_string(raw)
    assert "\\" not in once
    assert normalized_path_string(once) == once
    assert len(once) == len(raw)


def test_accepts_path_objects(tmp_path):
    path = tmp_path / "assets"
    assert normalized_path_string(path) == str(Path(path)).replace("\\", "/")