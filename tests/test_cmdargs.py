import pytest

from ostengine.cmdargs import CommandArg, CommandArgs, CommandArgType


@pytest.mark.parametrize(
    "content, expected",
    [
        ("-w", CommandArgType.COMMAND),
        ("--long", CommandArgType.COMMAND),
        ("800", CommandArgType.VALUE),
        ("", CommandArgType.VALUE),
    ],
)
def test_command_arg_type(content, expected):
    arg = CommandArg(content)
    assert arg.type is expected
    assert arg.content == content


def test_commands_pair_with_values():
    args = CommandArgs("game.exe -w 800 -h 600")
    assert list(args.commands()) == [
        ("game.exe", ""),
        ("-w", "800"),
        ("-h", "600"),
    ]


def test_command_followed_by_command_has_empty_value():
    args = CommandArgs("-fullscreen -w 10")
    assert list(args.commands()) == [("-fullscreen", ""), ("-w", "10")]


def test_trailing_command_has_empty_value():
    args = CommandArgs("app -debug")
    assert list(args.commands()) == [("app", ""), ("-debug", "")]


def test_value_after_consumed_value_stands_alone():
    args = CommandArgs("-w 1 2")
    assert list(args.commands()) == [("-w", "1"), ("2", "")]


def test_plain_values_each_reported():
    args = CommandArgs("a b c")
    assert list(args.commands()) == [("a", ""), ("b", ""), ("c", "")]


def test_control_characters_separate_words():
    args = CommandArgs("app\t-w\n7\r")
    assert [a.content for a in args.args] == ["app", "-w", "7"]
    assert list(args.commands()) == [("app", ""), ("-w", "7")]


def test_surrounding_whitespace_ignored():
    args = CommandArgs("   app   ")
    assert list(args.commands()) == [("app", "")]


def test_empty_line_has_no_commands():
    args = CommandArgs("")
    assert list(args.commands()) == []
    assert args.args == ()


def test_command_line_is_kept_whole():
    line = "player -w 1024  -h 768"
    assert CommandArgs(line).command_line == line


def test_from_argv_joins_with_spaces():
    argv = ["app", "-w", "5"]
    args = CommandArgs.from_argv(argv)
    assert args.command_line == " ".join(argv)
    assert list(args.commands()) == [("app", ""), ("-w", "5")]


def test_from_argv_matches_line_constructor():
    argv = ["player", "-game-module", "Mod", "-assets-directory", "Assets"]
    assert list(CommandArgs.from_argv(argv).commands()) == list(
        CommandArgs(" ".join(argv)).commands()
    )