# ostengine

A small game engine core. It provides:

- a threaded logger with level filtering, scoped messages and console and file sinks
  (`ostengine.levels`, `ostengine.message_queue`, `ostengine.logger`,
  `ostengine.sinks`, `ostengine.formatter`);
- command-line and config-file parsing into typed engine settings
  (`ostengine.cmdargs`, `ostengine.config_file`, `ostengine.configurations`);
- keyboard state tracking with down/up/pressed/released queries (`ostengine.input`);
- an assets system that resolves paths under a root directory (`ostengine.assets`);
- an `Engine` that owns the input and assets systems (`ostengine.engine`);
- a `GameInstance` interface and a `DemoGame` (`ostengine.game`);
- an off-screen render target, a pygame-backed window and the application main loop
  (`ostengine.rendering`, `ostengine.window`, `ostengine.application`).

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the player

```
ostengine -w 1280 -h 720 -assets-directory Assets
```

This opens a window and runs frames until the window is closed. Options recognised on
the command line:

| Option               | Meaning                          | Default         |
|----------------------|----------------------------------|-----------------|
| `-w`                 | window width                     | `1600`          |
| `-h`                 | window height                    | `900`           |
| `-game-module`       | name of the game module          | empty           |
| `-assets-directory`  | directory holding the assets     | empty           |

A command takes the word right after it as its value when that word does not start
with `-`. Values that cannot be read as the setting's type leave the setting unchanged.

After the command line, `EngineConfig.cfg` in the assets directory (the current
directory when none is given) is read if it exists. Each line is `Name = Value`; lines
starting with `[` mark a category and are skipped. Recognised names are `WinWidth`,
`WinHeight`, `GameModule` and `ProjectName`. String values may be wrapped in double
quotes.

Log output goes to standard output and to a file named
`<ProjectName> <day>-<month>-<year> <hour>-<minute>-<second>.log` (UTC) in `Logs/`.

## Using the logger

```python
from ostengine.levels import LOG_LEVELS_DEFAULT, LogLevel
from ostengine.logger import Logger, LogInstance
from ostengine.sinks import ConsoleLogSink

logger = Logger(128)
logger.register_sink(ConsoleLogSink(LOG_LEVELS_DEFAULT, None))
logger.run()

log = LogInstance("Game", logger)
log.log(LogLevel.INFO, "Loaded {} levels", 3)

log.log_scoped(LogLevel.WARNING, "Missing textures")
log.log(LogLevel.WARNING, "grass.png")   # attached as a detail of the scope
log.end_scope()

logger.signal_shutdown()
logger.await_shutdown()
```

`Logger` can also be used as a context manager, which runs it on entry and shuts it
down on exit. Its queue holds `capacity - 1` pending messages; pushing more than that
before the logging thread catches up raises `QueueOverflowError`. A `LogInstance`
created without a logger sends to the process-wide logger returned by `get_logger()`,
which is driven by `register_log_sink`, `run_logger`, `post_shutdown_signal` and
`await_shutdown`.

`FileLogSink` buffers its output and writes it to the file once more than 4096
characters are pending, and on `flush()`.

## Using the configuration

```python
from ostengine.cmdargs import CommandArgs
from ostengine.configurations import EngineConfigurations

cfg = EngineConfigurations()
cfg.parse_command_line(CommandArgs("-w 800 -h 600"))
print(cfg.window_width, cfg.window_height)  # 800 600
```

Your own settings classes can derive from `Config` and bind names to attributes with
`register(name, attribute, ValueType.INTEGER)` (or `FLAG`, `FLOAT`, `STRING`).

## Input

`InputEventProvider.report_keyboard_input` translates window key codes for letters,
digits, keypad digits, space, left/right control, left/right alt and backspace into
`Key` changes on a bound `InputSystem`. Other keys are ignored. Call
`InputSystem.new_input_frame()` to make the current key state the previous one, which
`key_pressed` and `key_released` compare against.

## What it does not do

- The `-game-module` / `GameModule` setting is read but nothing is loaded from it; the
  application does not load or run a game.
- `Engine.tick()` only counts frames, and the window draws nothing but a dark
  background and an empty, transparent GUI layer; there is no scene rendering.
- The application does not call `InputSystem.new_input_frame()` itself.