"""The application: configuration, logging, window and engine brought together."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from ostengine.cmdargs import CommandArgs
from ostengine.config_file import ConfigFile
from ostengine.configurations import EngineConfigurations
from ostengine.engine import Engine
from ostengine.logger import (
    await_shutdown,
    post_shutdown_signal,
    register_log_sink,
    run_logger,
)
from ostengine.sinks import ConsoleLogSink, FileLogSink
from ostengine.window import AppWindow

CONFIG_FILE_NAME = "EngineConfig.cfg"
LOG_DIRECTORY = Path("Logs")


class Application:
    """Sets everything up from the command line and runs the frame loop."""

    def __init__(self, args: CommandArgs) -> None:
        config = EngineConfigurations()
        config.parse_command_line(args)
        config.parse_config_file(ConfigFile(Path(config.assets_dir) / CONFIG_FILE_NAME))
        self._config = config

        self._file_sink = FileLogSink(LOG_DIRECTORY, config.project_name)
        self._console_sink = ConsoleLogSink()
        register_log_sink(self._file_sink)
        register_log_sink(self._console_sink)
        run_logger()

        self._window = AppWindow()
        self._window.create(config.window_width, config.window_height, config.project_name)
        self._window.init_gui()

        self._engine = Engine()
        self._engine.init_assets(config.assets_dir)
        self._engine.init_input(self._window.input_event_provider)
        self._engine.init_rendering(self._window.render_target)

    @property
    def config(self) -> EngineConfigurations:
        return self._config

    @property
    def window(self) -> AppWindow:
        return self._window

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def log_path(self) -> Path:
        """The file the log is written to."""
        return self._file_sink.path

    def run(self) -> None:
        """Run frames until the window closes, then shut everything down."""
        try:
            while self._window.should_remain_open():
                self._window.poll_events()
                self._window.begin_frame()
                self._engine.tick()
                self._window.end_frame()
        finally:
            self._window.destroy()
            post_shutdown_signal()
            await_shutdown()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the application with the given command-line arguments."""
    if argv is None:
        argv = sys.argv[1:]
    app = Application(CommandArgs.from_argv(argv))
    app.run()
    return 0