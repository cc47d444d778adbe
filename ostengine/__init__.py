"""Game engine core: logging, configuration, input, assets and an application window."""

__version__ = "0.1.0"