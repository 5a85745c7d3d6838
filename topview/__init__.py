"""Building blocks for a process viewer: attributed strings, column formatting, panels, meters and signal lists."""

__version__ = "0.1.0"