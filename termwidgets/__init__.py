"""Terminal UI widgets: text prompts and scrollable views rendered into cell buffers."""

__version__ = "0.1.0"