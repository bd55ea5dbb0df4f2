"""Front-end support for a handheld game console emulator: options, pacing, queues, debug layout and memory inspection."""

__version__ = "0.1.0"

__all__ = ["dropping_queue", "inspect_memory", "layout", "options", "timing"]