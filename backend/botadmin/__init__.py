"""Bot Admin - configuration parameters and slash-command registry for a chat bot."""

__version__ = "0.1.0"
