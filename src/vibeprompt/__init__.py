"""vibeprompt: turn a project idea into a build-ready specification prompt."""

__version__ = "0.1.0"
