"""lazykeys: a searchable LazyVim keybinding cheatsheet for the terminal."""

__version__ = "0.1.0"
