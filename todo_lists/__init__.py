"""t: manage Today, Tomorrow and Todos lists from the terminal."""

__version__ = "0.1.0"
