"""aMAZEing: carve a perfect maze and walk it in the terminal."""

__version__ = "0.1.0"
