"""Small utility toolkit: formatting, math helpers, logging, bitmaps, files, input and containers."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "chained",
    "console",
    "containers",
    "files",
    "flags",
    "heap",
    "input",
    "interactable",
    "mathutil",
    "strings",
]