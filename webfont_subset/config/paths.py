"""
Filesystem path constants for the subsetting commands.

Centralizes path definitions to avoid magic strings in individual modules.
"""

from pathlib import Path

# Relative to the current working directory at run time
INPUT_DIR = Path("input")
OUTPUT_DIR = Path("output")

# File suffixes picked up by input discovery
FONT_EXTENSIONS = ("ttf", "otf", "woff", "woff2")
