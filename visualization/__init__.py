"""Visualization utilities for puzzle boards."""
from .display import (
    display_comparison,
    display_tiles,
    save_comparison
)
