"""Theme system: colors, mode labels and stylesheet generation."""
from .colors import THEMES, MODE_COLORS, MODE_LABELS
from .stylesheet import build_stylesheet, build_clock_stylesheet

__all__ = ["THEMES", "MODE_COLORS", "MODE_LABELS", "build_stylesheet", "build_clock_stylesheet"]
