"""Styling module for HQuiz."""

from .color_palette import ColorPalette, Theme
from .styles import Styles

__all__ = ["ColorPalette", "Styles", "Theme"]
