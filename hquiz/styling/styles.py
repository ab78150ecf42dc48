"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QSpinBox, QComboBox, QListWidget {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
        """

    @staticmethod
    def get_grid_tile_style(result: bool | None, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        """Style for a question tile: neutral when open, green or red once answered."""
        base = f"font-size: {font_size}pt; padding: 12px; min-height: 48px;"
        if result is None:
            return base
        color = ColorPalette.SUCCESS if result else ColorPalette.ERROR
        return (
            base
            + f" background-color: {color.get(theme)};"
            + f" color: {ColorPalette.TEXT_ON_STATUS.get(theme)};"
        )

    @staticmethod
    def get_timer_style(font_size: int, warning: bool, blink_state: bool = False, theme: Theme = Theme.LIGHT) -> str:
        base = f"padding: 2px 6px; border-radius: 4px; font-size: {font_size}pt; font-weight: bold;"
        if not warning:
            return base
        color = ColorPalette.ERROR_BLINK if blink_state else ColorPalette.ERROR
        return base + f" color: {ColorPalette.TEXT_ON_STATUS.get(theme)}; background-color: {color.get(theme)};"

    @staticmethod
    def get_outcome_style(correct: bool, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if correct else ColorPalette.ERROR
        return f"font-size: {font_size}pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
