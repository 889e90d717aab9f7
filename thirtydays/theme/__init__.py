"""
Theme initialization for the Thirty Days app.
Loads all theme components (colors, fonts, icons) into Kivy's global_idmap.
"""

from .colors import load_color_palette
from .fonts import load_font_styles, register_fonts
from .icons import load_icons


def load_theme(dark_mode=False, fonts_dir=None):
    """
    Loads the application's theme so every value is accessible in KV files.

    Args:
        dark_mode (bool): Whether to load dark theme colors
        fonts_dir: Folder holding the Ubuntu TTFs; defaults to the packaged
            assets/fonts folder

    Usage:
        from thirtydays.theme import load_theme
        load_theme()  # Light theme
        load_theme(dark_mode=True)  # Dark theme
    """
    font_family = register_fonts(fonts_dir)
    load_color_palette(dark_mode)
    load_font_styles(font_family)
    load_icons()
