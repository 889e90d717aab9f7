"""
Color theme management.
Handles loading colors into Kivy's global_idmap for KV file accessibility.
"""

from kivy.lang import global_idmap

from thirtydays.styles import DarkTheme, LightTheme, apply_opacity


def color_palette(dark_mode=False):
    """Map of KV names to RGBA colors for the selected theme."""
    colors = DarkTheme if dark_mode else LightTheme

    return {
        'primary_color': colors.PRIMARY,
        'on_primary_color': colors.ON_PRIMARY,
        'secondary_color': colors.SECONDARY,
        'on_secondary_color': colors.ON_SECONDARY,
        'surface_color': colors.SURFACE,
        'on_surface_color': colors.ON_SURFACE,
        'card_color': colors.CARD,
        'card_shadow_color': colors.CARD_SHADOW,
        'transparent': (0, 0, 0, 0),
        'apply_opacity': apply_opacity,
    }


def load_color_palette(dark_mode=False):
    """
    Loads the application's color palette into Kivy's global_idmap.

    Usage in KV files:
        Label:
            color: on_surface_color
        canvas.before:
            Color:
                rgba: secondary_color

    Args:
        dark_mode (bool): Whether to load dark theme colors
    """
    global_idmap.update(color_palette(dark_mode))
