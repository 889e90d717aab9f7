"""
Icon glyphs.
Icons are drawn as text with a font bundled with Kivy, so no icon font has
to be shipped.
"""

from kivy.lang import global_idmap

ICON_FONT = 'data/fonts/DejaVuSans.ttf'

ICONS = {
    'expand_more': '▼',
    'expand_less': '▲',
}


def icon_glyph(name):
    """Glyph for an icon name; unknown names render as an empty string."""
    return ICONS.get(name, '')


def load_icons():
    """Loads the icon font into Kivy's global_idmap."""
    global_idmap['icon_font'] = ICON_FONT
