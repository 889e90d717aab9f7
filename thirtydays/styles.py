"""
Design tokens for the Thirty Days app.
Colors are declared in HSL and converted to RGBA for Kivy.
Sizes use dp/sp for screen independence.
"""

from kivy.metrics import dp, sp


def hsl_to_rgba(h, s, lightness, a=1.0):
    """Convert HSL values to RGBA for Kivy"""
    s /= 100.0
    lightness /= 100.0

    c = (1 - abs(2 * lightness - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = lightness - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0
    elif 60 <= h < 120:
        r, g, b = x, c, 0
    elif 120 <= h < 180:
        r, g, b = 0, c, x
    elif 180 <= h < 240:
        r, g, b = 0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    return (r + m, g + m, b + m, a)


def apply_opacity(color, opacity):
    """Apply opacity to any RGBA color"""
    r, g, b, _ = color
    return (r, g, b, opacity)


class LightTheme:
    """Light theme colors"""

    PRIMARY = hsl_to_rgba(14, 80, 45)  # Burnt orange
    ON_PRIMARY = hsl_to_rgba(0, 0, 100)

    SECONDARY = hsl_to_rgba(200, 35, 40)  # Steel blue
    ON_SECONDARY = hsl_to_rgba(0, 0, 100)

    SURFACE = hsl_to_rgba(30, 20, 97)  # Warm off-white
    ON_SURFACE = hsl_to_rgba(20, 10, 12)  # Near black

    CARD = hsl_to_rgba(30, 25, 92)
    CARD_SHADOW = (0, 0, 0, 0.10)


class DarkTheme:
    """Dark theme colors"""

    PRIMARY = hsl_to_rgba(14, 85, 65)
    ON_PRIMARY = hsl_to_rgba(14, 60, 12)

    SECONDARY = hsl_to_rgba(200, 40, 70)
    ON_SECONDARY = hsl_to_rgba(200, 45, 14)

    SURFACE = hsl_to_rgba(20, 8, 9)
    ON_SURFACE = hsl_to_rgba(30, 15, 90)

    CARD = hsl_to_rgba(20, 8, 15)
    CARD_SHADOW = (0, 0, 0, 0.30)


class Typography:
    """Font families and the three named text styles"""

    # Registered by theme.fonts when the TTFs are available
    FONT_FAMILY = 'Ubuntu'
    FALLBACK_FONT_FAMILY = 'Roboto'

    FONT_FILES = {
        'regular': 'Ubuntu-Regular.ttf',
        'bold': 'Ubuntu-Bold.ttf',
    }

    STYLES = {
        'display_large': {
            'font_size': sp(30),
            'bold': False,
        },
        'display_medium': {
            'font_size': sp(20),
            'bold': True,
        },
        'body_large': {
            'font_size': sp(16),
            'bold': False,
            'line_height': 1.5,  # 24sp over 16sp
        },
    }


class Spacing:
    """Layout measures shared by the card and the list"""

    CARD_PADDING = dp(16)
    CARD_MARGIN_HORIZONTAL = dp(16)
    CARD_MARGIN_VERTICAL = dp(8)
    CARD_RADIUS = dp(12)
    CARD_ELEVATION = dp(2)

    ROW_MIN_HEIGHT = dp(72)
    TOGGLE_WIDTH = dp(25)

    IMAGE_SIZE = dp(72)
    IMAGE_RADIUS = dp(8)

    QUOTE_TOP_SPACING = dp(16)
    TOP_BAR_HEIGHT = dp(64)

    # Every card slides at least this far during the entrance
    MIN_SLIDE_OFFSET = dp(1)
