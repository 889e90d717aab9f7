"""
Font and typography management.
Registers the Ubuntu font family and loads the named text styles into
Kivy's global_idmap.
"""

from pathlib import Path

from kivy.core.text import LabelBase
from kivy.lang import global_idmap
from kivy.logger import Logger

from thirtydays.styles import Spacing, Typography

DEFAULT_FONTS_DIR = Path(__file__).parent.parent / 'assets' / 'fonts'


def register_fonts(fonts_dir=None):
    """
    Register the Ubuntu family with Kivy if its TTFs are present.

    Returns:
        str: The font family name to use in labels
    """
    fonts_dir = Path(fonts_dir) if fonts_dir else DEFAULT_FONTS_DIR
    regular = fonts_dir / Typography.FONT_FILES['regular']
    bold = fonts_dir / Typography.FONT_FILES['bold']

    if not regular.is_file():
        Logger.info(
            f'ThirtyDays: {regular.name} not found in {fonts_dir}, '
            f'using {Typography.FALLBACK_FONT_FAMILY}'
        )
        return Typography.FALLBACK_FONT_FAMILY

    LabelBase.register(
        name=Typography.FONT_FAMILY,
        fn_regular=str(regular),
        fn_bold=str(bold) if bold.is_file() else None,
    )
    Logger.info(f'ThirtyDays: Registered font family {Typography.FONT_FAMILY}')
    return Typography.FONT_FAMILY


def load_font_styles(font_family=Typography.FALLBACK_FONT_FAMILY):
    """
    Loads the typography and spacing values into Kivy's global_idmap.

    Usage in KV files:
        Label:
            font_name: font_family
            font_size: display_large_font_size
            bold: display_large_bold
    """
    font_styles = {'font_family': font_family}

    for style_name, style in Typography.STYLES.items():
        font_styles[f'{style_name}_font_size'] = style['font_size']
        font_styles[f'{style_name}_bold'] = style['bold']
        font_styles[f'{style_name}_line_height'] = style.get('line_height', 1.0)

    font_styles.update({
        'card_padding': Spacing.CARD_PADDING,
        'card_margin_horizontal': Spacing.CARD_MARGIN_HORIZONTAL,
        'card_margin_vertical': Spacing.CARD_MARGIN_VERTICAL,
        'card_radius': Spacing.CARD_RADIUS,
        'card_elevation': Spacing.CARD_ELEVATION,
        'row_min_height': Spacing.ROW_MIN_HEIGHT,
        'toggle_width': Spacing.TOGGLE_WIDTH,
        'image_size': Spacing.IMAGE_SIZE,
        'image_radius': Spacing.IMAGE_RADIUS,
        'quote_top_spacing': Spacing.QUOTE_TOP_SPACING,
        'top_bar_height': Spacing.TOP_BAR_HEIGHT,
    })

    global_idmap.update(font_styles)
