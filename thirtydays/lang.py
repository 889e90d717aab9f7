import os
import sys

from kivy.lang import Builder
from kivy.logger import Logger
from kivy.resources import resource_add_path, resource_find


def load_kv_path(path: str, encoding='utf8', **kwargs):
    """
    Load the .kv rules that sit next to a Python module.

    The file is unloaded first if it was already loaded, so importing a
    widget module twice never registers its rules twice.

    Args:
        path: Path to the .kv file to load. Can be:
            - Direct .kv file path: 'my_widget.kv'
            - Python file path: 'my_widget.py' (auto-converts to 'my_widget.kv')
            - Compiled file path: 'my_widget.pyc' (auto-converts to 'my_widget.kv')

    Common Usage:
        widgets/
        ├── motorcycle_card.py    ← load_kv_path(__file__)
        └── motorcycle_card.kv    ← Gets loaded automatically
    """
    if path.endswith('.pyc'):
        path = path[: -len('.pyc')] + '.kv'
    elif path.endswith('.py'):
        path = path[: -len('.py')] + '.kv'

    if hasattr(sys, '_MEIPASS'):
        # Frozen builds keep package data relative to the bundle root
        resource_add_path(sys._MEIPASS)
        kv_path = resource_find(os.path.basename(path)) or path
    else:
        kv_path = os.path.abspath(path)

    if kv_path in Builder.files:
        Builder.unload_file(kv_path)

    Logger.debug(f'ThirtyDays: Loading kv rules from {kv_path}')
    with open(kv_path, 'r', encoding=encoding) as fd:
        return Builder.load_string(fd.read(), filename=kv_path, **kwargs)
