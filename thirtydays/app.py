"""
Thirty Days application.

``run_app`` sizes the desktop window, builds ``ThirtyDaysApp`` from a
``Config`` and runs it on the trio event loop.
"""

import os

os.environ.setdefault('KIVY_NO_ARGS', '1')

import trio
from kivy.app import App
from kivy.logger import Logger
from kivy.utils import platform

from thirtydays.config import Config
from thirtydays.presenter import ListPresenter
from thirtydays.repository import MotorcycleRepository
from thirtydays.resources import AssetResolver, StringResolver
from thirtydays.theme import load_theme


class ThirtyDaysApp(App):
    """Single-screen app listing one motorcycle per day."""

    def __init__(self, app_config=None, **kwargs):
        super().__init__(**kwargs)
        self.app_config = app_config or Config()
        self.presenter = None

    def build_presenter(self):
        app_config = self.app_config

        strings = StringResolver(app_config.STRINGS_FILE, locale=app_config.LOCALE)
        assets = AssetResolver(app_config.ASSETS_DIR)

        if app_config.CATALOG_FILE:
            entries = MotorcycleRepository.load(app_config.CATALOG_FILE)
        else:
            entries = MotorcycleRepository.motorcycles()

        return ListPresenter(entries, strings, assets)

    def build(self):
        load_theme(
            dark_mode=self.app_config.DARK_MODE,
            fonts_dir=self.app_config.FONTS_DIR,
        )

        # Widget modules load their KV rules on import
        from thirtydays.screens import MotorcyclesScreen

        self.presenter = self.build_presenter()
        self.title = self.presenter.strings.resolve('app_name')
        Logger.info(
            f'ThirtyDays: Showing {len(self.presenter)} days '
            f'in locale {self.presenter.strings.locale!r}'
        )

        return MotorcyclesScreen(presenter=self.presenter, title=self.title)


def run_app(app_config=None):
    """Run the app until its window is closed."""
    app_config = app_config or Config()

    if platform != 'android':
        from kivy.core.window import Window

        Window.size = (app_config.WINDOW_WIDTH, app_config.WINDOW_HEIGHT)

    app = ThirtyDaysApp(app_config=app_config)
    trio.run(app.async_run, 'trio')
