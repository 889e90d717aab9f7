from kivy.properties import ObjectProperty, StringProperty
from kivy.uix.screenmanager import Screen

from thirtydays.lang import load_kv_path
from thirtydays.screens.motorcycles_list import MotorcyclesList  # noqa: F401

load_kv_path(__file__)


class MotorcyclesScreen(Screen):
    """Top bar with the app title above the motorcycle list"""

    presenter = ObjectProperty(None, allownone=True)
    title = StringProperty()
