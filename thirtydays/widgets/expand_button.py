"""Chevron button that expands or collapses a card"""

from kivy.properties import StringProperty
from kivy.uix.behaviors import ButtonBehavior
from kivy.uix.label import Label

from thirtydays.lang import load_kv_path

load_kv_path(__file__)


class ExpandButton(ButtonBehavior, Label):
    """Icon button showing 'expand_more' or 'expand_less'."""

    icon = StringProperty('expand_more')
    content_description = StringProperty()
