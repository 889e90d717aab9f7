"""Card showing one day of the catalog"""

from kivy.animation import Animation
from kivy.factory import Factory as F
from kivy.logger import Logger
from kivy.properties import (
    BooleanProperty,
    NumericProperty,
    ObjectProperty,
    StringProperty,
)
from kivy.uix.boxlayout import BoxLayout

from thirtydays.lang import load_kv_path
from thirtydays.motion import CONTENT_SIZE
from thirtydays.widgets.expand_button import ExpandButton  # noqa: F401
from thirtydays.widgets.motorcycle_image import MotorcycleImage  # noqa: F401

load_kv_path(__file__)


class MotorcycleCard(BoxLayout):
    """Day label, a row with toggle/make/image, and the quote when expanded.

    The quote label is created once and only attached to the widget tree
    while the card is expanded. Height changes caused by a toggle are
    animated with the content-size spring; the stencil in the KV rule clips
    whatever does not fit yet.

    Usage:
        card = MotorcycleCard(presenter=list_presenter.card(0))
    """

    presenter = ObjectProperty(None, allownone=True)

    day_text = StringProperty()
    toggle_icon = StringProperty('expand_more')
    toggle_description = StringProperty()
    make_text = StringProperty()
    image_source = StringProperty()
    image_description = StringProperty()
    quote_text = StringProperty()
    expanded = BooleanProperty(False)

    # Distance below the resting position, animated to 0 on entrance
    slide_offset = NumericProperty(0)

    def __init__(self, **kwargs):
        self._quote_label = None
        self._animate_resize = False
        super().__init__(**kwargs)

    def on_presenter(self, instance, presenter):
        if presenter is not None:
            self.apply(presenter.render())

    def on_kv_post(self, base_widget):
        self._quote_label = F.QuoteLabel(text=self.quote_text)
        self.bind(quote_text=self._quote_label.setter('text'))

        if self.expanded:
            self._attach_quote()

        self.height = self.minimum_height
        self.bind(minimum_height=self._on_content_height)

    def apply(self, rendered):
        """Copy a RenderedCard onto the widget properties."""
        self.day_text = rendered.day_text
        self.toggle_icon = rendered.toggle_icon
        self.toggle_description = rendered.toggle_description
        self.make_text = rendered.make_text
        self.image_source = rendered.image_source
        self.image_description = rendered.image_description
        self.quote_text = rendered.quote_text or ''
        self.expanded = rendered.expanded

    def toggle(self):
        if self.presenter is None:
            return

        self._animate_resize = True
        self.apply(self.presenter.toggle())
        Logger.debug(
            f'ThirtyDays: Day {self.presenter.day} '
            f'{"expanded" if self.expanded else "collapsed"}'
        )

    def on_expanded(self, instance, value):
        if self._quote_label is None:
            return

        if value:
            self._attach_quote()
        else:
            self._detach_quote()

    def _attach_quote(self):
        if self._quote_label.parent is None:
            self.add_widget(self._quote_label, index=0)

    def _detach_quote(self):
        if self._quote_label.parent is self:
            self.remove_widget(self._quote_label)

    def _on_content_height(self, instance, value):
        Animation.cancel_all(self, 'height')

        if not self._animate_resize:
            self.height = value
            return

        animation = CONTENT_SIZE.animation(height=value)
        animation.bind(on_complete=self._on_resize_complete)
        animation.start(self)

    def _on_resize_complete(self, animation, widget):
        self._animate_resize = False
