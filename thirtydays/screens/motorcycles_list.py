"""Scrollable list of motorcycle cards with a one-time entrance animation"""

from kivy.animation import Animation
from kivy.clock import Clock
from kivy.logger import Logger
from kivy.properties import ListProperty, ObjectProperty
from kivy.uix.scrollview import ScrollView

from thirtydays.lang import load_kv_path
from thirtydays.styles import Spacing
from thirtydays.widgets import MotorcycleCard

load_kv_path(__file__)


class MotorcyclesList(ScrollView):
    """One MotorcycleCard per catalog entry, in catalog order.

    On first mount the whole list fades in and every card slides up from
    below its resting place, cards further down starting further away.
    The entrance plays once per presenter: card toggles and scrolling never
    replay it. Mounting with a fresh presenter (``presenter.remount()``)
    starts over with collapsed cards.
    """

    presenter = ObjectProperty(None, allownone=True)
    cards = ListProperty([])
    entrance_animations = ListProperty([])

    def __init__(self, **kwargs):
        self._populated_for = None
        super().__init__(**kwargs)

    def on_kv_post(self, base_widget):
        self.populate()

    def on_presenter(self, instance, presenter):
        if 'card_box' in self.ids:
            self.populate()

    def populate(self):
        presenter = self.presenter
        if presenter is self._populated_for:
            return
        self._populated_for = presenter

        card_box = self.ids.card_box
        card_box.clear_widgets()
        Animation.cancel_all(self)

        if presenter is None:
            self.cards = []
            self.opacity = 1
            return

        self.cards = [MotorcycleCard(presenter=card) for card in presenter.cards]
        for card in self.cards:
            card_box.add_widget(card)

        Logger.info(f'ThirtyDays: Rendered {len(self.cards)} cards')

        if presenter.entrance_played:
            self.opacity = 1
            return

        self.opacity = 0
        Clock.schedule_once(self.play_entrance)

    def play_entrance(self, *args):
        """Start the fade and slide animations; a no-op after the first call."""
        if self.presenter is None:
            return []

        plan = self.presenter.entrance_plan(
            [card.height for card in self.cards],
            min_offset=Spacing.MIN_SLIDE_OFFSET,
            min_height=Spacing.ROW_MIN_HEIGHT,
        )
        if plan.is_empty:
            self.opacity = 1
            return []

        animations = []

        fade = plan.fade.animation(clamp=True, opacity=1)
        fade.start(self)
        animations.append(fade)

        for slide in plan.slides:
            card = self.cards[slide.position]
            card.slide_offset = slide.offset_y
            animation = slide.spring.animation(slide_offset=0)
            animation.start(card)
            animations.append(animation)

        self.entrance_animations = animations
        return animations
